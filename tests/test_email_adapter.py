"""Tests for the shared email message model."""

import pytest

from postmark_mail.providers.email_adapter import EmailAddress, EmailMessage


class TestEmailAddress:
    """Tests for EmailAddress parsing and rendering."""

    def test_bare_email_renders_without_brackets(self):
        assert str(EmailAddress('jane@example.com')) == 'jane@example.com'

    def test_named_address_renders_name_and_email(self):
        address = EmailAddress('jane@example.com', 'Jane Doe')
        assert str(address) == 'Jane Doe <jane@example.com>'

    def test_name_with_comma_is_quoted(self):
        address = EmailAddress('jane@example.com', 'Doe, Jane')
        assert str(address) == '"Doe, Jane" <jane@example.com>'

    def test_parse_string_with_display_name(self):
        address = EmailAddress.parse('Jane Doe <jane@example.com>')
        assert address == EmailAddress('jane@example.com', 'Jane Doe')

    def test_parse_bare_string(self):
        address = EmailAddress.parse('jane@example.com')
        assert address.email == 'jane@example.com'
        assert address.name is None

    def test_parse_returns_existing_instance(self):
        address = EmailAddress('jane@example.com')
        assert EmailAddress.parse(address) is address

    def test_parse_rejects_empty_value(self):
        with pytest.raises(ValueError):
            EmailAddress.parse('')


class TestEmailMessage:
    """Tests for EmailMessage normalization."""

    def test_single_string_becomes_list(self):
        message = EmailMessage(subject='Hi', to='jane@example.com')
        assert message.to == [EmailAddress('jane@example.com')]

    def test_missing_lists_default_to_empty(self):
        message = EmailMessage(subject='Hi', cc=None)
        assert message.cc == []
        assert message.bcc == []
        assert message.reply_to == []
        assert message.from_email == []

    def test_order_is_preserved(self):
        message = EmailMessage(subject='Hi', to=['c@x.com', 'a@x.com', 'b@x.com'])
        assert [a.email for a in message.to] == ['c@x.com', 'a@x.com', 'b@x.com']

    def test_tag_defaults_to_none(self):
        assert EmailMessage(subject='Hi').tag is None

    def test_reassigned_address_field_is_normalized(self):
        message = EmailMessage(subject='Hi')

        message.from_email = 'Sender <sender@example.com>'
        message.cc = ['c2@x.com', 'c1@x.com']

        assert message.from_email == [EmailAddress('sender@example.com', 'Sender')]
        assert message.cc == [EmailAddress('c2@x.com'), EmailAddress('c1@x.com')]

    def test_reassigning_none_clears_field(self):
        message = EmailMessage(subject='Hi', bcc='b@x.com')
        message.bcc = None
        assert message.bcc == []
