"""
Email Adapter Pattern - Interface and Message Model

This module defines the message format shared by all email providers and the
contract (interface) every provider adapter must implement.
"""

from abc import ABC, abstractmethod
from email.utils import parseaddr
from typing import Optional, Dict, Any, List, Union
from dataclasses import dataclass, field


@dataclass(frozen=True)
class EmailAddress:
    """A single mailbox, optionally with a display name."""
    email: str
    name: Optional[str] = None

    @classmethod
    def parse(cls, value: Union['EmailAddress', str]) -> 'EmailAddress':
        """
        Build an EmailAddress from a string like 'Jane <jane@example.com>'.

        EmailAddress instances are returned unchanged.
        """
        if isinstance(value, EmailAddress):
            return value

        name, email = parseaddr(value)
        if not email:
            raise ValueError(f'Invalid email address: {value!r}')
        return cls(email=email, name=name or None)

    def __str__(self) -> str:
        if not self.name:
            return self.email

        name = self.name
        if ',' in name:
            name = f'"{name}"'
        return f'{name} <{self.email}>'


def _addresses(values) -> List[EmailAddress]:
    if not values:
        return []
    if isinstance(values, (str, EmailAddress)):
        values = [values]
    return [EmailAddress.parse(value) for value in values]


_ADDRESS_FIELDS = ('to', 'cc', 'bcc', 'from_email', 'reply_to')


@dataclass
class EmailMessage:
    """
    Standard email message format used across all adapters.

    Address fields accept EmailAddress objects or plain strings and are
    normalized to ordered lists of EmailAddress, on construction and on
    assignment. `from_email` and `reply_to` are lists because providers
    differ in how many entries they accept.
    `tag` is an optional provider label; adapters that have no use for it
    ignore it.
    """
    subject: str
    body: Optional[str] = None
    html_body: Optional[str] = None
    to: List[EmailAddress] = field(default_factory=list)
    cc: List[EmailAddress] = field(default_factory=list)
    bcc: List[EmailAddress] = field(default_factory=list)
    from_email: List[EmailAddress] = field(default_factory=list)
    reply_to: List[EmailAddress] = field(default_factory=list)
    tag: Optional[str] = None

    def __setattr__(self, name, value):
        # Address fields stay lists of EmailAddress, also when reassigned
        if name in _ADDRESS_FIELDS:
            value = _addresses(value)
        super().__setattr__(name, value)


@dataclass
class EmailResponse:
    """Standard response format from email providers."""
    success: bool
    message_id: Optional[str] = None
    error: Optional[str] = None
    status_code: Optional[int] = None
    error_code: Optional[int] = None
    raw_response: Optional[Any] = None


class EmailAdapter(ABC):
    """
    Abstract base class (interface) for email providers.

    Any email provider implementation must extend this class
    and implement the send_email method.
    """

    @abstractmethod
    def send_email(self, message: EmailMessage, config: Dict[str, Any]) -> EmailResponse:
        """
        Send an email using the provider's API.

        Args:
            message: EmailMessage object containing email details
            config: Provider-specific configuration (API keys, etc.)

        Returns:
            EmailResponse object with send result
        """
        pass

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return the name of this email provider."""
        pass
