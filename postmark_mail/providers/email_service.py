"""
Email Service - Factory and Facade

This module provides a simple interface for sending emails without
knowing which adapter is being used. It handles adapter selection
and provides a clean API for the rest of the application.
"""

from typing import Dict, Any, Optional, List, Union
from postmark_mail.providers.email_adapter import (
    EmailAdapter,
    EmailAddress,
    EmailMessage,
    EmailResponse,
)
from postmark_mail.providers.postmark_adapter import PostmarkAdapter
from postmark_mail import logger

Addresses = Union[str, EmailAddress, List[Union[str, EmailAddress]]]


class EmailService:
    """
    Email service that manages adapters and provides a unified interface.

    This is the main class that business logic should use to send emails.
    """

    # Registry of available adapters
    ADAPTERS = {
        'postmark': PostmarkAdapter
    }

    def __init__(self, provider: str = 'postmark'):
        """
        Initialize email service with specified provider.

        Args:
            provider: Name of email provider ('postmark', or a registered one)
        """
        self.provider = provider.lower()
        self.adapter = self._get_adapter(self.provider)

    def _get_adapter(self, provider: str) -> EmailAdapter:
        """
        Get the appropriate adapter for the provider.

        Raises:
            ValueError: If provider is not supported
        """
        adapter_class = self.ADAPTERS.get(provider)
        if not adapter_class:
            available = ', '.join(self.ADAPTERS.keys())
            raise ValueError(
                f'Unsupported email provider: {provider}. '
                f'Available providers: {available}'
            )

        return adapter_class()

    def send_email(
        self,
        to: Addresses,
        subject: str,
        body: Optional[str],
        config: Dict[str, Any],
        from_email: Optional[Addresses] = None,
        html_body: Optional[str] = None,
        reply_to: Optional[Addresses] = None,
        cc: Optional[Addresses] = None,
        bcc: Optional[Addresses] = None,
        tag: Optional[str] = None
    ) -> EmailResponse:
        """
        Send an email using the configured provider.

        Args:
            to: Recipient address(es)
            subject: Email subject
            body: Plain text email body
            config: Provider configuration (API keys, etc.)
            from_email: Optional sender address
            html_body: Optional HTML body
            reply_to: Optional reply-to address
            cc: Optional CC recipients
            bcc: Optional BCC recipients
            tag: Optional provider tag

        Returns:
            EmailResponse with send result
        """
        message = EmailMessage(
            subject=subject,
            body=body,
            html_body=html_body,
            to=to,
            cc=cc,
            bcc=bcc,
            from_email=from_email,
            reply_to=reply_to,
            tag=tag
        )

        recipients = [str(address) for address in message.to]
        logger.info(
            f'Sending email via {self.adapter.get_provider_name()}',
            to=recipients,
            subject=subject
        )

        response = self.adapter.send_email(message, config)

        if response.success:
            logger.info(
                f'Email sent successfully via {self.adapter.get_provider_name()}',
                message_id=response.message_id,
                to=recipients
            )
        else:
            logger.error(
                f'Email send failed via {self.adapter.get_provider_name()}',
                error=response.error,
                to=recipients
            )

        return response

    @classmethod
    def register_adapter(cls, provider: str, adapter_class: type):
        """
        Register a new email adapter at runtime.

        Args:
            provider: Provider name (e.g., 'custom_provider')
            adapter_class: Class that implements EmailAdapter
        """
        if not isinstance(adapter_class, type) or not issubclass(adapter_class, EmailAdapter):
            raise TypeError(f'{adapter_class} must implement EmailAdapter')

        cls.ADAPTERS[provider.lower()] = adapter_class
        logger.info(f'Registered email adapter: {provider}')


def create_email_service(config: Dict[str, Any]) -> EmailService:
    """
    Factory function to create EmailService from configuration.

    Priority: explicit 'email_provider' setting, then check which keys exist.

    Example:
        >>> config = {'email_provider': 'postmark', 'postmark_key': 'xxx'}
        >>> service = create_email_service(config)
        >>> response = service.send_email(to='user@example.com', ...)
    """
    provider = config.get('email_provider')

    if not provider:
        provider = 'postmark'
        if not config.get('postmark_key'):
            logger.warn('No email provider configured, defaulting to Postmark')

    return EmailService(provider=provider)
