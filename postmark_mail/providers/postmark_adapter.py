"""
Postmark Email Adapter Implementation

Concrete implementation of the EmailAdapter for Postmark.
"""

from dataclasses import replace
from typing import Dict, Any
import requests
from postmark_mail.providers.email_adapter import (
    EmailAdapter,
    EmailAddress,
    EmailMessage,
    EmailResponse,
)
from postmark_mail.postmark import PostmarkClient
from postmark_mail.postmark.errors import (
    PostmarkError,
    ApiValidationError,
    AuthenticationError,
    MalformedResponseError,
    ServerError,
    UnknownError,
)
from postmark_mail import config as app_config, logger


class PostmarkAdapter(EmailAdapter):
    """Postmark implementation of the EmailAdapter interface."""

    def __init__(self):
        self._clients: Dict[str, PostmarkClient] = {}

    def get_provider_name(self) -> str:
        return "Postmark"

    def get_client(self, api_key: str) -> PostmarkClient:
        """Return the client for an API key, creating it on first use."""
        client = self._clients.get(api_key)
        if client is None:
            client = PostmarkClient(api_key)
            self._clients[api_key] = client
        return client

    def send_email(self, message: EmailMessage, config: Dict[str, Any]) -> EmailResponse:
        """
        Send email via the Postmark API.

        Args:
            message: EmailMessage with email details
            config: May contain 'postmark_key' and 'postmark_from'; the key
                falls back to POSTMARK_API_KEY from the environment

        Returns:
            EmailResponse with send result
        """
        api_key = config.get('postmark_key') or app_config.POSTMARK_API_KEY
        if not api_key:
            return EmailResponse(
                success=False,
                error='Missing Postmark API key in config'
            )

        if not message.from_email and config.get('postmark_from'):
            message = replace(message, from_email=[EmailAddress.parse(config['postmark_from'])])

        try:
            logger.debug(f'Sending email via Postmark to {len(message.to)} recipient(s)')
            response_data = self.get_client(api_key).send_email(message)

            message_id = None
            if isinstance(response_data, dict):
                message_id = response_data.get('MessageID')

            return EmailResponse(
                success=True,
                message_id=message_id,
                raw_response=response_data
            )

        except ApiValidationError as e:
            return EmailResponse(
                success=False,
                error=f'Postmark rejected the message: {e}',
                status_code=422,
                error_code=e.error_code
            )
        except AuthenticationError as e:
            return EmailResponse(success=False, error=str(e), status_code=401)
        except ServerError as e:
            return EmailResponse(success=False, error=str(e), status_code=500)
        except UnknownError as e:
            return EmailResponse(success=False, error=str(e), status_code=e.status_code)
        except MalformedResponseError as e:
            return EmailResponse(success=False, error=str(e), status_code=e.status_code)
        except PostmarkError as e:
            return EmailResponse(success=False, error=str(e))
        except requests.RequestException as e:
            logger.error(f'Postmark API request failed: {str(e)}', err=e)
            return EmailResponse(
                success=False,
                error=f'Failed to connect to Postmark API: {str(e)}'
            )
