"""
Request Builder - maps messages and query arguments to Postmark API requests

Every function here is pure: it validates its inputs against Postmark's rules
and returns an ApiRequest describing the call. Nothing is sent.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any, Iterable

from postmark_mail.providers.email_adapter import EmailMessage
from postmark_mail.postmark.errors import ValidationError

RECIPIENT_LIMIT = 20

BOUNCE_TYPES = (
    'HardBounce',
    'Transient',
    'Unsubscribe',
    'Subscribe',
    'AutoResponder',
    'AddressChange',
    'DnsError',
    'SpamNotification',
    'OpenRelayTest',
    'Unknown',
    'SoftBounce',
    'VirusNotification',
    'ChallengeVerification',
    'BadEmailAddress',
    'SpamComplaint',
    'ManuallyDeactivated',
    'Unconfirmed',
    'Blocked',
)


@dataclass(frozen=True)
class ApiRequest:
    """Description of a single Postmark API call."""
    method: str
    path: str
    body: Optional[Dict[str, str]] = None
    params: Optional[Dict[str, Any]] = None


def _join(addresses) -> str:
    return ','.join(str(address) for address in addresses)


def build_send_email(message: EmailMessage) -> ApiRequest:
    """
    Build the POST /email request for a message.

    Raises:
        ValidationError: sender_count_invalid, cc_limit_exceeded,
            bcc_limit_exceeded or reply_to_count_invalid
    """
    if len(message.cc) > RECIPIENT_LIMIT:
        raise ValidationError(
            'cc_limit_exceeded',
            f'Limitation exceeded for CC recipients ({len(message.cc)} > {RECIPIENT_LIMIT})'
        )
    if len(message.bcc) > RECIPIENT_LIMIT:
        raise ValidationError(
            'bcc_limit_exceeded',
            f'Limitation exceeded for BCC recipients ({len(message.bcc)} > {RECIPIENT_LIMIT})'
        )
    if len(message.from_email) != 1:
        raise ValidationError(
            'sender_count_invalid',
            'Postmark requires exactly one registered and confirmed from address'
        )
    if len(message.reply_to) > 1:
        raise ValidationError(
            'reply_to_count_invalid',
            'Postmark supports only one reply-to address'
        )

    payload = {'Subject': message.subject}
    if message.html_body is not None:
        payload['HtmlBody'] = message.html_body
    if message.body is not None:
        payload['TextBody'] = message.body

    payload['To'] = _join(message.to)
    if message.cc:
        payload['Cc'] = _join(message.cc)
    if message.bcc:
        payload['Bcc'] = _join(message.bcc)

    payload['From'] = str(message.from_email[0])

    if message.reply_to:
        payload['ReplyTo'] = str(message.reply_to[0])

    if message.tag is not None:
        payload['Tag'] = message.tag

    return ApiRequest(method='POST', path='/email', body=payload)


def filter_null_params(params: Dict[str, Any], exceptions: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Drop None values from a parameter mapping.

    Keys listed in `exceptions` are kept even when their value is None.
    """
    return {
        key: value
        for key, value in params.items()
        if value is not None or key in exceptions
    }


def _query_value(value):
    # Postmark expects lowercase booleans in the query string
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return value


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def build_bounce_query(
    count: int,
    offset: int,
    type: Optional[str] = None,
    inactive: Optional[bool] = None,
    email_filter: Optional[str] = None
) -> ApiRequest:
    """
    Build the GET /bounces request.

    Raises:
        ValidationError: invalid_count or invalid_offset when the paging
            arguments are missing or out of range, unsupported_bounce_type
            when `type` is not one of BOUNCE_TYPES
    """
    if not _is_int(count) or count < 1:
        raise ValidationError('invalid_count', f'count must be a positive integer, got {count!r}')
    if not _is_int(offset) or offset < 0:
        raise ValidationError('invalid_offset', f'offset must be a non-negative integer, got {offset!r}')
    if type is not None and type not in BOUNCE_TYPES:
        raise ValidationError(
            'unsupported_bounce_type',
            f'Type {type} is not a supported filter'
        )

    params = {'count': count, 'offset': offset}
    params.update(filter_null_params({
        'type': type,
        'inactive': inactive,
        'emailFilter': email_filter,
    }))
    params = {key: _query_value(value) for key, value in params.items()}

    return ApiRequest(method='GET', path='/bounces', params=params)


def _bounce_path(bounce_id, suffix: str = '') -> str:
    if bounce_id is None or str(bounce_id) == '':
        raise ValidationError('bounce_id_required', 'A bounce id is required')
    return f'/bounces/{bounce_id}{suffix}'


def build_get_bounce(bounce_id) -> ApiRequest:
    return ApiRequest(method='GET', path=_bounce_path(bounce_id))


def build_bounce_dump(bounce_id) -> ApiRequest:
    return ApiRequest(method='GET', path=_bounce_path(bounce_id, '/dump'))


def build_bounce_tags() -> ApiRequest:
    return ApiRequest(method='GET', path='/bounces/tags')


def build_activate_bounce(bounce_id) -> ApiRequest:
    return ApiRequest(method='PUT', path=_bounce_path(bounce_id, '/activate'))


def build_delivery_stats() -> ApiRequest:
    return ApiRequest(method='GET', path='/deliverystats')
