"""
Phone Number Normalization to WhatsApp JID Format
"""
import re
from typing import Iterable, Optional, Union

import phonenumbers
from phonenumbers import NumberParseException

from wa_identity.exceptions import InvalidPhoneNumberError

WHATSAPP_PREFIX = "whatsapp:"
USER_JID_SUFFIX = "@s.whatsapp.net"
ALLOW_ANY = "*"

_NON_DIGITS = re.compile(r"\D")


def _strip_prefix(number: str) -> str:
    if number.startswith(WHATSAPP_PREFIX):
        number = number[len(WHATSAPP_PREFIX):]
    return number.strip()


def normalize_e164(number: str) -> str:
    """
    Normalize a free-form phone number to E.164

    Examples:
        +1 (555) 123-4567 → +15551234567
        whatsapp:15551234567 → +15551234567

    Args:
        number: Phone number in various formats

    Returns:
        E.164 formatted phone number

    Raises:
        InvalidPhoneNumberError: If the input cannot be a phone number
    """
    digits = _NON_DIGITS.sub("", _strip_prefix(number))
    if not digits:
        raise InvalidPhoneNumberError(number, f"No digits in phone number: {number!r}")

    try:
        parsed = phonenumbers.parse(f"+{digits}", None)
    except NumberParseException as e:
        raise InvalidPhoneNumberError(number, f"Invalid phone number {number!r}: {e}") from e

    if not phonenumbers.is_possible_number(parsed):
        raise InvalidPhoneNumberError(number)

    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


def with_whatsapp_prefix(number: str) -> str:
    """Add the whatsapp: prefix unless it is already there"""
    return number if number.startswith(WHATSAPP_PREFIX) else f"{WHATSAPP_PREFIX}{number}"


def to_jid(number: str) -> str:
    """
    Convert phone number to WhatsApp JID format

    Examples:
        +79857608984 → 79857608984@s.whatsapp.net
        whatsapp:+1 (555) 123-4567 → 15551234567@s.whatsapp.net
        20886862172386@lid → 20886862172386@lid (preserve LID format)

    Args:
        number: Phone number in various formats

    Returns:
        WhatsApp JID format string

    Raises:
        InvalidPhoneNumberError: If the number cannot be normalized
    """
    without_prefix = _strip_prefix(number)

    # Already a JID (@lid, @s.whatsapp.net, @g.us, ...)
    if "@" in without_prefix:
        return without_prefix

    e164 = normalize_e164(without_prefix)
    return f"{_NON_DIGITS.sub('', e164)}{USER_JID_SUFFIX}"


def is_self_chat_mode(
    self_e164: Optional[str],
    allow_from: Optional[Iterable[Union[str, int]]] = None,
) -> bool:
    """
    Detect "self-chat mode": the gateway is logged in as the owner's own
    account and that same number is in the allow list.

    Args:
        self_e164: Phone number the gateway is logged in as
        allow_from: Configured sender allow list ("*" never counts)

    Returns:
        True if the logged-in number is explicitly allowed
    """
    if not self_e164:
        return False
    if not isinstance(allow_from, (list, tuple)) or not allow_from:
        return False

    try:
        normalized_self = normalize_e164(self_e164)
    except InvalidPhoneNumberError:
        return False

    for entry in allow_from:
        if entry == ALLOW_ANY:
            continue
        try:
            if normalize_e164(str(entry)) == normalized_self:
                return True
        except InvalidPhoneNumberError:
            continue
    return False
