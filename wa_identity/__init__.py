"""
WhatsApp Identity Resolution
Converts between E.164 phone numbers and WhatsApp JIDs, including Linked IDs (LIDs)
"""

from .exceptions import InvalidPhoneNumberError, WhatsAppIdentityError
from .whatsapp import (
    CallableLidLookup,
    JidResolver,
    JidToE164Options,
    LidLookup,
    is_self_chat_mode,
    jid_to_e164,
    normalize_e164,
    resolve_jid_to_e164,
    to_jid,
    with_whatsapp_prefix,
)

__all__ = [
    'CallableLidLookup',
    'InvalidPhoneNumberError',
    'JidResolver',
    'JidToE164Options',
    'LidLookup',
    'WhatsAppIdentityError',
    'is_self_chat_mode',
    'jid_to_e164',
    'normalize_e164',
    'resolve_jid_to_e164',
    'to_jid',
    'with_whatsapp_prefix',
]
