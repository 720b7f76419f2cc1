"""
WhatsApp identifier handling
Phone number ↔ JID conversion and LID reverse mapping resolution
"""

from .e164 import is_self_chat_mode, normalize_e164, to_jid, with_whatsapp_prefix
from .jid import (
    CallableLidLookup,
    JidResolver,
    JidToE164Options,
    LidLookup,
    is_lid_jid,
    is_phone_jid,
    jid_to_e164,
    resolve_jid_to_e164,
)
from .lid_mapping import (
    MappingAttempt,
    MappingStatus,
    read_lid_reverse_mapping,
    resolve_lid_mapping_dirs,
)

__all__ = [
    'CallableLidLookup',
    'JidResolver',
    'JidToE164Options',
    'LidLookup',
    'MappingAttempt',
    'MappingStatus',
    'is_lid_jid',
    'is_phone_jid',
    'is_self_chat_mode',
    'jid_to_e164',
    'normalize_e164',
    'read_lid_reverse_mapping',
    'resolve_jid_to_e164',
    'resolve_lid_mapping_dirs',
    'to_jid',
    'with_whatsapp_prefix',
]
