"""
WhatsApp JID → E.164 Resolution
Decodes phone-bearing JIDs directly and resolves Linked IDs (LIDs) through
local reverse mapping files, falling back to a live lookup capability.
"""
import re
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional, Protocol, Sequence, runtime_checkable

from wa_identity.config import ResolverSettings, load_settings
from wa_identity.utils.logging_config import log_verbose, should_log_verbose
from .lid_mapping import read_lid_reverse_mapping, resolve_lid_mapping_dirs

logger = logging.getLogger(__name__)

# 1234:1@s.whatsapp.net (device suffix optional)
PHONE_JID_PATTERN = re.compile(r"^(\d+)(?::\d+)?@(s\.whatsapp\.net|hosted)$")
LID_JID_PATTERN = re.compile(r"^(\d+)(?::\d+)?@(lid|hosted\.lid)$")
LID_SUFFIX_PATTERN = re.compile(r"(@lid|@hosted\.lid)$")


@dataclass
class JidToE164Options:
    """Per-call options for JID resolution"""
    auth_dir: Optional[str] = None
    lid_mapping_dirs: Sequence[str] = field(default_factory=tuple)
    # None follows the verbose setting; True/False force the missing-mapping log
    log_missing: Optional[bool] = None


@runtime_checkable
class LidLookup(Protocol):
    """Live LID → phone JID lookup, usually backed by the connected socket"""

    async def get_pn_for_lid(self, jid: str) -> Optional[str]:
        ...


class CallableLidLookup:
    """Adapts a plain async function to the LidLookup protocol"""

    def __init__(self, func: Callable[[str], Awaitable[Optional[str]]]):
        self._func = func

    async def get_pn_for_lid(self, jid: str) -> Optional[str]:
        return await self._func(jid)


def is_phone_jid(jid: str) -> bool:
    return bool(PHONE_JID_PATTERN.match(jid))


def is_lid_jid(jid: str) -> bool:
    return bool(LID_SUFFIX_PATTERN.search(jid))


def jid_to_e164(
    jid: str,
    options: Optional[JidToE164Options] = None,
    settings: Optional[ResolverSettings] = None,
) -> Optional[str]:
    """
    Convert a WhatsApp JID back to an E.164 phone number

    Examples:
        1234:1@s.whatsapp.net → +1234
        55512@lid → phone from lid-mapping-55512_reverse.json, if present
        120363025@g.us → None

    Args:
        jid: WhatsApp JID
        options: Mapping directories and logging override
        settings: Resolver settings (loaded from the environment if omitted)

    Returns:
        E.164 phone number, or None if the JID cannot be resolved locally
    """
    match = PHONE_JID_PATTERN.match(jid)
    if match:
        return f"+{match.group(1)}"

    lid_match = LID_JID_PATTERN.match(jid)
    if not lid_match:
        return None

    options = options or JidToE164Options()
    settings = settings or load_settings()
    lid = lid_match.group(1)

    directories = resolve_lid_mapping_dirs(settings, options.auth_dir, options.lid_mapping_dirs)
    phone = read_lid_reverse_mapping(lid, directories)
    if phone:
        return phone

    if should_log_verbose(settings, options.log_missing):
        log_verbose(logger, f"LID mapping not found for {lid}; skipping inbound message")
    return None


async def resolve_jid_to_e164(
    jid: Optional[str],
    options: Optional[JidToE164Options] = None,
    lid_lookup: Optional[LidLookup] = None,
    settings: Optional[ResolverSettings] = None,
) -> Optional[str]:
    """
    Resolve a JID to an E.164 phone number, using a live LID lookup as fallback

    Unresolvable identifiers and lookup failures yield None, never an exception.

    Args:
        jid: WhatsApp JID (None/empty returns None)
        options: Mapping directories and logging override
        lid_lookup: Live lookup capability; None disables the fallback
        settings: Resolver settings (loaded from the environment if omitted)

    Returns:
        E.164 phone number or None
    """
    if not jid:
        return None

    settings = settings or load_settings()

    direct = jid_to_e164(jid, options, settings)
    if direct:
        return direct

    if not is_lid_jid(jid):
        return None
    if lid_lookup is None:
        return None

    try:
        pn_jid = await lid_lookup.get_pn_for_lid(jid)
    except Exception as e:
        if should_log_verbose(settings):
            log_verbose(logger, f"LID mapping lookup failed for {jid}: {e}")
        return None

    # socket clients may hand back non-string results
    if not pn_jid or not isinstance(pn_jid, str):
        return None
    return jid_to_e164(pn_jid, options, settings)


class JidResolver:
    """Resolution flow bound to its settings and optional lookup capability"""

    def __init__(
        self,
        settings: Optional[ResolverSettings] = None,
        lid_lookup: Optional[LidLookup] = None,
    ):
        self.settings = settings
        self.lid_lookup = lid_lookup

    def to_phone_number(self, jid: str, options: Optional[JidToE164Options] = None) -> Optional[str]:
        return jid_to_e164(jid, options, self.settings)

    async def resolve(self, jid: Optional[str], options: Optional[JidToE164Options] = None) -> Optional[str]:
        return await resolve_jid_to_e164(jid, options, self.lid_lookup, self.settings)
