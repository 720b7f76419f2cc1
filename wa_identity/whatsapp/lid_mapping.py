"""
LID Reverse Mapping Store
Reads lid-mapping-{lid}_reverse.json files written by the pairing/auth flow

Several credential stores may coexist (explicit auth dir, extra mapping dirs,
OAuth dir, default credentials dir). They are searched in that order and the
first directory holding a usable mapping wins. Missing, unreadable and corrupt
files are all misses; the per-directory status is kept for diagnostics only.
"""
import os
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from wa_identity.config import ResolverSettings, resolve_user_path
from wa_identity.exceptions import InvalidPhoneNumberError
from .e164 import normalize_e164

logger = logging.getLogger(__name__)


class MappingStatus(str, Enum):
    FOUND = "found"
    MISSING = "missing"
    EMPTY = "empty"  # file holds JSON null
    UNREADABLE = "unreadable"
    INVALID = "invalid"  # corrupt JSON or not a phone number


@dataclass(frozen=True)
class MappingAttempt:
    """Outcome of reading one mapping file"""
    path: str
    status: MappingStatus
    phone: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status is MappingStatus.FOUND


def lid_mapping_filename(lid: str) -> str:
    return f"lid-mapping-{lid}_reverse.json"


def resolve_lid_mapping_dirs(
    settings: ResolverSettings,
    auth_dir: Optional[str] = None,
    extra_dirs: Optional[Iterable[str]] = None,
) -> List[str]:
    """
    Build the ordered, deduplicated list of directories to search

    Priority: auth_dir, extra_dirs (in order), OAuth dir, default credentials dir.
    Entries resolving to the same absolute path are kept once, at their first
    position. Directories are not checked for existence.

    Args:
        settings: Resolver settings supplying the process-wide directories
        auth_dir: Caller's auth directory
        extra_dirs: Additional caller-supplied mapping directories

    Returns:
        List of absolute directory paths
    """
    dirs: List[str] = []

    def add_dir(directory: Optional[str]) -> None:
        if not directory:
            return
        resolved = resolve_user_path(directory)
        if resolved and resolved not in dirs:
            dirs.append(resolved)

    add_dir(auth_dir)
    for directory in extra_dirs or ():
        add_dir(directory)
    add_dir(settings.oauth_dir)
    add_dir(settings.credentials_dir)
    return dirs


def _coerce_phone(value) -> Optional[str]:
    # bool is an int subclass but never a phone number
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if isinstance(value, (str, int)):
        return str(value)
    return None


def read_mapping_file(path: str) -> MappingAttempt:
    """Read a single reverse mapping file; never raises"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
    except FileNotFoundError:
        return MappingAttempt(path, MappingStatus.MISSING)
    except (OSError, UnicodeDecodeError):
        return MappingAttempt(path, MappingStatus.UNREADABLE)

    try:
        value = json.loads(data)
    except (ValueError, RecursionError):
        return MappingAttempt(path, MappingStatus.INVALID)

    if value is None:
        return MappingAttempt(path, MappingStatus.EMPTY)

    raw_phone = _coerce_phone(value)
    if raw_phone is None:
        return MappingAttempt(path, MappingStatus.INVALID)

    try:
        phone = normalize_e164(raw_phone)
    except InvalidPhoneNumberError:
        return MappingAttempt(path, MappingStatus.INVALID)

    return MappingAttempt(path, MappingStatus.FOUND, phone)


def read_lid_reverse_mapping(lid: str, directories: Iterable[str]) -> Optional[str]:
    """
    Look up the phone number owning a LID in the given directories

    Args:
        lid: Numeric LID (without device suffix or server)
        directories: Ordered directories to search

    Returns:
        E.164 phone number from the first usable mapping, or None
    """
    filename = lid_mapping_filename(lid)
    for directory in directories:
        attempt = read_mapping_file(os.path.join(directory, filename))
        if attempt.found:
            return attempt.phone
        if attempt.status in (MappingStatus.INVALID, MappingStatus.UNREADABLE):
            logger.debug(f"Skipping {attempt.status.value} LID mapping file {attempt.path}")
    return None
