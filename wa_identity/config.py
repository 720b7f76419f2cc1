"""
Identity Resolution Configuration
Environment-driven settings for locating WhatsApp credential stores
"""
import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Base state directory holding credentials and LID mapping files
STATE_DIR_ENV = "WA_STATE_DIR"
DEFAULT_STATE_DIR = "~/.wa-identity"

# Optional override for the OAuth credential directory
OAUTH_DIR_ENV = "WA_OAUTH_DIR"

# Verbose diagnostics (missing LID mappings, failed lookups)
VERBOSE_ENV = "WA_VERBOSE"

CREDENTIALS_SUBDIR = "credentials"


def _parse_bool(value: str) -> bool:
    """Parse boolean from environment variable"""
    return value.strip().lower() in ('true', '1', 'yes', 'on')


def resolve_user_path(path: str) -> str:
    """
    Resolve a user-supplied path to an absolute path

    Examples:
        ~/wa/auth → /home/me/wa/auth
        ./auth → /current/dir/auth

    Args:
        path: Path as typed by a user or read from config

    Returns:
        Absolute, normalized path (blank input is returned unchanged)
    """
    trimmed = path.strip()
    if not trimmed:
        return trimmed
    return os.path.abspath(os.path.expanduser(trimmed))


@dataclass(frozen=True)
class ResolverSettings:
    """Process-wide settings consumed by the resolution components"""
    state_dir: str = DEFAULT_STATE_DIR
    oauth_dir_override: Optional[str] = None
    verbose: bool = False

    @property
    def config_dir(self) -> str:
        """Absolute base configuration directory"""
        return resolve_user_path(self.state_dir)

    @property
    def oauth_dir(self) -> str:
        """OAuth credential directory, defaulting to the credentials directory"""
        if self.oauth_dir_override and self.oauth_dir_override.strip():
            return resolve_user_path(self.oauth_dir_override)
        return self.credentials_dir

    @property
    def credentials_dir(self) -> str:
        """Default credentials directory under the base configuration directory"""
        return os.path.join(self.config_dir, CREDENTIALS_SUBDIR)


def load_settings(env_file: Optional[str] = None) -> ResolverSettings:
    """
    Load resolver settings from environment variables

    Settings are read fresh on every call so configuration changes are
    picked up by the next resolution.

    Args:
        env_file: Optional .env file loaded before reading (existing
            environment variables win)

    Returns:
        ResolverSettings instance with current configuration
    """
    if env_file:
        load_dotenv(env_file, override=False)

    settings = ResolverSettings(
        state_dir=os.getenv(STATE_DIR_ENV) or DEFAULT_STATE_DIR,
        oauth_dir_override=os.getenv(OAUTH_DIR_ENV) or None,
        verbose=_parse_bool(os.getenv(VERBOSE_ENV, 'false')),
    )

    logger.debug(
        f"Resolver settings loaded: "
        f"state_dir={settings.state_dir}, "
        f"oauth_dir={settings.oauth_dir}, "
        f"verbose={settings.verbose}"
    )

    return settings
