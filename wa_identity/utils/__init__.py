"""
Utility modules for identity resolution.
"""
from wa_identity.utils.logging_config import (
    configure_logging,
    log_verbose,
    should_log_verbose,
)

__all__ = [
    "configure_logging",
    "log_verbose",
    "should_log_verbose",
]
