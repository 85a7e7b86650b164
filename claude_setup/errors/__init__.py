"""Error taxonomy and reporting for the installer."""

from claude_setup.errors.handlers import ErrorHandler, ErrorReport
from claude_setup.errors.taxonomy import (
    BackupError,
    CloneError,
    ErrorCategory,
    SetupCancelled,
    SetupError,
    VerificationError,
)

__all__ = [
    "BackupError",
    "CloneError",
    "ErrorCategory",
    "ErrorHandler",
    "ErrorReport",
    "SetupCancelled",
    "SetupError",
    "VerificationError",
]
