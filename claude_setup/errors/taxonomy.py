"""Error taxonomy for the installer."""

from enum import Enum


class ErrorCategory(Enum):
    """Classification of installer faults."""

    USER_DECLINED = "user_declined"  # Overwrite not confirmed
    PERMISSION_DENIED = "permission_denied"  # Filesystem permission issues
    COMMAND_NOT_FOUND = "command_not_found"  # git missing from PATH
    NETWORK_ERROR = "network_error"  # Clone transport failures
    VERIFICATION_FAILED = "verification_failed"  # Bundle is malformed
    SYSTEM_ERROR = "system_error"  # Other environment faults


class SetupError(Exception):
    """A terminal installer fault.

    Attributes:
        category: The error category
        user_message: User-friendly error message
        context: Additional context about the error (paths, command, etc.)
    """

    category = ErrorCategory.SYSTEM_ERROR

    def __init__(
        self,
        user_message: str,
        *,
        category: ErrorCategory | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        if category is not None:
            self.category = category
        self.context = context or {}


class SetupCancelled(SetupError):
    """The user did not confirm replacing an existing installation."""

    category = ErrorCategory.USER_DECLINED


class BackupError(SetupError):
    """Moving the existing installation aside failed."""

    category = ErrorCategory.PERMISSION_DENIED


class CloneError(SetupError):
    """The git clone step failed."""

    category = ErrorCategory.NETWORK_ERROR


class VerificationError(SetupError):
    """The cloned bundle is missing expected paths."""

    category = ErrorCategory.VERIFICATION_FAILED
