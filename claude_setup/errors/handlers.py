"""Error classification and reporting for the installer."""

from dataclasses import dataclass

from claude_setup.errors.taxonomy import ErrorCategory, SetupError


@dataclass
class ErrorReport:
    """What to tell the user about a fault.

    Attributes:
        category: The error category
        message: Human-readable message about the fault
        suggestion: Optional suggestion for user action
    """

    category: ErrorCategory
    message: str
    suggestion: str | None = None


SUGGESTIONS = {
    ErrorCategory.USER_DECLINED: None,
    ErrorCategory.PERMISSION_DENIED: (
        "Check permissions on {path}:\n"
        "  ls -la {path}\n"
        "Then run the installer again."
    ),
    ErrorCategory.COMMAND_NOT_FOUND: (
        "git is required. Install it (e.g. `sudo apt install git` or "
        "`brew install git`) and run the installer again."
    ),
    ErrorCategory.NETWORK_ERROR: (
        "Please check the URL and your network connection, then try again."
        "{backup_hint}"
    ),
    ErrorCategory.VERIFICATION_FAILED: (
        "The repository does not look like a Claude Code configuration bundle. "
        "Please check the installation at {path}."
    ),
    ErrorCategory.SYSTEM_ERROR: "Check the error message above and try again.",
}


class ErrorHandler:
    """Central error handler for installer faults.

    Every fault is terminal for the invocation; the handler only classifies
    errors and builds the message shown to the user.
    """

    def classify_error(self, error: Exception, context: dict | None = None) -> SetupError:
        """Classify an exception into a SetupError.

        Args:
            error: The exception to classify
            context: Optional additional context about the error

        Returns:
            SetupError with a category and user message
        """
        context = context or {}

        if isinstance(error, SetupError):
            error.context = {**context, **error.context}
            return error

        if isinstance(error, PermissionError):
            return SetupError(
                f"Permission denied: {error.filename or context.get('path', 'unknown')}",
                category=ErrorCategory.PERMISSION_DENIED,
                context=context,
            )

        error_str = str(error).lower()

        if "permission denied" in error_str or "access denied" in error_str:
            return SetupError(
                f"Permission denied: {error}",
                category=ErrorCategory.PERMISSION_DENIED,
                context=context,
            )

        if any(x in error_str for x in ["timeout", "connection", "network", "unreachable"]):
            return SetupError(
                f"Network error: {error}",
                category=ErrorCategory.NETWORK_ERROR,
                context=context,
            )

        return SetupError(
            f"Unexpected error: {error}",
            category=ErrorCategory.SYSTEM_ERROR,
            context=context,
        )

    def describe(self, error: Exception, context: dict | None = None) -> ErrorReport:
        """Build the report shown to the user for an error.

        Args:
            error: The exception to describe
            context: Optional additional context about the error

        Returns:
            ErrorReport with message and suggestion
        """
        classified = self.classify_error(error, context)
        template = SUGGESTIONS.get(classified.category)

        suggestion = None
        if template:
            backup_dir = classified.context.get("backup_dir")
            backup_hint = (
                f"\nYour previous configuration is preserved at {backup_dir}."
                if backup_dir
                else ""
            )
            suggestion = template.format(
                path=classified.context.get("path", "the target directory"),
                backup_hint=backup_hint,
            )

        return ErrorReport(
            category=classified.category,
            message=classified.user_message,
            suggestion=suggestion,
        )
