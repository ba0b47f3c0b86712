"""tlgen Exception Classes

All custom exceptions carry help_text for actionable user guidance.
"""

from typing import Optional


class TLGenError(Exception):
    """Base exception for all tlgen errors

    Attributes:
        message: Human-readable error description
        help_text: Optional actionable guidance for resolving the error
    """

    def __init__(self, message: str, help_text: Optional[str] = None):
        """Initialize error with message and optional help text

        Args:
            message: Error description
            help_text: Optional remediation guidance
        """
        self.message = message
        self.help_text = help_text
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message with help text if available"""
        if self.help_text:
            return f"{self.message}\n\nHelp: {self.help_text}"
        return self.message


class LabelWriteError(TLGenError):
    """Raised when the generated labels cannot be written to disk

    Not fatal: the labels have already been printed when this happens.
    """

    def __init__(self, path: str, reason: str):
        """Initialize write error

        Args:
            path: Target file path
            reason: Underlying OS error message
        """
        message = f"Failed to write labels to '{path}': {reason}"
        help_text = "Check that the directory exists and is writable, or pick another file name"

        super().__init__(message, help_text)
        self.path = path
        self.reason = reason


class InvalidDefaultError(TLGenError):
    """Raised when a default passed on the command line fails validation"""

    def __init__(self, field: str, value: str, expected: Optional[str] = None):
        """Initialize invalid default error

        Args:
            field: Option name (e.g. "port")
            value: Rejected value
            expected: Description of the accepted format
        """
        message = f"Invalid default for {field}: '{value}'"

        help_text = f"Pass a valid --{field} value or omit the option to use the built-in default"
        if expected:
            help_text += f"\n\nExpected: {expected}"

        super().__init__(message, help_text)
        self.field = field
        self.value = value
