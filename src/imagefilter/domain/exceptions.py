"""Domain exceptions: all public errors of imagefilter.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application use these, not define their own public exceptions.
"""


class ImageFilterError(Exception):
    """Base for all imagefilter error exceptions.

    Allows: except ImageFilterError to catch all library errors.
    """


class InvalidPatternError(ImageFilterError, ValueError):
    """Regex criterion failed to compile.

    Raised at evaluation time, when the pattern is first applied to a candidate.
    Inherits ValueError for semantic correctness (bad value supplied by caller).
    Preserves original re.error via __cause__.

    Attributes:
        pattern: Pattern that failed.
        reason: Error description from the regex engine.
    """

    def __init__(self, *, pattern: str, reason: str) -> None:
        """Initialize with pattern and error reason."""
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid regex {pattern!r}: {reason}")


class MissingArgumentError(ImageFilterError, ValueError):
    """Required builder argument was None or empty.

    FAIL-FIRST: raised when the setter is called, not when the spec is evaluated.

    Attributes:
        argument: Name of the missing argument.
    """

    def __init__(self, argument: str) -> None:
        """Initialize with argument name."""
        self.argument = argument
        super().__init__(f"{argument} must not be None or empty")


class InvalidConfigError(ImageFilterError, ValueError):
    """Configuration value out of range.

    Attributes:
        field: Name of invalid field.
        value: Rejected value.
    """

    def __init__(self, field: str, value: object, reason: str) -> None:
        """Initialize with field, value and reason."""
        self.field = field
        self.value = value
        super().__init__(f"{field} {reason}, got {value!r}")
