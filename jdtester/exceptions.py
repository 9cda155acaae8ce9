"""Fatal errors raised for malformed schemas, options and diff inputs."""

from typing import Optional, Sequence, Union


class ConfigurationError(Exception):
    """Base exception for errors the caller must fix before retrying."""
    pass


class SchemaError(ConfigurationError):
    """
    Exception raised when a schema field has the wrong type.

    Attributes:
        field: Name of the offending schema field (None for the node itself)
        expected: Kind name(s) the field must resolve to
        received: Kind name the field actually resolved to
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        expected: Union[str, Sequence[str], None] = None,
        received: Optional[str] = None,
    ):
        super().__init__(f"Schema error: {message}")
        self.field = field
        self.expected = expected
        self.received = received


class DiffError(ConfigurationError):
    """Exception raised when diff is asked to recurse into unsupported containers."""
    pass
