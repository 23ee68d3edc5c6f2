"""Offers a collection of custom exceptions raised by loom-data."""


class ConfigError(Exception):
    """Base class for configuration-related errors.

    This exception is raised when the library settings cannot be loaded, e.g. an
    unknown log level was given through the environment.
    """


class ConfigValidationError(ConfigError):
    """Raised when the settings sources hold values that fail validation."""


class ModelError(ValueError):
    """Base class for model building errors.

    Attributes:
        field (str): The wire name of the offending field.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize the error with the field it refers to."""
        super().__init__(message)
        self.field = field


class InvalidParameterError(ModelError):
    """A setter received a value that fails the field validator."""

    def __init__(self, field: str, reason: str) -> None:
        """Format the message as `invalid parameter: "<field>" - <reason>`."""
        super().__init__(field, f'invalid parameter: "{field}" - {reason}')
        self.reason = reason


class MissingPropertyError(ModelError):
    """`build()` was called before a required field was set."""

    def __init__(self, field: str) -> None:
        """Format the message as `missing property: "<field>" is a required property`."""
        super().__init__(
            field, f'missing property: "{field}" is a required property'
        )
