"""Exceptions that can be raised by the randomoutputpy package."""

# mypy: ignore-errors


class OutputRegistrationError(Exception):
    """Output registration error."""

    def __init__(self, message):
        """Call the base class constructor."""
        super().__init__(message)


class InvalidConfigError(Exception):
    """Invalid config error."""

    def __init__(self, message):
        """Call the base class constructor."""
        super().__init__(message)
