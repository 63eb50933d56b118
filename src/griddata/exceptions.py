# src/griddata/exceptions.py


class GridDataError(Exception):
    """Base class for all errors raised by the griddata package."""


class GridParseError(GridDataError):
    """
    Raised when the required structure of a grid document is malformed.

    Optional parts (missing arrays, missing labels, unknown editors) never
    raise; they degrade to empty values instead.
    """

    def __init__(self, message: str, path: str = "$"):
        super().__init__(f"{message} (at {path})")
        self.path = path


class ConverterRegistrationError(GridDataError):
    """Raised when a converter cannot be registered or discovered."""
