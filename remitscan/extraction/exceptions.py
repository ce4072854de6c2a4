class ExtractionError(Exception):
    """Raised when the extraction step fails."""


class ExtractionEmptyError(ExtractionError):
    """Raised when the backend returns nothing usable."""


class ExtractionNetworkError(ExtractionEmptyError):
    """Raised when the backend call fails due to network/infrastructure issues."""


class ExtractionParseError(ExtractionError):
    """Raised when the backend payload cannot be parsed into the field schema."""
