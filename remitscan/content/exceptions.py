class NormalizationError(Exception):
    """Raised when a file cannot be read or converted into a content unit."""

    def __init__(self, file_name: str, cause: str) -> None:
        super().__init__(
            f"Failed to read file or unsupported type: {file_name} ({cause}). "
            "Make sure the file is intact and of a supported type."
        )
        self.file_name = file_name
        self.cause = cause
