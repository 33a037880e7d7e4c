class ComparisonError(ValueError):
    pass


class SnapshotValidationError(ValueError):
    """Raised when an environment snapshot or catalog file fails schema validation."""

    def __init__(self, message: str, path: str | None = None, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.errors = errors or []
