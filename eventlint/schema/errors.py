"""Exceptions raised while loading or querying process models."""


class ModelError(Exception):
    """Base class for eventlint model errors."""


class SchemaLoadError(ModelError):
    """Raised when a process definition file cannot be read or parsed."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class SchemaValidationError(ModelError):
    """Raised when a process definition does not match the model schema."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class UnknownProcessError(ModelError, KeyError):
    """Raised when a process id is not part of the model."""

    def __init__(self, process_id: str):
        self.process_id = process_id
        super().__init__(f"Unknown process: {process_id}")

    def __str__(self) -> str:
        return f"Unknown process: {self.process_id}"
