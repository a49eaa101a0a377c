"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class ModelCatalogError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(ModelCatalogError):
    """Raised for issues related to configuration loading or validation."""


class RecordValidationError(ModelCatalogError):
    """Raised when a model record does not satisfy the record schema."""


class UnknownModelError(ModelCatalogError, KeyError):
    """Raised when a model id is not present in the catalog."""

    def __init__(self, model_id: str, suggestions: list[str] | None = None):
        self.model_id = model_id
        self.suggestions = suggestions or []
        message = f"No model with id '{model_id}' in the catalog."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class CatalogFileError(ModelCatalogError):
    """Raised when a catalog file cannot be read, parsed or written."""


class ArchiveIntegrityError(ModelCatalogError):
    """Raised when a downloaded model archive fails an integrity check."""
