"""Custom exceptions for apisplit.

This module defines a hierarchy of exceptions used throughout the apisplit library
to provide clear, actionable error messages for different failure scenarios.
"""


class ApiSplitError(Exception):
    """Base exception for all apisplit errors.

    All exceptions raised by apisplit inherit from this class, making it easy
    to catch all apisplit-related errors with a single except clause.

    Example:
        try:
            files = translate_file(document, config)
        except ApiSplitError as e:
            print(f"apisplit error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class SchemaError(ApiSplitError):
    """Base exception for schema-related errors."""

    pass


class SchemaLoadError(SchemaError):
    """Failed to load an OpenAPI document from a source.

    Attributes:
        source: The source path or URL that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load schema from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class SchemaValidationError(SchemaError):
    """Document failed OpenAPI specification validation.

    Attributes:
        source: The source path or URL of the invalid document.
        errors: List of validation error messages.
    """

    def __init__(self, source: str, errors: list[str] | None = None):
        self.source = source
        self.errors = errors or []
        message = f"Schema validation failed for '{source}'"
        if errors:
            message += f': {"; ".join(errors)}'
        super().__init__(message)


class TranslationError(ApiSplitError):
    """Failed to translate a document into declarations.

    Raised by components translators. The orchestrator never wraps or
    interprets it, so callers see exactly what the translator raised.

    Attributes:
        context: Name of the component being translated, if known.
        cause: The underlying exception that caused the failure.
    """

    def __init__(
        self, message: str, context: str | None = None, cause: Exception | None = None
    ):
        self.context = context
        self.cause = cause
        full_message = message
        if context:
            full_message = f'{message} (while translating {context})'
        if cause:
            full_message += f': {cause}'
        super().__init__(full_message)


class UnsupportedFeatureError(TranslationError):
    """The document uses a feature the translator does not support.

    Attributes:
        feature: Description of the unsupported feature.
        suggestion: Optional suggestion for a workaround.
    """

    def __init__(
        self, feature: str, suggestion: str | None = None, context: str | None = None
    ):
        self.feature = feature
        self.suggestion = suggestion
        message = f'Unsupported feature: {feature}'
        if suggestion:
            message += f'. {suggestion}'
        super().__init__(message, context=context)


class ConfigurationError(ApiSplitError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)
