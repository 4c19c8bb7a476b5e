"""Errors raised around code generation.

Generation itself never raises: a malformed model yields malformed Go text.
Everything here comes from the edges of a run, where a model description is
read, a config file is parsed or the generated file is written.
"""


class SendgenError(Exception):
    """Root of the errors a sendgen run can end with.

    The CLI reports any of these as a single ``Error:`` line and exits 1.

    Example:
        try:
            Codegen(target).generate()
        except SendgenError as e:
            print(e.message)
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ModelError(SendgenError):
    """A model description could not be turned into a ``Setup``."""

    pass


class ModelLoadError(ModelError):
    """The model description at ``source`` could not be read or parsed.

    Attributes:
        source: File path or URL of the description.
        cause: The read, HTTP or YAML/JSON error behind the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Cannot read model description '{source}'"
        if cause:
            message += f' ({cause})'
        super().__init__(message)


class ModelValidationError(ModelError):
    """The description parsed but does not describe valid Functions.

    Attributes:
        source: File path or URL of the description.
        errors: One ``location: reason`` entry per rejected value.
    """

    def __init__(self, source: str, errors: list[str] | None = None):
        self.source = source
        self.errors = errors or []
        message = f"Invalid model description '{source}'"
        if errors:
            message += f': {"; ".join(errors)}'
        super().__init__(message)


class ConfigurationError(SendgenError):
    """A target or template setting is missing, unreadable or invalid.

    Attributes:
        config_path: The config or header file involved, if any.
        field: Dotted name of the offending setting, e.g. ``targets.0.output``.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = f'{config_path}: {message}' if config_path else message
        if field:
            full_message += f' [{field}]'
        super().__init__(full_message)


class OutputError(SendgenError):
    """The generated source could not be written to the target output.

    Attributes:
        output_path: Destination of the generated file.
        cause: The filesystem error behind the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Cannot write generated source to '{output_path}'"
        if cause:
            message += f' ({cause})'
        super().__init__(message)
