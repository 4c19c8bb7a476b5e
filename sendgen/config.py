import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from sendgen.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['sendgen.yaml', 'sendgen.yml']


class TemplateConfig(BaseModel):
    """Names baked into the generated methods."""

    receiver: str = Field('r', description='Receiver name of generated methods.')
    method_name: str = Field('Send', description='Name of generated methods.')
    client: str = Field('bot', description='Name of the shared client parameter.')
    client_type: str = Field('*Client', description='Type of the client parameter.')
    client_handle: str = Field(
        'client', description='Client member passed to the dispatch function.'
    )
    application_id_field: str = Field(
        'ApplicationID',
        description='Endpoint parameter read from the client instead of the request.',
    )
    endpoint_prefix: str = Field('Endpoint', description='Prefix of endpoint helpers.')
    dispatch: str = Field('SendRequest', description='Dispatch function name.')
    rate_limit_placeholder: str = Field(
        'TODO', description='Unresolved rate limit bucket argument.'
    )
    marshal: str = Field('json.Marshal', description='Request marshal function.')
    errorf: str = Field('fmt.Errorf', description='Error wrapping function.')
    marshal_error: str = Field('ErrSendMarshal', description='Marshal error format.')
    dispatch_error: str = Field('ErrSendRequest', description='Dispatch error format.')
    service: str = Field('Discord', description='Service named in doc comments.')


class TargetConfig(BaseModel):
    """Represents a single model description to be generated."""

    source: str = Field(..., description='Path or URL to the model description.')

    output: str = Field(..., description='Path of the generated source file.')

    header: str | None = Field(
        None, description='Optional header block replacing the model header.'
    )

    header_file: str | None = Field(
        None, description='Optional file whose content replaces the model header.'
    )


class SendgenConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='SENDGEN_')

    targets: list[TargetConfig] = Field(
        ..., description='List of model descriptions to generate.'
    )

    template: TemplateConfig = Field(
        default_factory=TemplateConfig,
        description='Names used in the generated code.',
    )


def load_yaml(path: str | Path) -> dict:
    import yaml

    try:
        return yaml.safe_load(Path(path).read_text())
    except (yaml.YAMLError, OSError) as e:
        raise ConfigurationError(str(e), config_path=str(path))


def load_pyproject(path: str | Path) -> dict:
    import tomllib

    try:
        return tomllib.loads(Path(path).read_text())
    except (tomllib.TOMLDecodeError, OSError) as e:
        raise ConfigurationError(str(e), config_path=str(path))


def _validate(data: dict, path: Path) -> SendgenConfig:
    if not isinstance(data, dict):
        raise ConfigurationError('Config must be a mapping', config_path=str(path))
    try:
        # Keyword construction keeps SENDGEN_* variables as a fallback source.
        return SendgenConfig(**data)
    except ValidationError as e:
        first = e.errors()[0]
        raise ConfigurationError(
            first['msg'],
            config_path=str(path),
            field='.'.join(str(part) for part in first['loc']) or None,
        )


def get_config(path: str | None = None) -> SendgenConfig:
    """Load configuration from a file, the working directory or pyproject.toml.

    Values given in the file win over ``SENDGEN_*`` environment variables;
    the environment only fills what the file leaves out.
    """
    if path:
        if not Path(path).exists():
            raise ConfigurationError('Config file not found', config_path=path)
        return _validate(load_yaml(path) or {}, Path(path))

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        candidate = Path(cwd) / filename
        if candidate.exists():
            return _validate(load_yaml(candidate) or {}, candidate)

    candidate = Path(cwd) / 'pyproject.toml'

    if candidate.exists():
        tools = load_pyproject(candidate).get('tool', {})

        if 'sendgen' in tools:
            return _validate(tools['sendgen'], candidate)

    raise ConfigurationError('config not found')
