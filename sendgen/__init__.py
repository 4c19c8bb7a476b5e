"""sendgen - Generate request Send methods from a request/response model.

sendgen reads a description of Functions, each mapping one request type to
one or more response types, and emits a Go ``Send`` method per Function:
marshal the request, dispatch it through the shared client and return the
result or an error.

Quick Start:
    >>> from sendgen import Field, Function, Setup, generate
    >>>
    >>> request = Field(
    ...     definition='*GetGuild',
    ...     fields=[Field(name='GuildID', definition='Snowflake')],
    ... )
    >>> setup = Setup(
    ...     header='package wrapper',
    ...     functions=[Function(from_=request, to=[Field(definition='*Guild'), Field(definition='error')])],
    ... )
    >>> source = generate(setup)

CLI Usage:
    $ sendgen generate --config sendgen.yaml
"""

from importlib.metadata import PackageNotFoundError, version

from sendgen.codegen import FunctionEmitter, Generator, ResponseArity, generate
from sendgen.codegen.codegen import Codegen
from sendgen.config import SendgenConfig, TargetConfig, TemplateConfig, get_config
from sendgen.exceptions import (
    ConfigurationError,
    ModelError,
    ModelLoadError,
    ModelValidationError,
    OutputError,
    SendgenError,
)
from sendgen.loader import ModelLoader, load_setup
from sendgen.models import Field, Function, Setup

__all__ = [
    # Model
    'Field',
    'Function',
    'Setup',
    # Generation
    'FunctionEmitter',
    'Generator',
    'ResponseArity',
    'generate',
    'Codegen',
    'ModelLoader',
    'load_setup',
    # Configuration
    'SendgenConfig',
    'TargetConfig',
    'TemplateConfig',
    'get_config',
    # Exceptions
    'SendgenError',
    'ModelError',
    'ModelLoadError',
    'ModelValidationError',
    'ConfigurationError',
    'OutputError',
]

try:
    __version__ = version('sendgen')
except PackageNotFoundError:
    __version__ = 'unknown'
