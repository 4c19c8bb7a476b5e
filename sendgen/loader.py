"""Loading of model descriptions.

A model description is a YAML or JSON document with a ``header`` string and
a ``functions`` list, read from a local path or an http(s) URL and
validated into a ``Setup``.
"""

import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import httpx
import yaml
from pydantic import ValidationError

from sendgen.exceptions import ModelLoadError, ModelValidationError
from sendgen.models import Setup

logger = logging.getLogger(__name__)

__all__ = ['ModelLoader', 'load_setup']


class ModelLoader:
    """Loads model descriptions from URLs or file paths.

    Example:
        >>> loader = ModelLoader()
        >>> setup = loader.load('./requests.yaml')
        >>> # or
        >>> setup = loader.load('https://example.com/requests.json')
    """

    def __init__(self, http_client: httpx.Client | None = None):
        """Initialize the model loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
                        If not provided, a default client will be created.
        """
        self._http_client = http_client

    def load(self, source: str) -> Setup:
        """Load and validate a model description.

        Args:
            source: URL or file path of the description.

        Returns:
            The validated Setup.

        Raises:
            ModelLoadError: If the description cannot be read or parsed.
            ModelValidationError: If the description has the wrong shape.
        """
        try:
            if self._is_url(source):
                content = self._load_from_url(source)
            else:
                content = self._load_from_file(source)
        except ModelLoadError:
            raise
        except Exception as e:
            raise ModelLoadError(source, cause=e)

        return self._validate(content, source)

    def _is_url(self, text: str) -> bool:
        return urlparse(text).scheme in ('http', 'https')

    def _load_from_url(self, url: str) -> dict[str, Any]:
        if self._http_client:
            response = self._http_client.get(url)
        else:
            response = httpx.get(url)
        response.raise_for_status()
        return self._parse(response.text, url)

    def _load_from_file(self, path: str) -> dict[str, Any]:
        file_path = Path(path)
        if not file_path.exists():
            raise ModelLoadError(path, cause=FileNotFoundError(f'No such file: {path}'))
        return self._parse(file_path.read_text(encoding='utf-8'), path)

    def _parse(self, text: str, source: str) -> dict[str, Any]:
        if source.endswith('.json'):
            content = json.loads(text)
        else:
            # YAML is a superset of JSON
            content = yaml.safe_load(text)

        if not isinstance(content, dict):
            raise ModelLoadError(
                source, cause=ValueError('Model description must be a mapping')
            )
        return content

    def _validate(self, content: dict[str, Any], source: str) -> Setup:
        try:
            setup = Setup.model_validate(content)
        except ValidationError as e:
            errors = [
                f'{".".join(str(part) for part in error["loc"])}: {error["msg"]}'
                for error in e.errors()
            ]
            raise ModelValidationError(source, errors)

        logger.debug(f'Loaded {len(setup.functions)} functions from {source}')
        return setup


def load_setup(source: str) -> Setup:
    """Load a model description with a default loader."""
    return ModelLoader().load(source)
