"""Test loading model descriptions."""

import json

import httpx
import pytest

from sendgen.exceptions import ModelLoadError, ModelValidationError
from sendgen.loader import ModelLoader, load_setup
from sendgen.tests.fixtures import MODEL_DOCUMENT, MODEL_YAML


def _mock_client(content: str, status_code: int = 200) -> httpx.Client:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=content)

    return httpx.Client(transport=httpx.MockTransport(handler))


class TestModelLoaderFiles:
    """Test loading from local files."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / 'requests.yaml'
        path.write_text(MODEL_YAML)

        setup = ModelLoader().load(str(path))

        assert [f.name for f in setup.functions] == ['GetGuild', 'DeleteGuild']
        assert setup.header == MODEL_DOCUMENT['header']

    def test_load_json(self, tmp_path):
        path = tmp_path / 'requests.json'
        path.write_text(json.dumps(MODEL_DOCUMENT))

        setup = ModelLoader().load(str(path))

        assert setup.functions[0].from_.package == 'disgo'
        assert setup.functions[0].from_.fields[1].tags == ['url']

    def test_yaml_and_json_agree(self, tmp_path):
        yaml_path = tmp_path / 'requests.yaml'
        yaml_path.write_text(MODEL_YAML)
        json_path = tmp_path / 'requests.json'
        json_path.write_text(json.dumps(MODEL_DOCUMENT))

        assert load_setup(str(yaml_path)) == load_setup(str(json_path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ModelLoadError) as exc_info:
            ModelLoader().load(str(tmp_path / 'missing.yaml'))
        assert 'missing.yaml' in exc_info.value.source

    def test_invalid_json(self, tmp_path):
        path = tmp_path / 'broken.json'
        path.write_text('{"functions": [')

        with pytest.raises(ModelLoadError) as exc_info:
            ModelLoader().load(str(path))
        assert exc_info.value.cause is not None

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / 'list.yaml'
        path.write_text('- a\n- b\n')

        with pytest.raises(ModelLoadError, match='must be a mapping'):
            ModelLoader().load(str(path))

    def test_function_without_response(self, tmp_path):
        document = {
            'functions': [{'from': {'definition': '*GetGuild'}, 'to': []}],
        }
        path = tmp_path / 'invalid.json'
        path.write_text(json.dumps(document))

        with pytest.raises(ModelValidationError) as exc_info:
            ModelLoader().load(str(path))
        assert any(e.startswith('functions.0.to') for e in exc_info.value.errors)

    def test_function_without_request(self, tmp_path):
        document = {'functions': [{'to': [{'definition': 'error'}]}]}
        path = tmp_path / 'invalid.json'
        path.write_text(json.dumps(document))

        with pytest.raises(ModelValidationError) as exc_info:
            ModelLoader().load(str(path))
        assert any('from' in e for e in exc_info.value.errors)


class TestModelLoaderUrls:
    """Test loading over HTTP."""

    def test_load_from_url(self):
        loader = ModelLoader(http_client=_mock_client(json.dumps(MODEL_DOCUMENT)))

        setup = loader.load('https://example.com/requests.json')

        assert len(setup.functions) == 2

    def test_yaml_from_url(self):
        loader = ModelLoader(http_client=_mock_client(MODEL_YAML))

        setup = loader.load('https://example.com/requests.yaml')

        assert setup.functions[1].name == 'DeleteGuild'

    def test_http_error(self):
        loader = ModelLoader(http_client=_mock_client('not found', status_code=404))

        with pytest.raises(ModelLoadError) as exc_info:
            loader.load('https://example.com/requests.json')
        assert isinstance(exc_info.value.cause, httpx.HTTPStatusError)

    def test_is_url(self):
        loader = ModelLoader()
        assert loader._is_url('http://example.com/a.yaml')
        assert loader._is_url('https://example.com/a.yaml')
        assert not loader._is_url('./a.yaml')
        assert not loader._is_url('/tmp/a.yaml')
