"""Test the input model."""

import pytest
from pydantic import ValidationError

from sendgen.models import Field, Function, Setup
from sendgen.tests.fixtures import GET_THING, MODEL_DOCUMENT


class TestField:
    """Test Field type-name accessors."""

    @pytest.mark.parametrize(
        'definition, package, full, without_pointer',
        [
            ('*GetGuild', 'disgo', '*disgo.GetGuild', 'disgo.GetGuild'),
            ('*GetGuild', '', '*GetGuild', 'GetGuild'),
            ('[]*Message', 'disgo', '[]*disgo.Message', '[]*disgo.Message'),
            ('Snowflake', 'disgo', 'disgo.Snowflake', 'disgo.Snowflake'),
            ('error', '', 'error', 'error'),
        ],
    )
    def test_definitions(self, definition, package, full, without_pointer):
        field = Field(definition=definition, package=package)
        assert field.full_definition == full
        assert field.full_definition_without_pointer == without_pointer

    def test_is_pointer(self):
        assert Field(definition='*Guild').is_pointer
        assert not Field(definition='[]*Guild').is_pointer

    def test_defaults(self):
        field = Field(definition='string')
        assert field.name == ''
        assert field.tags == []
        assert field.fields == []

    def test_nested_fields(self):
        assert [f.name for f in GET_THING.fields] == ['ID', 'Payload']

    def test_frozen(self):
        with pytest.raises(ValidationError):
            GET_THING.name = 'other'

    def test_definition_required(self):
        with pytest.raises(ValidationError):
            Field(name='ID')


class TestFunction:
    """Test Function validation."""

    def test_from_alias(self):
        function = Function.model_validate(MODEL_DOCUMENT['functions'][0])
        assert function.from_.definition == '*GetGuild'
        assert len(function.to) == 2

    def test_populate_by_name(self):
        function = Function(from_=GET_THING, to=[Field(definition='error')])
        assert function.from_ is GET_THING

    def test_requires_a_response(self):
        with pytest.raises(ValidationError):
            Function(from_=GET_THING, to=[])

    def test_requires_a_request(self):
        with pytest.raises(ValidationError):
            Function(to=[Field(definition='error')])

    def test_response_order_kept(self):
        function = Function(
            from_=GET_THING,
            to=[Field(definition='A'), Field(definition='B'), Field(definition='error')],
        )
        assert [t.definition for t in function.to] == ['A', 'B', 'error']


class TestSetup:
    """Test Setup validation."""

    def test_document(self):
        setup = Setup.model_validate(MODEL_DOCUMENT)
        assert setup.header.startswith('// Code generated')
        assert [f.name for f in setup.functions] == ['GetGuild', 'DeleteGuild']

    def test_defaults(self):
        setup = Setup()
        assert setup.header == ''
        assert setup.functions == []
