"""Input model for code generation.

A ``Setup`` holds the header block and the ordered ``Function`` list that the
generator turns into source text. Each ``Function`` maps exactly one request
``Field`` to one or more response ``Field`` values. The model is built once
(by the loader or by a host program) and is read-only afterwards.
"""

import re

from pydantic import BaseModel, ConfigDict, Field as ModelField

__all__ = ['Field', 'Function', 'Setup']

# Leading slice/pointer decoration of a Go type, e.g. '[]*' in '[]*Message'.
_MODIFIER_PATTERN = re.compile(r'^([\[\]*]*)(.*)$')


class Field(BaseModel):
    """A described struct member.

    ``tags`` lists the serialization tag keys declared on the member
    (``json``, ``url``, ...). An empty list marks an endpoint (path)
    component; anything else is body content.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ''
    definition: str = ModelField(
        ..., description='Declared type text, including pointer decoration.'
    )
    package: str = ModelField(
        '', description='Package qualifier applied to the base type name.'
    )
    tags: list[str] = ModelField(default_factory=list)
    fields: list['Field'] = ModelField(default_factory=list)

    @property
    def is_pointer(self) -> bool:
        return self.definition.startswith('*')

    @property
    def full_definition(self) -> str:
        """The type with package qualifier and pointer decoration."""
        if not self.package:
            return self.definition

        modifiers, base = _MODIFIER_PATTERN.match(self.definition).groups()
        return f'{modifiers}{self.package}.{base}'

    @property
    def full_definition_without_pointer(self) -> str:
        full = self.full_definition
        return full[1:] if full.startswith('*') else full


class Function(BaseModel):
    """One generation unit: a request type and its ordered response types."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ModelField(
        '', description='Identifier of the unit, used in log records only.'
    )
    from_: Field = ModelField(..., alias='from')
    to: list[Field] = ModelField(..., min_length=1)


class Setup(BaseModel):
    """The complete input of a generation run."""

    model_config = ConfigDict(frozen=True)

    header: str = ''
    functions: list[Function] = ModelField(default_factory=list)
