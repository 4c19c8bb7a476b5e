"""Classification of request fields into endpoint parameters and body fields.

A request type's nested fields carry no explicit role. The rule is purely
structural: a field without serialization tags is part of the endpoint path,
a field with any tag is serialized into the request body.
"""

import dataclasses

from sendgen.codegen.ir import Expr, _selector
from sendgen.config import TemplateConfig
from sendgen.models import Field

__all__ = ['FieldClassification', 'classify_fields', 'endpoint_arguments']


@dataclasses.dataclass(frozen=True)
class FieldClassification:
    """A request's nested fields split by role, each in declaration order."""

    endpoint_parameters: tuple[Field, ...]
    body_fields: tuple[Field, ...]


def classify_fields(request: Field) -> FieldClassification:
    endpoint_parameters = []
    body_fields = []
    for subfield in request.fields:
        if subfield.tags:
            body_fields.append(subfield)
        else:
            endpoint_parameters.append(subfield)

    return FieldClassification(
        endpoint_parameters=tuple(endpoint_parameters),
        body_fields=tuple(body_fields),
    )


def endpoint_arguments(
    request: Field, template: TemplateConfig | None = None
) -> list[Expr]:
    """Build the endpoint call arguments for a request.

    Every endpoint parameter is read from the request receiver by name,
    except the application ID, which comes from the client the request is
    sent with. Order and duplicates are kept as declared.

    Args:
        request: The request field whose nested fields are classified.
        template: Names used in the generated code.

    Returns:
        One argument expression per endpoint parameter.
    """
    template = template or TemplateConfig()

    arguments: list[Expr] = []
    for parameter in classify_fields(request).endpoint_parameters:
        if parameter.name == template.application_id_field:
            arguments.append(_selector(template.client, parameter.name))
        else:
            arguments.append(_selector(template.receiver, parameter.name))
    return arguments
