"""Endpoint call construction.

Each request type ``*Foo`` has a matching endpoint helper ``EndpointFoo``
that builds the request URL from the request's endpoint parameters.
"""

import dataclasses

from sendgen.codegen.classifier import endpoint_arguments
from sendgen.codegen.ir import Call, Placeholder, _call
from sendgen.config import TemplateConfig
from sendgen.models import Field

__all__ = ['EndpointCall', 'endpoint_name', 'build_endpoint_call']


@dataclasses.dataclass(frozen=True)
class EndpointCall:
    """The endpoint argument of a dispatch call.

    Attributes:
        expression: The call of the endpoint helper.
        rate_limit_bucket: The bucket the request is rate limited under.
            Left unresolved; rendered as the placeholder name.
    """

    expression: Call
    rate_limit_bucket: Placeholder


def endpoint_name(request: Field, prefix: str = 'Endpoint') -> str:
    """Return the endpoint helper name for a request type.

    The first character of the declared type (the pointer marker) is dropped:
    ``*GetGuild`` becomes ``EndpointGetGuild``.
    """
    return prefix + request.definition[1:]


def build_endpoint_call(
    request: Field, template: TemplateConfig | None = None
) -> EndpointCall:
    # No check that the helper exists or that its arity matches.
    template = template or TemplateConfig()
    return EndpointCall(
        expression=_call(
            endpoint_name(request, template.endpoint_prefix),
            endpoint_arguments(request, template),
        ),
        rate_limit_bucket=Placeholder(template.rate_limit_placeholder),
    )
