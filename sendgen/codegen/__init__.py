"""Code generation for request Send methods.

Modules, leaves first:
- classifier: endpoint parameters versus body fields
- endpoint: the endpoint helper call passed to the dispatch function
- emitter: one method per Function, built as IR and rendered
- generator: header plus every emitted method
- codegen: load, generate and write one configured target
"""

from sendgen.codegen.classifier import (
    FieldClassification,
    classify_fields,
    endpoint_arguments,
)
from sendgen.codegen.emitter import FunctionEmitter, ResponseArity
from sendgen.codegen.endpoint import EndpointCall, build_endpoint_call, endpoint_name
from sendgen.codegen.generator import Generator, generate

__all__ = [
    'FieldClassification',
    'classify_fields',
    'endpoint_arguments',
    'EndpointCall',
    'endpoint_name',
    'build_endpoint_call',
    'ResponseArity',
    'FunctionEmitter',
    'Generator',
    'generate',
]
