"""Emission of one ``Send`` method per Function.

The generated method marshals its request receiver, dispatches it with the
shared client and returns the parsed result or an error. Everything except
the three return statements is the same for every Function; the returns
depend on how many response types the Function declares.
"""

import enum
import logging

from sendgen.codegen.endpoint import build_endpoint_call
from sendgen.codegen.ir import (
    ERR,
    NIL,
    Assign,
    Blank,
    Expr,
    Method,
    Param,
    Return,
    Stmt,
    VarDecl,
    _call,
    _ident,
    _if_err,
    _return,
    _selector,
    _string,
)
from sendgen.codegen.render import render_method
from sendgen.config import TemplateConfig
from sendgen.models import Function

logger = logging.getLogger(__name__)

__all__ = ['ResponseArity', 'FunctionEmitter']

RESULT = _ident('result')
BODY = _ident('body')


class ResponseArity(enum.Enum):
    """Return shape of a generated method, chosen by its response count."""

    SINGLE = 'single'
    MULTIPLE = 'multiple'

    @classmethod
    def of(cls, function: Function) -> 'ResponseArity':
        return cls.SINGLE if len(function.to) == 1 else cls.MULTIPLE

    def error_return(self, error: Expr) -> Return:
        if self is ResponseArity.SINGLE:
            return _return(error)
        return _return(NIL, error)

    def success_return(self) -> Return:
        if self is ResponseArity.SINGLE:
            return _return(NIL)
        return _return(RESULT, NIL)


class FunctionEmitter:
    """Builds and renders the method for a Function.

    Example:
        >>> emitter = FunctionEmitter()
        >>> method = emitter.build(function)  # IR, for inspection
        >>> source = emitter.emit(function)  # Go source text
    """

    def __init__(self, template: TemplateConfig | None = None):
        self.template = template or TemplateConfig()

    def build(self, function: Function) -> Method:
        """Build the IR of the method generated for ``function``."""
        request = function.from_
        arity = ResponseArity.of(function)
        logger.debug(
            f'Building {self.template.method_name} for '
            f'{function.name or request.definition} '
            f'({len(function.to)} response types)'
        )

        return Method(
            doc=self._doc(function),
            receiver=Param(self.template.receiver, request.full_definition),
            name=self.template.method_name,
            params=(Param(self.template.client, self.template.client_type),),
            results=tuple(response.full_definition for response in function.to),
            body=self._body(function, arity),
        )

    def emit(self, function: Function) -> str:
        return render_method(self.build(function))

    def _doc(self, function: Function) -> str:
        return (
            f'{self.template.method_name} sends a '
            f'{function.from_.full_definition_without_pointer} to '
            f'{self.template.service} and returns a '
            f'{function.to[0].full_definition_without_pointer}.'
        )

    def _error_return(
        self, arity: ResponseArity, error_format: str, request_name: str
    ) -> Return:
        error = _call(
            self.template.errorf, [_ident(error_format), _string(request_name), ERR]
        )
        return arity.error_return(error)

    def _body(self, function: Function, arity: ResponseArity) -> tuple[Stmt, ...]:
        t = self.template
        request = function.from_
        request_name = request.full_definition_without_pointer
        endpoint = build_endpoint_call(request, t)

        marshal = _call(t.marshal, [_ident(t.receiver)])
        dispatch = _call(
            t.dispatch,
            [
                RESULT,
                _selector(t.client, t.client_handle),
                endpoint.rate_limit_bucket,
                endpoint.expression,
                BODY,
            ],
        )

        return (
            VarDecl(RESULT.name, function.to[0].full_definition),
            Assign(targets=(BODY, ERR), value=marshal, define=True),
            _if_err(self._error_return(arity, t.marshal_error, request_name)),
            Blank(),
            Assign(targets=(ERR,), value=dispatch),
            _if_err(self._error_return(arity, t.dispatch_error, request_name)),
            Blank(),
            arity.success_return(),
        )
