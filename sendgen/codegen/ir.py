"""Intermediate representation for generated Go methods.

The emitter builds methods out of these nodes instead of splicing text, and
``sendgen.codegen.render`` is the only place that turns them into source.
Both node families are closed: every node carries a literal ``kind`` and
``Expr`` / ``Stmt`` enumerate all of them.
"""

import dataclasses
from typing import Literal

__all__ = [
    # Expressions
    'Ident',
    'Selector',
    'Call',
    'StringLit',
    'Placeholder',
    'Binary',
    'Expr',
    # Statements
    'VarDecl',
    'Assign',
    'If',
    'Return',
    'Blank',
    'Stmt',
    # Declarations
    'Param',
    'Method',
    # Helpers
    '_ident',
    '_selector',
    '_call',
    '_string',
    '_return',
    '_if_err',
    'NIL',
    'ERR',
]


# =============================================================================
# Expressions
# =============================================================================


@dataclasses.dataclass(frozen=True)
class Ident:
    name: str
    kind: Literal['ident'] = dataclasses.field(default='ident', init=False)


@dataclasses.dataclass(frozen=True)
class Selector:
    """Field or package member access: ``value.attr``."""

    value: 'Expr'
    attr: str
    kind: Literal['selector'] = dataclasses.field(default='selector', init=False)


@dataclasses.dataclass(frozen=True)
class Call:
    func: 'Expr'
    args: tuple['Expr', ...] = ()
    kind: Literal['call'] = dataclasses.field(default='call', init=False)


@dataclasses.dataclass(frozen=True)
class StringLit:
    value: str
    kind: Literal['string'] = dataclasses.field(default='string', init=False)


@dataclasses.dataclass(frozen=True)
class Placeholder:
    """A value the generator deliberately leaves unresolved.

    Rendered verbatim as ``name`` so the gap stays visible in the output.
    """

    name: str
    kind: Literal['placeholder'] = dataclasses.field(
        default='placeholder', init=False
    )


@dataclasses.dataclass(frozen=True)
class Binary:
    left: 'Expr'
    op: str
    right: 'Expr'
    kind: Literal['binary'] = dataclasses.field(default='binary', init=False)


Expr = Ident | Selector | Call | StringLit | Placeholder | Binary


# =============================================================================
# Statements
# =============================================================================


@dataclasses.dataclass(frozen=True)
class VarDecl:
    """Zero-valued declaration: ``var name type``."""

    name: str
    type: str
    kind: Literal['var'] = dataclasses.field(default='var', init=False)


@dataclasses.dataclass(frozen=True)
class Assign:
    """Assignment; ``define`` selects ``:=`` over ``=``."""

    targets: tuple[Expr, ...]
    value: Expr
    define: bool = False
    kind: Literal['assign'] = dataclasses.field(default='assign', init=False)


@dataclasses.dataclass(frozen=True)
class If:
    condition: Expr
    body: tuple['Stmt', ...]
    kind: Literal['if'] = dataclasses.field(default='if', init=False)


@dataclasses.dataclass(frozen=True)
class Return:
    values: tuple[Expr, ...] = ()
    kind: Literal['return'] = dataclasses.field(default='return', init=False)


@dataclasses.dataclass(frozen=True)
class Blank:
    """An empty line between statement groups."""

    kind: Literal['blank'] = dataclasses.field(default='blank', init=False)


Stmt = VarDecl | Assign | If | Return | Blank


# =============================================================================
# Declarations
# =============================================================================


@dataclasses.dataclass(frozen=True)
class Param:
    name: str
    type: str


@dataclasses.dataclass(frozen=True)
class Method:
    """A method declaration with its doc comment."""

    doc: str
    receiver: Param
    name: str
    params: tuple[Param, ...]
    results: tuple[str, ...]
    body: tuple[Stmt, ...]


# =============================================================================
# Helpers
# =============================================================================

NIL = Ident('nil')
ERR = Ident('err')


def _ident(name: str) -> Ident:
    return Ident(name)


def _selector(value: str | Expr, attr: str) -> Selector:
    return Selector(value=_ident(value) if isinstance(value, str) else value, attr=attr)


def _call(func: str | Expr, args: list[Expr] | None = None) -> Call:
    return Call(
        func=_ident(func) if isinstance(func, str) else func,
        args=tuple(args or ()),
    )


def _string(value: str) -> StringLit:
    return StringLit(value)


def _return(*values: Expr) -> Return:
    return Return(values=values)


def _if_err(*body: Stmt) -> If:
    return If(condition=Binary(left=ERR, op='!=', right=NIL), body=body)
