"""Render IR nodes to Go source text.

This is the only module that produces text. Statements are indented with
tabs, one level per block, the way gofmt lays them out.
"""

from collections.abc import Callable

from sendgen.codegen.ir import Expr, Method, Stmt

__all__ = ['render_expr', 'render_stmt', 'render_method']

INDENT = '\t'


def _quote(value: str) -> str:
    escaped = value.replace('\\', '\\\\').replace('"', '\\"').replace('\n', '\\n')
    return f'"{escaped}"'


_EXPR_RENDERERS: dict[str, Callable[[Expr], str]] = {
    'ident': lambda e: e.name,
    'selector': lambda e: f'{render_expr(e.value)}.{e.attr}',
    'call': lambda e: (
        f'{render_expr(e.func)}({", ".join(render_expr(a) for a in e.args)})'
    ),
    'string': lambda e: _quote(e.value),
    'placeholder': lambda e: e.name,
    'binary': lambda e: f'{render_expr(e.left)} {e.op} {render_expr(e.right)}',
}


def render_expr(expr: Expr) -> str:
    """Render an expression node.

    Raises:
        TypeError: If ``expr`` is not one of the IR expression nodes.
    """
    renderer = _EXPR_RENDERERS.get(getattr(expr, 'kind', None))
    if renderer is None:
        raise TypeError(f'Not an IR expression: {expr!r}')
    return renderer(expr)


def _render_exprs(exprs) -> str:
    return ', '.join(render_expr(e) for e in exprs)


def render_stmt(stmt: Stmt, depth: int = 1) -> list[str]:
    """Render a statement node to its source lines at the given depth."""
    pad = INDENT * depth
    kind = getattr(stmt, 'kind', None)

    if kind == 'var':
        return [f'{pad}var {stmt.name} {stmt.type}']
    if kind == 'assign':
        op = ':=' if stmt.define else '='
        return [f'{pad}{_render_exprs(stmt.targets)} {op} {render_expr(stmt.value)}']
    if kind == 'if':
        lines = [f'{pad}if {render_expr(stmt.condition)} {{']
        for inner in stmt.body:
            lines.extend(render_stmt(inner, depth + 1))
        lines.append(f'{pad}}}')
        return lines
    if kind == 'return':
        if not stmt.values:
            return [f'{pad}return']
        return [f'{pad}return {_render_exprs(stmt.values)}']
    if kind == 'blank':
        return ['']

    raise TypeError(f'Not an IR statement: {stmt!r}')


def _render_results(results: tuple[str, ...]) -> str:
    if not results:
        return ''
    if len(results) == 1:
        return f' {results[0]}'
    return f' ({", ".join(results)})'


def render_method(method: Method) -> str:
    """Render a method declaration, doc comment included.

    The returned text ends with the closing brace and a newline.
    """
    lines = [f'// {line}'.rstrip() for line in method.doc.splitlines()]

    params = ', '.join(f'{p.name} {p.type}' for p in method.params)
    lines.append(
        f'func ({method.receiver.name} {method.receiver.type}) '
        f'{method.name}({params}){_render_results(method.results)} {{'
    )
    for stmt in method.body:
        lines.extend(render_stmt(stmt))
    lines.append('}')

    return '\n'.join(lines) + '\n'
