"""Top-level generation: header block followed by every emitted method."""

import logging
from collections.abc import Iterable

from sendgen.codegen.emitter import FunctionEmitter
from sendgen.config import TemplateConfig
from sendgen.models import Function, Setup

logger = logging.getLogger(__name__)

__all__ = ['Generator', 'generate']


class Generator:
    """Produces the complete generated file body.

    The header is written first, then each Function's method in input
    order, each followed by a newline. Generation cannot fail.
    """

    def __init__(
        self,
        header: str,
        functions: Iterable[Function],
        template: TemplateConfig | None = None,
    ):
        self.header = header
        self.functions = list(functions)
        self.emitter = FunctionEmitter(template)

    @classmethod
    def from_setup(
        cls, setup: Setup, template: TemplateConfig | None = None
    ) -> 'Generator':
        return cls(setup.header, setup.functions, template)

    def generate(self) -> str:
        parts = [self.header + '\n']
        for function in self.functions:
            parts.append(self.emitter.emit(function) + '\n')

        logger.debug(f'Emitted {len(self.functions)} methods')
        return ''.join(parts)


def generate(setup: Setup, template: TemplateConfig | None = None) -> str:
    """Generate the source text for ``setup``."""
    return Generator.from_setup(setup, template).generate()
