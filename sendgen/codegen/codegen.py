import logging
from pathlib import Path

from upath import UPath

from sendgen.codegen.generator import Generator
from sendgen.config import TargetConfig, TemplateConfig
from sendgen.exceptions import ConfigurationError
from sendgen.loader import ModelLoader
from sendgen.models import Setup
from sendgen.writer import SourceWriter

logger = logging.getLogger(__name__)


class Codegen:
    """Runs one target: load the model, generate the source, write it."""

    def __init__(
        self,
        target: TargetConfig,
        template: TemplateConfig | None = None,
        loader: ModelLoader | None = None,
        writer: SourceWriter | None = None,
    ):
        self.target = target
        self.template = template or TemplateConfig()
        self.loader = loader or ModelLoader()
        self.writer = writer or SourceWriter()

    def _resolve_header(self, setup: Setup) -> str:
        if self.target.header is not None:
            header = self.target.header
        elif self.target.header_file is not None:
            path = Path(self.target.header_file)
            if not path.exists():
                raise ConfigurationError(
                    'Header file not found',
                    config_path=self.target.header_file,
                    field='header_file',
                )
            try:
                header = path.read_text(encoding='utf-8').rstrip('\n')
            except (OSError, UnicodeDecodeError) as e:
                raise ConfigurationError(
                    f'Header file cannot be read: {e}',
                    config_path=self.target.header_file,
                    field='header_file',
                )
        else:
            return setup.header

        if setup.header and setup.header != header:
            logger.warning(
                f'Header of {self.target.source} replaced by the configured header'
            )
        return header

    def render(self) -> str:
        """Load the model and return the generated source without writing it."""
        setup = self.loader.load(self.target.source)
        generator = Generator(
            self._resolve_header(setup), setup.functions, self.template
        )
        return generator.generate()

    def generate(self) -> UPath:
        """Generate the target and write it to its output path."""
        path = self.writer.write(self.render(), self.target.output)
        logger.info(f'Generated {path} from {self.target.source}')
        return path
