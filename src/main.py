from modes import MODE_HELP, Mode, build_iterator
from text_source import DEFAULT_CHUNK_SIZE, TextSource
from token_errors import ConfigError, TokenizerError, UnknownMode

import click
import yaml
import logging
import os
import sys
from dataclasses import dataclass

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), '..', 'config.yaml')

logger = logging.getLogger(__name__)


@dataclass
class Config:
    encoding: str = 'utf-8'
    chunk_size: int = DEFAULT_CHUNK_SIZE
    log_level: str = 'WARNING'

    def __post_init__(self):
        if not isinstance(self.chunk_size, int) or self.chunk_size <= 0:
            raise ConfigError(f"chunk_size must be a positive integer, got {self.chunk_size!r}")
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ConfigError(f"unknown log_level {self.log_level!r}")


def load_config(config_path=None):
    """Load configuration from a YAML file, falling back to defaults when no file is given or found."""
    if config_path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return Config()
        config_path = DEFAULT_CONFIG_PATH

    try:
        with open(config_path, 'r') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {config_path}: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"malformed config {config_path}: {e}") from e

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError(f"config {config_path} must be a mapping")
    try:
        return Config(**data)
    except TypeError as e:
        raise ConfigError(f"config {config_path}: {e}") from e


def setup_logging(level):
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format='%(levelname)s %(name)s: %(message)s',
    )


def open_source(filename, cfg: Config) -> TextSource:
    """A file-backed source for a path, standard input for None or '-'."""
    if filename is None or filename == '-':
        return TextSource.from_stdin(chunk_size=cfg.chunk_size)
    return TextSource.from_file(filename, encoding=cfg.encoding, chunk_size=cfg.chunk_size)


def fail(message):
    click.echo(message, err=True)
    sys.exit(1)


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.argument('mode')
@click.argument('filename', required=False)
@click.argument('pattern', required=False)
@click.option('--config', 'config_path', default=None, help='Path to config file')
@click.option('-v', '--verbose', is_flag=True, help='Log debug output to stderr')
def cli(mode, filename, pattern, config_path, verbose):
    """
    Print the tokens of FILENAME (or standard input) one per line.

    MODE is one of c=chars, w=words, s=sentences, n=numbers, r=regex.
    Regex mode needs a PATTERN; pass '-' as FILENAME to read it from standard input.
    """
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        fail(f"Error: {e}")
    setup_logging(logging.DEBUG if verbose else cfg.log_level.upper())

    try:
        selected = Mode.parse(mode)
    except UnknownMode as e:
        fail(f"{e}\nModes: {MODE_HELP}")
    if selected.needs_pattern and pattern is None:
        fail("Regex mode requires a pattern argument")

    logger.debug("Mode %s, reading %s", selected.name, filename or 'stdin')
    count = 0
    try:
        with open_source(filename, cfg) as source:
            tokens = build_iterator(selected, source, pattern)
            while tokens.has_next():
                click.echo(tokens.next())
                count += 1
    except TokenizerError as e:
        fail(f"Error: {e}")
    logger.debug("Printed %d tokens", count)


if __name__ == "__main__":
    cli()
