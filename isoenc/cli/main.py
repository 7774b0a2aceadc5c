"""
isoenc Command Line Interface

Main CLI entry point for encoding text and files as ISO-8859-1.
"""

import sys
import click
from pathlib import Path
from typing import Optional

from .. import __version__
from ..core.encoder import FallbackAction
from ..utils.config import ConfigManager, load_config
from ..utils.env_loader import load_environment_variables
from ..utils.logger import setup_logging
from ..utils.encoding import force_utf8_stdio


ACTION_CHOICES = [action.value for action in FallbackAction]


class CLIContext:
    """CLI context for sharing state between commands."""
    def __init__(self):
        self.config = None
        self.logger = None
        self.verbose = False
        self.quiet = False
        self.console_utf8 = True


pass_context = click.make_pass_decorator(CLIContext, ensure=True)


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False),
              help='Configuration file path')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']),
              default=None, help='Logging level')
@click.option('--quiet', '-q', is_flag=True, help='Suppress console output')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.version_option(version=__version__, prog_name='isoenc')
@pass_context
def cli(ctx: CLIContext, config: Optional[str], log_level: Optional[str], quiet: bool, verbose: bool):
    """
    isoenc - ISO-8859-1 text encoding toolkit

    Encodes Unicode text as ISO-8859-1, replacing, dropping or escaping
    the characters the encoding cannot store.
    """
    ctx.console_utf8 = force_utf8_stdio()

    ctx.quiet = quiet
    ctx.verbose = verbose

    try:
        load_environment_variables()

        if config:
            ctx.config = ConfigManager().load_config_file(Path(config))
        else:
            ctx.config = load_config("default")

        if log_level:
            ctx.config.logging.level = log_level

        if quiet:
            ctx.config.logging.level = 'ERROR'
        elif verbose:
            ctx.config.logging.level = 'DEBUG'

        ctx.logger = setup_logging(ctx.config.logging)

    except Exception as e:
        click.echo(f"Initialization failed: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('text')
@click.option('--action', '-a', type=click.Choice(ACTION_CHOICES), default=None,
              help='Fallback action for unstorable characters')
@click.option('--replacement', '-r', type=str, default=None,
              help='Replacement character for the "replace" action')
@click.option('--hex', 'as_hex', is_flag=True, help='Print the ISO-8859-1 bytes as hex')
@pass_context
def encode(ctx: CLIContext, text: str, action: Optional[str], replacement: Optional[str], as_hex: bool):
    """
    Encode TEXT as ISO-8859-1 and print the result.
    """
    from .commands.encode import encode_text

    try:
        result = encode_text(
            text,
            config=ctx.config,
            logger=ctx.logger,
            action=action,
            replacement=replacement,
            as_hex=as_hex,
        )
        click.echo(result)

    except Exception as e:
        click.echo(f"Encoding failed: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('input_path', type=click.Path(exists=True, dir_okay=False))
@click.argument('output_path', type=click.Path(dir_okay=False))
@click.option('--action', '-a', type=click.Choice(ACTION_CHOICES), default=None,
              help='Fallback action for unstorable characters')
@click.option('--replacement', '-r', type=str, default=None,
              help='Replacement character for the "replace" action')
@click.option('--source-encoding', '-e', type=str, default=None,
              help='Encoding of the input file (default: utf-8)')
@click.option('--newline', type=click.Choice(['keep', 'lf', 'crlf']), default=None,
              help='Newline handling for the output file')
@click.option('--overwrite/--no-overwrite', default=None,
              help='Replace the output file if it exists')
@pass_context
def convert(ctx: CLIContext, input_path: str, output_path: str, action: Optional[str],
            replacement: Optional[str], source_encoding: Optional[str],
            newline: Optional[str], overwrite: Optional[bool]):
    """
    Convert a text file to ISO-8859-1.

    INPUT_PATH is read with the source encoding and written to OUTPUT_PATH.
    """
    from .commands.convert import convert_single_file

    options = {
        'action': action,
        'replacement': replacement,
        'source_encoding': source_encoding,
        'newline': newline,
        'overwrite': overwrite,
    }

    # Remove None values
    options = {k: v for k, v in options.items() if v is not None}

    try:
        result = convert_single_file(
            input_path=Path(input_path),
            output_path=Path(output_path),
            config=ctx.config,
            logger=ctx.logger,
            **options
        )

        if not ctx.quiet:
            click.echo(f"Converted: {result.output_path}")
            click.echo(f"   Code points: {result.characters}")
            click.echo(f"   Bytes written: {result.bytes_written}")
            click.echo(f"   Unstorable: {result.unstorable} ({result.action.value})")

    except Exception as e:
        click.echo(f"Conversion failed: {e}", err=True)
        sys.exit(1)


@cli.command('inspect')
@click.argument('text', required=False)
@click.option('--file', '-f', 'file_path', type=click.Path(exists=True, dir_okay=False),
              help='Inspect a file instead of TEXT')
@click.option('--quiet', '-q', is_flag=True, help='One line per unstorable character')
@pass_context
def inspect_command(ctx: CLIContext, text: Optional[str], file_path: Optional[str], quiet: bool):
    """
    Report the characters ISO-8859-1 cannot store.

    Exits with status 2 if any are found.
    """
    from .commands.inspect_text import inspect_text

    if (text is None) == (file_path is None):
        click.echo("Provide either TEXT or --file", err=True)
        sys.exit(1)

    try:
        report = inspect_text(
            text=text,
            file_path=Path(file_path) if file_path else None,
            config=ctx.config,
            logger=ctx.logger,
            quiet=quiet or ctx.quiet,
            console_utf8=ctx.console_utf8,
        )
    except Exception as e:
        click.echo(f"Inspection failed: {e}", err=True)
        sys.exit(1)

    if not report.is_storable:
        sys.exit(2)


@cli.group()
@pass_context
def config(ctx: CLIContext):
    """Configuration management commands."""
    pass


@config.command('show')
@click.option('--section', type=str, help='Show specific configuration section')
@click.option('--quiet', '-q', is_flag=True, help='Quiet output')
@pass_context
def config_show(ctx: CLIContext, section: Optional[str], quiet: bool):
    """Show current configuration."""
    from .commands.config import show_config

    try:
        show_config(ctx.config, section, quiet or ctx.quiet)
    except Exception as e:
        click.echo(f"Failed to show config: {e}", err=True)
        sys.exit(1)


@config.command('validate')
@pass_context
def config_validate(ctx: CLIContext):
    """Validate current configuration."""
    from .commands.config import validate_config

    try:
        is_valid = validate_config(ctx.config, ctx.quiet)
    except Exception as e:
        click.echo(f"Config validation failed: {e}", err=True)
        sys.exit(1)

    if not is_valid:
        sys.exit(1)


def main():
    """Main CLI entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user")
        sys.exit(130)


if __name__ == '__main__':
    main()
