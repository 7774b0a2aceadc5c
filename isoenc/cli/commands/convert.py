"""
isoenc CLI Convert Command

Converts a single text file to ISO-8859-1.
"""

from pathlib import Path

from ...core.converter import ConversionResult, convert_file
from ...core.encoder import FallbackAction
from ...utils.config import IsoEncConfig
from ...utils.logger import IsoEncLogger


def convert_single_file(input_path: Path,
                        output_path: Path,
                        config: IsoEncConfig,
                        logger: IsoEncLogger,
                        **options) -> ConversionResult:
    """
    Convert one file, filling unset options from the configuration.

    Args:
        input_path: File to read
        output_path: File to write
        config: Loaded configuration
        logger: Logging system
        **options: action, replacement, source_encoding, newline, overwrite

    Returns:
        ConversionResult of the conversion
    """
    log = logger.get_logger("isoenc.convert")

    settings = {
        'action': FallbackAction(options.get('action', config.encoding.action)),
        'replacement': options.get('replacement', config.encoding.replacement),
        'source_encoding': options.get('source_encoding', config.encoding.source_encoding),
        'newline': options.get('newline', config.output.newline),
        'overwrite': options.get('overwrite', config.output.overwrite),
    }
    if 'replacement' in options and settings['action'] is not FallbackAction.REPLACE:
        log.warning(
            f"Replacement {options['replacement']!r} ignored for action '{settings['action'].value}'"
        )
    log.debug(f"Converting {input_path} with {settings}")

    try:
        result = convert_file(input_path, output_path, **settings)
    except Exception as e:
        log.error(f"Conversion of {input_path.name} failed: {e}")
        raise

    logger.log_conversion(
        source=str(input_path),
        action=result.action.value,
        characters=result.characters,
        bytes_written=result.bytes_written,
        unstorable=result.unstorable,
    )
    return result
