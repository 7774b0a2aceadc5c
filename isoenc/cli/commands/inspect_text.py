"""
isoenc CLI Inspect Command

Reports which characters of a text or file ISO-8859-1 cannot store.
"""

from pathlib import Path
from typing import Optional

import click

from ...core.report import CharsetReport, analyze_text
from ...utils.config import IsoEncConfig
from ...utils.encoding import safe_console_text
from ...utils.logger import IsoEncLogger


def inspect_text(text: Optional[str],
                 file_path: Optional[Path],
                 config: IsoEncConfig,
                 logger: IsoEncLogger,
                 quiet: bool = False,
                 console_utf8: bool = True) -> CharsetReport:
    """Analyze text (or a file's contents) and print the findings."""
    if file_path is not None:
        text = file_path.read_text(encoding=config.encoding.source_encoding)

    report = analyze_text(text)

    if quiet:
        for item in report.unstorable:
            click.echo(str(item))
        return report

    if report.is_storable:
        click.echo(f"All {report.total_code_points} code points are storable in ISO-8859-1")
    else:
        logger.log_report(report)
        escaped = ", ".join(
            safe_console_text(f"{item.char} {item.escape}", utf8=console_utf8) for item in report.unstorable
        )
        click.echo(f"{report.unstorable_count} unstorable: {escaped}")

    return report
