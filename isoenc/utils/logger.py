"""
isoenc Logging System

Logging setup with Rich console output, optional file logging and
structured logging through structlog.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Dict

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
import structlog

from .config import LoggingConfig
from ..core.report import CharsetReport


class IsoEncLogger:
    """
    Centralized logging system for isoenc.

    Console output goes to stderr so that encoded text written to stdout
    stays clean.
    """

    def __init__(self, config: Optional[LoggingConfig] = None):
        """
        Initialize the logging system.

        Args:
            config: Logging configuration, defaults are used if None
        """
        self.config = config or LoggingConfig()
        self.console = Console(stderr=True)
        self.loggers: Dict[str, logging.Logger] = {}
        self._setup_logging()

    def _setup_logging(self):
        """Setup the root logger and structlog."""
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, self.config.level))

        # Clear existing handlers
        root_logger.handlers.clear()

        if self.config.console_format == "rich":
            console_handler = RichHandler(
                console=self.console,
                show_time=True,
                show_path=False,
                markup=False,
                rich_tracebacks=True
            )
            console_format = "%(message)s"
        else:
            console_handler = logging.StreamHandler(sys.stderr)
            if self.config.console_format == "json":
                console_format = '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}'
            else:
                console_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

        console_handler.setFormatter(logging.Formatter(console_format))
        root_logger.addHandler(console_handler)

        if self.config.log_file:
            log_file = Path(self.config.log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s"
            ))
            root_logger.addHandler(file_handler)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                structlog.processors.JSONRenderer()
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    def get_logger(self, name: str) -> logging.Logger:
        """
        Get a logger instance for a specific module.

        Args:
            name: Logger name (usually module name)

        Returns:
            Configured logger instance
        """
        if name not in self.loggers:
            self.loggers[name] = logging.getLogger(name)
        return self.loggers[name]

    def get_event_logger(self, name: str = "isoenc.events"):
        """Get a structlog logger for structured conversion events."""
        return structlog.get_logger(name)

    def log_conversion(self, source: str, action: str, characters: int,
                       bytes_written: int, unstorable: int):
        """
        Log a completed conversion.

        Args:
            source: Input file or a short label for inline text
            action: Fallback action that was applied
            characters: Number of input code points
            bytes_written: Number of ISO-8859-1 bytes produced
            unstorable: Number of code points the encoding could not store
        """
        logger = self.get_logger("isoenc.conversion")
        logger.info(
            f"Converted {source}: {characters} code points, {bytes_written} bytes, "
            f"{unstorable} unstorable ({action})"
        )
        self.get_event_logger().info(
            "conversion",
            source=source,
            action=action,
            characters=characters,
            bytes_written=bytes_written,
            unstorable=unstorable,
        )

    def log_report(self, report: CharsetReport, title: str = "Unstorable Characters"):
        """
        Render a charset report as a Rich table.

        Args:
            report: Result of analyze_text
            title: Table title
        """
        table = Table(title=title)
        table.add_column("Position", style="cyan", justify="right")
        table.add_column("Char", style="green")
        table.add_column("Code Point", style="yellow")

        for item in report.unstorable:
            table.add_row(str(item.position), item.char, item.escape)

        self.console.print(table)
        self.console.print(
            f"{report.storable_count}/{report.total_code_points} code points storable in ISO-8859-1"
        )

    def cleanup(self):
        """Close file handlers attached to the root logger."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            if isinstance(handler, logging.FileHandler):
                handler.close()
                root_logger.removeHandler(handler)


# Global logger instance
_global_logger: Optional[IsoEncLogger] = None


def get_logger(name: str = "isoenc") -> logging.Logger:
    """Get a logger instance."""
    return get_isoenc_logger().get_logger(name)


def setup_logging(config: Optional[LoggingConfig] = None) -> IsoEncLogger:
    """Setup the global logging system."""
    global _global_logger
    _global_logger = IsoEncLogger(config)
    return _global_logger


def get_isoenc_logger() -> IsoEncLogger:
    """Get the global isoenc logger instance."""
    global _global_logger
    if _global_logger is None:
        _global_logger = IsoEncLogger()
    return _global_logger
