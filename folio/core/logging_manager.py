#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Logging for Folio commands.

One logger per component writes to rotating files under the log
directory:
    <component>.log   every operation and every document touched
    errors.log        errors only, with tracebacks

Warnings are also echoed to the console. Errors are not: the CLI prints
its own one-line message for them through handle_cli_error.

Library code takes an optional logger and calls it through safe_logger(),
so nothing has to check for None.

Usage:
    logger = FolioLogger(LOG_DIR / "operations", component_name="folio")
    logger.log_document("load", path, {"id": "resume", "kind": "page"})
    logger.log_operation("export_index", {"documents": 3})
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional, Union

# --- Third party imports ---
import click

FILE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def _format_details(details: Optional[Dict[str, Any]]) -> str:
    """Render details as 'key=value' pairs in insertion order."""
    if not details:
        return ""
    return " ".join(f"{key}={value}" for key, value in details.items())


class FolioLogger:
    """
    File and console logging for one component.

    Attributes:
        log_dir: Directory for log files
        component_name: Component name, also the log file stem
        logger: Underlying stdlib logger ('folio.<component>')
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "folio",
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files (created if missing)
            component_name: Name for the component log file
            max_bytes: Size at which a log file rotates (default: 10MB)
            backup_count: Rotated files to keep (default: 5)
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.logger = logging.getLogger(f"folio.{component_name}")
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False
        # A previous instance for the same component may still hold handlers
        self.close()

        for file_name, level in (
            (f"{component_name}.log", logging.INFO),
            ("errors.log", logging.ERROR),
        ):
            handler = RotatingFileHandler(
                self.log_dir / file_name,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            handler.setLevel(level)
            handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
            self.logger.addHandler(handler)

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.addFilter(lambda record: record.levelno < logging.ERROR)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        self.logger.addHandler(console)

    def close(self) -> None:
        """Close and detach all handlers."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Record a completed operation, e.g. 'load_store' or 'export_index'."""
        message = operation
        if details:
            message += f": {_format_details(details)}"
        self.logger.info(message)

    def log_document(
        self,
        operation: str,
        file_path: Union[Path, str],
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Record an operation on a single document file.

        Args:
            operation: What was done ('load', 'validate')
            file_path: The document's source file
            details: e.g. the resolved id, or issue counts
        """
        message = f"{operation} {file_path}"
        if details:
            message += f": {_format_details(details)}"
        self.logger.info(message)

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        if details:
            message += f": {_format_details(details)}"
        self.logger.warning(message)

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Log an error with its context.

        The traceback is attached when called while the error is being
        handled.
        """
        message = f"{type(error).__name__}: {error}"
        if context:
            message += f" [{_format_details(context)}]"
        self.logger.error(message, exc_info=sys.exc_info()[1] is error)

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log an error and format it for the terminal.

        Returns:
            '❌ Type: message', followed by the traceback if requested

        Examples:
            >>> logger.log_cli_error(DocumentNotFoundError("No document with id 'cv'"))
            "❌ DocumentNotFoundError: No document with id 'cv'"
        """
        self.log_error(error, context or {"source": "cli"})
        return _cli_message(error, show_traceback)


def _cli_message(error: Exception, show_traceback: bool) -> str:
    message = f"❌ {type(error).__name__}: {error}"
    if show_traceback:
        message += "\n\n" + "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
    return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Log a command failure, print a one-line message to stderr and exit.

    Args:
        ctx: Click context holding 'logger' and 'verbose'
        error: Exception that stopped the command
        operation: Command name (e.g. 'show', 'export')
        additional_context: Document id, file path, etc.
        exit_code: Exit code for sys.exit() (default: 1)
    """
    obj = ctx.obj or {}
    context = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    message = safe_logger(obj.get("logger")).log_cli_error(
        error, context, show_traceback=obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)


class NullLogger:
    """FolioLogger stand-in that records nothing."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_document(
        self,
        operation: str,
        file_path: Union[Path, str],
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return _cli_message(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[FolioLogger]) -> FolioLogger:
    """Return the logger, or a NullLogger when it is None."""
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
