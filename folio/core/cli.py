#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for Folio commands.

Functions:
    setup_logger: Initialize FolioLogger for CLI operations

Classes:
    OperationStats: Documents handled and elapsed time

Usage:
    from folio.core.cli import setup_logger, OperationStats

    logger = setup_logger(log_dir, "store")
    stats = OperationStats()
    stats.documents += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

# --- Local imports ---
from folio.core.logging_manager import FolioLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> FolioLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a FolioLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'store', 'validators')

    Returns:
        Configured FolioLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return FolioLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Count and timing of a CLI operation.

    Attributes:
        documents: Number of documents the operation handled
        start_time: Operation start timestamp
    """
    documents: int = 0
    start_time: datetime = field(default_factory=datetime.now)

    def duration(self) -> float:
        """Seconds elapsed since start_time."""
        return (datetime.now() - self.start_time).total_seconds()

    def summary(self) -> str:
        return f"{self.documents} documents in {self.duration():.2f}s"

