"""
Validators package
------------------
Well-formedness checks for content documents.
"""
from .documents import (
    DocumentIssue,
    DocumentValidationReport,
    DocumentValidator,
    format_validation_report,
)

__all__ = [
    "DocumentIssue",
    "DocumentValidationReport",
    "DocumentValidator",
    "format_validation_report",
]
