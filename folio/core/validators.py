#!/usr/bin/env python3
"""
validators.py
--------------------
Data validation and normalization utilities for Folio documents.

Provides type-safe conversion of raw YAML frontmatter values into the
types the document model exposes.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from .exceptions import ValidationError


class DataValidator:
    """Centralized data validation for frontmatter values."""

    DATE_FORMAT = "%Y-%m-%d"

    @staticmethod
    def validate_required_fields(
        data: Dict[str, Any], required_fields: List[str]
    ) -> None:
        """
        Validate that required fields are present and non-empty.

        Strings containing only whitespace count as empty.

        Args:
            data: Data dictionary to validate
            required_fields: List of required field names

        Raises:
            ValidationError: If validation fails
        """
        for field in required_fields:
            value = data.get(field)
            if isinstance(value, str):
                value = value.strip()
            if value is None or value == "":
                raise ValidationError(f"Required field '{field}' missing or empty")

    @staticmethod
    def normalize_date(date_value: Any) -> Optional[date]:
        """
        Normalize various date inputs to date object.

        Args:
            date_value: Date string (YYYY-MM-DD), date object, or datetime

        Returns:
            Normalized date object, or None if the value is not a date

        Examples:
            >>> DataValidator.normalize_date("2025-12-26")
            datetime.date(2025, 12, 26)
            >>> DataValidator.normalize_date("26/12/2025") is None
            True
        """
        # datetime subclasses date, so test it first
        if isinstance(date_value, datetime):
            return date_value.date()
        if isinstance(date_value, date):
            return date_value
        if isinstance(date_value, str):
            try:
                return datetime.strptime(
                    date_value.strip(), DataValidator.DATE_FORMAT
                ).date()
            except ValueError:
                return None
        return None

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """
        Normalize string value.

        Args:
            value: Value to normalize

        Returns:
            Stripped string, or None for None/empty input
        """
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @staticmethod
    def normalize_bool(value: Any) -> Optional[bool]:
        """
        Convert various inputs to boolean.

        Args:
            value: Value to convert

        Returns:
            Boolean value or None

        Raises:
            ValidationError: If conversion fails
        """
        if isinstance(value, bool):
            return value
        elif isinstance(value, (int, float)):
            if value == 0:
                return False
            elif value == 1:
                return True
            else:
                raise ValidationError(f"Cannot convert numeric '{value}' to boolean")
        elif isinstance(value, str):
            if value.lower() in ("true", "1", "yes", "on"):
                return True
            elif value.lower() in ("false", "0", "no", "off"):
                return False
            else:
                raise ValidationError(f"Cannot convert '{value}' to boolean")
        elif value is not None:
            return bool(value)
        return None

    @staticmethod
    def normalize_str_list(value: Any) -> List[str]:
        """
        Normalize a string or list of strings into a list of strings.

        Args:
            value: None, a single string, or a list

        Returns:
            List of non-empty stripped strings

        Raises:
            ValidationError: If value is neither a string nor a list
        """
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            raise ValidationError(
                f"Expected a string or list, got {type(value).__name__}"
            )
        return [s for s in (DataValidator.normalize_string(v) for v in value) if s]
