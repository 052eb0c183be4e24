"""
Column synonym resolution for feed rows whose headers vary between merchants.
"""

from typing import Any, Iterable, Mapping, Optional


def resolve_column(row: Optional[Mapping[str, Any]], columns: Iterable[str]) -> Optional[str]:
    """Name of the first listed column that is present with a non-blank value."""
    if not row:
        return None

    for column in columns:
        value = row.get(column)
        if value is not None and str(value).strip():
            return column

    return None


def resolve_field(row: Optional[Mapping[str, Any]], columns: Iterable[str]) -> Optional[str]:
    """
    Returns the value of the first listed column that is present with a non-blank value.

    Example:
        >>> resolve_field({"Title": " ", "Offer": "10% off"}, ["Offer Title", "Title", "Offer"])
        '10% off'
    """
    column = resolve_column(row, columns)
    return str(row[column]) if column is not None else None


def get_case_insensitive(row: Optional[Mapping[str, Any]], column: str) -> Optional[str]:
    """Looks a column up ignoring header case; blank values count as missing."""
    if not row:
        return None

    target = column.lower()
    for key, value in row.items():
        if str(key).lower() == target and value is not None and str(value).strip():
            return str(value)

    return None
