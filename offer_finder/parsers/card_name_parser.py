"""
Card name parsing for eligibility-list cells.

Offer feeds list eligible cards as one comma-separated cell, sometimes wrapped
over several lines, with an optional trailing qualifier per card:

    "HDFC Regalia (Visa Signature), ICICI Amazon Pay,\nSBI Card (Rupay Classic)"
"""

import re
from typing import List, Optional, Tuple

# Only a parenthetical at the very end of the name is a variant qualifier
_TRAILING_VARIANT = re.compile(r'\s*\(([^)]*)\)\s*$')


def split_eligibility_list(cell: Optional[str]) -> List[str]:
    """
    Splits a raw eligibility cell into card names, preserving input order.

    Newlines count as spaces; empty pieces are dropped.
    """
    if not cell:
        return []

    flattened = str(cell).replace('\r\n', ' ').replace('\n', ' ').replace('\r', ' ')
    pieces = (piece.strip() for piece in flattened.split(','))
    return [piece for piece in pieces if piece]


def split_base_and_variant(name: Optional[str]) -> Tuple[str, str]:
    """
    Separates a card's base name from its trailing parenthesized variant.

    Examples:
        >>> split_base_and_variant("HDFC Regalia (Visa Signature)")
        ('HDFC Regalia', 'Visa Signature')
        >>> split_base_and_variant("SBI Card")
        ('SBI Card', '')
    """
    if not name:
        return "", ""

    text = str(name).strip()
    match = _TRAILING_VARIANT.search(text)
    if not match:
        return text, ""

    return text[:match.start()].strip(), match.group(1).strip()
