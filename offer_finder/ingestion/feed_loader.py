"""
CSV feed ingestion for the card catalog and the merchant offer feeds.

Rows are handed to the core as plain column -> string mappings; every cell is
read as text and blanks stay blank (no NaN, no numeric coercion).
"""

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from offer_finder.models import OfferRecord, OfferSource
from offer_finder.utils.logging_config import logger

Row = Dict[str, str]
SourceFeed = Tuple[OfferSource, Sequence[OfferRecord]]


class FeedLoadError(Exception):
    """A feed file is missing or could not be parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not load feed '{path}': {reason}")
        self.path = path
        self.reason = reason


def load_feed(path: str) -> List[Row]:
    """
    Reads a CSV feed into row mappings.

    Raises:
        FeedLoadError: if the file does not exist or is not valid CSV.
    """
    if not os.path.exists(path):
        raise FeedLoadError(path, "file not found")

    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False, skip_blank_lines=True)
    except pd.errors.EmptyDataError:
        logger.warning(f"Feed '{path}' is empty")
        return []
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise FeedLoadError(path, str(e)) from e

    df.columns = [str(col).strip() for col in df.columns]
    df = df.fillna("")

    # Rows where every cell is blank (",,,") are skipped
    rows = [
        {col: str(value) for col, value in record.items()}
        for record in df.to_dict(orient="records")
        if any(str(value).strip() for value in record.values())
    ]
    logger.info(f"Loaded {len(rows)} rows from '{os.path.basename(path)}'")
    return rows


def load_catalog_rows(data_dir: str, file_name: str) -> List[Row]:
    """Rows of the card catalog feed."""
    return load_feed(os.path.join(data_dir, file_name))


def _load_source(source: OfferSource, data_dir: str) -> SourceFeed:
    """One source's offers; a broken feed is logged and treated as empty."""
    if not source.file_name:
        logger.warning(f"Source '{source.source_id}' has no feed file configured")
        return source, []

    try:
        rows = load_feed(os.path.join(data_dir, source.file_name))
    except FeedLoadError as e:
        logger.error(f"Offer feed error for '{source.display_label}': {e}")
        return source, []

    return source, [OfferRecord(source_id=source.source_id, row=row) for row in rows]


def load_offer_feeds(
    sources: Sequence[OfferSource],
    data_dir: str,
    max_workers: Optional[int] = None
) -> List[SourceFeed]:
    """
    Loads every source's feed concurrently.

    Results keep the order of `sources`, which is also the dedup order.
    """
    if not sources:
        return []

    with ThreadPoolExecutor(max_workers=max_workers or len(sources)) as executor:
        return list(executor.map(lambda source: _load_source(source, data_dir), sources))
