"""
Presentation model for a matched offer, independent of the UI toolkit.
"""

import re
from typing import Optional, Tuple

from pydantic import BaseModel

from offer_finder.config.settings import DEFAULT_SETTINGS, MatchingSettings
from offer_finder.models import MatchedOffer, OfferSource
from offer_finder.utils.fields import get_case_insensitive, resolve_field

# Feed placeholders that mean "no image"
_UNUSABLE_IMAGE = re.compile(r'^(na|n/a|null|undefined|-|image unavailable)$', re.IGNORECASE)


def is_usable_image(value: Optional[str]) -> bool:
    """False for blank cells and placeholders like 'N/A' or 'Image unavailable'."""
    if not value:
        return False
    text = str(value).strip()
    return bool(text) and not _UNUSABLE_IMAGE.match(text)


def resolve_image(source: OfferSource, candidate: Optional[str]) -> Tuple[Optional[str], bool]:
    """
    Picks the image to show for an offer.

    Returns:
        (image_url, using_fallback). The source's fallback logo replaces an
        unusable feed image when one is configured.
    """
    if not is_usable_image(candidate) and source.fallback_image:
        return source.fallback_image, True
    return (candidate or None), False


class OfferView(BaseModel):
    """Everything a renderer needs to draw one offer card."""
    source_label: str
    title: str
    terms: str = ""
    link: Optional[str] = None
    image: Optional[str] = None
    image_is_fallback: bool = False
    coupon_code: Optional[str] = None
    variant_note: str = ""
    show_image: bool = False
    show_link: bool = False
    show_terms: bool = True

    @classmethod
    def from_match(
        cls,
        match: MatchedOffer,
        source: OfferSource,
        settings: Optional[MatchingSettings] = None
    ) -> "OfferView":
        settings = settings or DEFAULT_SETTINGS
        row = match.offer.row

        title = get_case_insensitive(row, "Offer") or resolve_field(row, settings.columns_for("title")) or "Offer"
        terms = ""
        for column in settings.columns_for("terms"):
            terms = get_case_insensitive(row, column) or ""
            if terms:
                break
        link = get_case_insensitive(row, "Link") or resolve_field(row, settings.columns_for("link"))
        raw_image = get_case_insensitive(row, "Image") or resolve_field(row, settings.columns_for("image"))
        image, is_fallback = resolve_image(source, raw_image)

        policy = source.render_policy
        return cls(
            source_label=source.display_label,
            title=title.strip(),
            terms=terms.strip(),
            link=link.strip() if link else None,
            image=image,
            image_is_fallback=is_fallback,
            coupon_code=resolve_field(row, settings.columns_for("coupon")),
            variant_note=match.variant_note,
            show_image=policy.show_image and bool(image),
            show_link=policy.show_link and bool(link),
            show_terms=policy.show_terms and bool(terms.strip()),
        )
