"""
Data models for card identity resolution and offer aggregation.

This module defines the core data structures used throughout the system,
ensuring type safety and validation via Pydantic.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from offer_finder.config.settings import MatchingSettings
from offer_finder.parsers.brand_canonicalizer import canonicalize
from offer_finder.parsers.card_name_parser import split_base_and_variant
from offer_finder.utils.normalization import normalize_text


class CardKind(str, Enum):
    """The two card families every catalog and eligibility list is split into."""
    CREDIT = "credit"
    DEBIT = "debit"

    @property
    def label(self) -> str:
        """Heading used when suggestions are grouped by kind."""
        return "Credit Cards" if self is CardKind.CREDIT else "Debit Cards"


class CardIdentity(BaseModel):
    """
    A resolved card: display spelling plus the key used for all comparisons.
    Two identities are the same card iff their normalized keys match.
    """
    model_config = ConfigDict(frozen=True)

    kind: CardKind
    canonical_name: str
    normalized_key: str

    @classmethod
    def from_raw(
        cls,
        raw_name: str,
        kind: CardKind,
        settings: Optional[MatchingSettings] = None
    ) -> "CardIdentity":
        """
        Builds an identity from a free-text card name.

        The trailing "(variant)" is dropped, brand spellings are canonicalized
        and the key is the normalized base name:
            "Hdfc Regalia (Visa Signature)" -> canonical "HDFC Regalia", key "hdfc regalia"
        """
        base, _ = split_base_and_variant(raw_name)
        display = canonicalize(base, settings)
        return cls(kind=kind, canonical_name=display, normalized_key=normalize_text(display))

    def __eq__(self, other) -> bool:
        if not isinstance(other, CardIdentity):
            return NotImplemented
        return self.normalized_key == other.normalized_key

    def __hash__(self) -> int:
        return hash(self.normalized_key)


class CardCatalog(BaseModel):
    """
    Two ordered sets of unique identities, sorted by display name.
    Built once per data load and read-only afterwards.
    """
    model_config = ConfigDict(frozen=True)

    credit: List[CardIdentity] = Field(default_factory=list)
    debit: List[CardIdentity] = Field(default_factory=list)

    def for_kind(self, kind: CardKind) -> List[CardIdentity]:
        """Entries of one kind."""
        return self.credit if kind is CardKind.CREDIT else self.debit

    @property
    def is_empty(self) -> bool:
        return not self.credit and not self.debit

    @property
    def size(self) -> int:
        return len(self.credit) + len(self.debit)


class OfferRecord(BaseModel):
    """
    One row of a merchant offer feed, tagged with the feed it came from.
    The fields are passed through untouched.
    """
    model_config = ConfigDict(frozen=True)

    source_id: str
    row: Dict[str, str] = Field(default_factory=dict)

    @field_validator('row', mode='before')
    @classmethod
    def stringify_values(cls, v):
        """Feed cells arrive as strings; None and other scalars are coerced."""
        if not v:
            return {}
        return {str(k): "" if val is None else str(val) for k, val in dict(v).items()}

    def get(self, column: str, default: Optional[str] = None) -> Optional[str]:
        return self.row.get(column, default)


class MatchedOffer(BaseModel):
    """An offer judged eligible for the selected card."""
    model_config = ConfigDict(frozen=True)

    offer: OfferRecord
    source_id: str
    variant_note: str = ""


class RenderPolicy(BaseModel):
    """Which parts of an offer a source's feed is trusted to display."""
    model_config = ConfigDict(frozen=True)

    show_image: bool = False
    show_link: bool = False
    show_terms: bool = True


class OfferSource(BaseModel):
    """
    A merchant feed. Sources are handled generically by the pipeline;
    adding a merchant means adding an OfferSource, not new code paths.
    """
    model_config = ConfigDict(frozen=True)

    source_id: str
    display_label: str
    render_policy: RenderPolicy = Field(default_factory=RenderPolicy)
    file_name: Optional[str] = None
    fallback_image: Optional[str] = None

    @field_validator('source_id', 'display_label')
    @classmethod
    def validate_not_blank(cls, v):
        """Sources must be identifiable and labelled."""
        if not v or not v.strip():
            raise ValueError('Source id and label must not be blank')
        return v.strip()


class SourceOffers(BaseModel):
    """Deduplicated matches for one source, in feed order."""
    source: OfferSource
    matches: List[MatchedOffer] = Field(default_factory=list)

    @property
    def heading(self) -> str:
        return f"Offers on {self.source.display_label}"


class SuggestionGroup(BaseModel):
    """Ranked suggestions of a single card kind."""
    kind: CardKind
    entries: List[CardIdentity] = Field(default_factory=list)

    @property
    def label(self) -> str:
        return self.kind.label


class RankedSuggestions(BaseModel):
    """
    The suggestion list for one query: non-empty groups in display order.
    `no_matches` is set when the query was non-blank but nothing was admitted.
    """
    query: str = ""
    groups: List[SuggestionGroup] = Field(default_factory=list)
    no_matches: bool = False

    @property
    def entries(self) -> List[CardIdentity]:
        """All suggestions flattened in display order."""
        return [entry for group in self.groups for entry in group.entries]
