"""
Card selection components: quick-pick chips and grouped suggestions.
"""

import streamlit as st
from typing import Optional

from offer_finder.models import CardCatalog, CardIdentity, CardKind, RankedSuggestions


def render_quick_picks(quick_picks: CardCatalog) -> Optional[CardIdentity]:
    """Chips for every card that has offers. Returns the clicked card, if any."""
    if quick_picks.is_empty:
        return None

    picked = None
    with st.expander("Credit And Debit Cards Which Have Offers"):
        for kind in CardKind:
            cards = quick_picks.for_kind(kind)
            if not cards:
                continue
            st.markdown(f"**{kind.label}:**")
            columns = st.columns(4)
            for idx, card in enumerate(cards):
                if columns[idx % 4].button(card.canonical_name, key=f"chip-{kind.value}-{card.normalized_key}"):
                    picked = card
    return picked


def render_suggestions(suggestions: RankedSuggestions) -> Optional[CardIdentity]:
    """Grouped suggestion list. Returns the clicked card, if any."""
    picked = None
    for group in suggestions.groups:
        st.markdown(f"**{group.label}**")
        for card in group.entries:
            if st.button(card.canonical_name, key=f"suggest-{group.kind.value}-{card.normalized_key}"):
                picked = card
    return picked
