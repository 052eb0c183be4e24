"""
Offer card and offer section components.
"""

import streamlit as st
from typing import List

from offer_finder.models import SourceOffers
from offer_finder.ui.offer_view import OfferView


def render_offer_card(view: OfferView):
    """Draws one offer following its source's render policy."""
    with st.container(border=True):
        if view.show_image:
            st.image(view.image, width=160)

        st.markdown(f"### {view.title}")
        if view.variant_note:
            st.caption(f"Applicable on: {view.variant_note}")
        if view.coupon_code:
            st.code(view.coupon_code, language=None)

        if view.show_terms:
            with st.expander("Terms & Conditions"):
                st.write(view.terms)

        if view.show_link:
            st.link_button("View Offer", view.link)


def render_offer_sections(results: List[SourceOffers]):
    """One section per source that still has offers, in source order."""
    for result in results:
        if not result.matches:
            continue

        st.subheader(result.heading)
        columns = st.columns(3)
        for idx, match in enumerate(result.matches):
            with columns[idx % 3]:
                render_offer_card(OfferView.from_match(match, result.source))
