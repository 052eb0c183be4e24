"""
Merchant offer feeds shown by the app, in display (and dedup) order.
"""

from typing import List

from offer_finder.models import OfferSource, RenderPolicy

CATALOG_FILE = "allCards.csv"

DEFAULT_SOURCES: List[OfferSource] = [
    OfferSource(
        source_id="amazon",
        display_label="Amazon",
        file_name="amazon.csv",
        render_policy=RenderPolicy(show_image=False, show_link=False),
        fallback_image=(
            "https://media.licdn.com/dms/image/v2/D4D12AQF083mMinXCtQ/article-cover_image-shrink_720_1280/"
            "article-cover_image-shrink_720_1280/0/1686067344413?e=2147483647&v=beta"
            "&t=nm30MQ8OI-9VSUXR95shyABNZfOmt-f5f9R4zf9_yeU"
        ),
    ),
    OfferSource(
        source_id="croma",
        display_label="Croma",
        file_name="croma.csv",
        render_policy=RenderPolicy(show_image=True, show_link=True),
        fallback_image="https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcRSuJw-G69osCWDOvabS4K8FjdfiepJ_9FdfA&s",
    ),
    OfferSource(
        source_id="flipkart",
        display_label="Flipkart",
        file_name="flipkart.csv",
        render_policy=RenderPolicy(show_image=False, show_link=False),
        fallback_image=(
            "https://play-lh.googleusercontent.com/0-sXSA0gnPDKi6EeQQCYPsrDx6DqnHELJJ7wFP8bWCpziL4k5kJf8RnOoupdnOFuDm_n"
            "=s256-rw"
        ),
    ),
    OfferSource(
        source_id="reliance-digital",
        display_label="Reliance Digital",
        file_name="reliance-digital.csv",
        render_policy=RenderPolicy(show_image=False, show_link=True),
        fallback_image="https://cdn.shopify.com/s/files/1/0562/4011/1678/files/reliance-digital_logo.png?v=1708586249",
    ),
]
