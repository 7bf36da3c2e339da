"""CSS selectors describing the marketplace's search-result markup."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MarketplaceSelectors:
    """Where each field lives inside the results page."""

    results_container: str = '[data-component-type="s-search-results"]'
    result_node: str = '[data-component-type="s-search-result"]'

    title: str = "h2 .a-link-normal .a-text-normal"
    title_link: str = "h2 a"
    image: str = ".s-image"
    rating: str = ".a-icon-alt"
    reviews: str = ".a-size-base.s-underline-text"
    price_whole: str = ".a-price-whole"
    price_fraction: str = ".a-price-fraction"
    sponsored_label: str = ".s-label-sponsored-label"

    def read_plan(self) -> dict[str, list]:
        """The reads one result node must answer, as JSON-safe primitives.

        Passed into the page as the argument of the in-page read script.
        """
        return {
            "text": [
                self.title,
                self.rating,
                self.reviews,
                self.price_whole,
                self.price_fraction,
            ],
            "attributes": [
                [self.title_link, "href"],
                [self.image, "src"],
            ],
            "present": [self.sponsored_label],
        }


DEFAULT_SELECTORS = MarketplaceSelectors()
