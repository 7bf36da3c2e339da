"""Maps one rendered result node to a ``Product``.

The page's DOM lives in the browser's sandbox, so nodes are never handed to
Python directly. ``READ_RESULT_NODES_JS`` runs inside the page and answers a
fixed set of text, attribute and presence reads for every result node; the
answers come back as plain dicts and are wrapped in ``NodeSnapshot``.
``extract_product`` only ever talks to the narrow ``ResultNode`` protocol.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Protocol

from .models import Product
from .selectors import DEFAULT_SELECTORS, MarketplaceSelectors

logger = logging.getLogger(__name__)

# Evaluated with (result nodes, read plan). Empty strings come back as null so
# absence is explicit on the Python side.
READ_RESULT_NODES_JS = """
(nodes, plan) => nodes.map((node) => {
  const text = {};
  for (const selector of plan.text) {
    const el = node.querySelector(selector);
    const value = el && el.textContent ? el.textContent.trim() : "";
    text[selector] = value || null;
  }
  const attributes = {};
  for (const [selector, name] of plan.attributes) {
    const el = node.querySelector(selector);
    let value = null;
    if (el) {
      value = typeof el[name] === "string" ? el[name] : el.getAttribute(name);
    }
    attributes[selector + "|" + name] = value || null;
  }
  const present = {};
  for (const selector of plan.present) {
    present[selector] = node.querySelector(selector) !== null;
  }
  return { text, attributes, present };
})
"""


class ResultNode(Protocol):
    """Read-only view of one result node."""

    def text(self, selector: str) -> str | None: ...

    def attribute(self, selector: str, name: str) -> str | None: ...

    def has(self, selector: str) -> bool: ...


class NodeSnapshot:
    """A ``ResultNode`` backed by the flat answers of the in-page read script.

    Asking for a read that was not part of the plan raises ``KeyError``.
    """

    def __init__(
        self,
        text: dict[str, str | None] | None = None,
        attributes: dict[str, str | None] | None = None,
        present: dict[str, bool] | None = None,
    ) -> None:
        self._text = text or {}
        self._attributes = attributes or {}
        self._present = present or {}

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> NodeSnapshot:
        return cls(
            text=payload.get("text"),
            attributes=payload.get("attributes"),
            present=payload.get("present"),
        )

    def text(self, selector: str) -> str | None:
        return _clean(self._text[selector])

    def attribute(self, selector: str, name: str) -> str | None:
        return _clean(self._attributes[f"{selector}|{name}"])

    def has(self, selector: str) -> bool:
        return bool(self._present[selector])


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def rating_token(label: str | None) -> str | None:
    """``"4.5 out of 5 stars"`` -> ``"4.5"``."""
    if not label:
        return None
    parts = label.split()
    return parts[0] if parts else None


def compose_price(whole: str | None, fraction: str | None) -> str | None:
    """Join the integer and fractional parts as shown, or ``None`` unless both exist.

    The parts are concatenated literally; no decimal point is inserted.
    """
    if whole and fraction:
        return f"${whole}{fraction}"
    return None


def is_sponsored(node: ResultNode, selectors: MarketplaceSelectors = DEFAULT_SELECTORS) -> bool:
    return node.has(selectors.sponsored_label)


def extract_product(
    node: ResultNode,
    selectors: MarketplaceSelectors = DEFAULT_SELECTORS,
) -> Product | None:
    """Project one result node into a ``Product``, or ``None`` to drop it.

    Nodes missing either the title or the product link are dropped whole.
    """
    title = node.text(selectors.title)
    product_url = node.attribute(selectors.title_link, "href")
    if not title or not product_url:
        return None

    return Product(
        title=title,
        product_url=product_url,
        image_url=node.attribute(selectors.image, "src"),
        rating=rating_token(node.text(selectors.rating)),
        reviews=node.text(selectors.reviews),
        price=compose_price(
            node.text(selectors.price_whole),
            node.text(selectors.price_fraction),
        ),
        is_sponsored=is_sponsored(node, selectors),
    )


def extract_products(
    nodes: Iterable[ResultNode],
    selectors: MarketplaceSelectors = DEFAULT_SELECTORS,
) -> list[Product]:
    """Extract every valid node, keeping page order."""
    products: list[Product] = []
    dropped = 0
    for node in nodes:
        product = extract_product(node, selectors)
        if product is None:
            dropped += 1
            continue
        products.append(product)
    if dropped:
        logger.debug("result nodes dropped", extra={"dropped": dropped, "kept": len(products)})
    return products
