"""Request/response Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from src.scrape.models import Product as ScrapedProduct


class Product(BaseModel):
    """One search result as it travels over the wire (camelCase keys)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str
    rating: str | None = None
    reviews: str | None = None
    price: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")
    product_url: str = Field(alias="productUrl")
    is_sponsored: bool = Field(default=False, alias="isSponsored")

    @classmethod
    def from_scraped(cls, product: ScrapedProduct) -> Product:
        return cls(
            title=product.title,
            rating=product.rating,
            reviews=product.reviews,
            price=product.price,
            image_url=product.image_url,
            product_url=product.product_url,
            is_sponsored=product.is_sponsored,
        )


class ErrorResponse(BaseModel):
    error: str
