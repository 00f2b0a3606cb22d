# src/models/product.py

"""Catalog product models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Product:
    """A jewelry item from the static catalog.

    Price is never stored; it is derived per query from the gold quote.
    """

    name: str
    popularity_score: float
    weight: float
    images: dict[str, str] = field(
        default_factory=lambda: dict[str, str](), compare=False
    )


@dataclass(frozen=True)
class PricedProduct:
    """A catalog product annotated with the price for one query."""

    name: str
    popularity_score: float
    weight: float
    price: float
    images: dict[str, str] = field(
        default_factory=lambda: dict[str, str](), compare=False
    )

    @classmethod
    def from_product(
        cls, product: Product, price: float,
    ) -> "PricedProduct":
        """Attach a computed price to a catalog product."""
        return cls(
            name=product.name,
            popularity_score=product.popularity_score,
            weight=product.weight,
            price=price,
            images=dict(product.images),
        )

    def to_dict(self) -> dict[str, object]:
        """Serialise to the JSON wire shape."""
        return {
            "name": self.name,
            "popularityScore": self.popularity_score,
            "weight": self.weight,
            "price": self.price,
            "images": dict(self.images),
        }
