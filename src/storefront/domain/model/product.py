"""Product aggregate.

Products live independently of carts. Carts only ever *read* a product's
stock; stock is changed exclusively through catalog management.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

SpecValue = str | int | float

MIN_NAME_LENGTH = 3
MAX_RATING = 5.0


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Review:
    """A single customer review. Reviews are never edited, only appended."""

    author: str
    rating: int
    comment: str = ""
    date: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if not self.author or not self.author.strip():
            raise ValidationError("Review author is required")
        if not isinstance(self.rating, int) or isinstance(self.rating, bool):
            raise ValidationError("Review rating must be an integer")
        if not 1 <= self.rating <= 5:
            raise ValidationError("Review rating must be between 1 and 5")


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products so every field is validated.
    The plain constructor is what repositories use to reconstitute stored
    documents.
    """

    id: str
    name: str
    description: str
    price: Money
    stock: int
    image_url: str
    category: str
    long_description: str = ""
    carousel_images: list[str] = field(default_factory=list)
    rating: float = 0.0
    num_reviews: int = 0
    specifications: dict[str, SpecValue] = field(default_factory=dict)
    reviews: list[Review] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        id: str,
        name: str,
        description: str,
        price: Money,
        stock: int,
        image_url: str,
        category: str,
        long_description: str = "",
        carousel_images: list[str] | None = None,
        rating: float = 0.0,
        num_reviews: int = 0,
        specifications: dict[str, SpecValue] | None = None,
    ) -> Product:
        """Create a new catalog product, enforcing all invariants."""
        product = Product(
            id=id,
            name=(name or "").strip(),
            description=(description or "").strip(),
            price=price,
            stock=stock,
            image_url=(image_url or "").strip(),
            category=(category or "").strip(),
            long_description=(long_description or "").strip(),
            carousel_images=[url.strip() for url in carousel_images or []],
            rating=rating,
            num_reviews=num_reviews,
            specifications=dict(specifications or {}),
        )
        product.validate()
        return product

    # --- Invariants -----------------------------------------------------------

    def validate(self) -> None:
        if len(self.name) < MIN_NAME_LENGTH:
            raise ValidationError(
                f"Product name must be at least {MIN_NAME_LENGTH} characters"
            )
        if not self.description:
            raise ValidationError("Product description is required")
        if not self.image_url:
            raise ValidationError("Product image URL is required")
        if not self.category:
            raise ValidationError("Product category is required")
        if not isinstance(self.stock, int) or isinstance(self.stock, bool):
            raise ValidationError("Product stock must be an integer")
        if self.stock < 0:
            raise ValidationError("Product stock cannot be negative")
        if not 0 <= self.rating <= MAX_RATING:
            raise ValidationError("Product rating must be between 0 and 5")
        if self.num_reviews < 0:
            raise ValidationError("Number of reviews cannot be negative")
        for key, value in self.specifications.items():
            if not isinstance(key, str) or isinstance(value, bool) or not isinstance(
                value, (str, int, float)
            ):
                raise ValidationError(
                    f"Specification {key!r} must map a string to a string or number"
                )

    # --- Mutations ------------------------------------------------------------

    def update_details(self, **changes: object) -> None:
        """Apply a partial update and re-validate.

        Only the keys present in *changes* are touched. On a validation
        failure the product is restored to its previous state.
        """
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"Unknown product field(s): {', '.join(sorted(unknown))}")

        snapshot = {name: getattr(self, name) for name in changes}
        for name, value in changes.items():
            if isinstance(value, str):
                value = value.strip()
            setattr(self, name, value)
        try:
            self.validate()
        except ValidationError:
            for name, value in snapshot.items():
                setattr(self, name, value)
            raise
        self.updated_at = _utcnow()

    def add_review(self, review: Review) -> None:
        """Append a review and fold its rating into the running average."""
        total = Decimal(str(self.rating)) * self.num_reviews + review.rating
        self.num_reviews += 1
        average = (total / self.num_reviews).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        self.rating = float(average)
        self.reviews.append(review)
        self.updated_at = _utcnow()

    def has_stock_for(self, quantity: int) -> bool:
        return quantity <= self.stock


_UPDATABLE_FIELDS = frozenset(
    {
        "name",
        "description",
        "long_description",
        "price",
        "image_url",
        "carousel_images",
        "category",
        "rating",
        "num_reviews",
        "stock",
        "specifications",
    }
)
