"""Pydantic schemas for catalog products, filter criteria and filter results."""

from decimal import Decimal
from typing import Annotated, Any, Self

from pydantic import (
    AliasChoices,
    AliasGenerator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    field_validator,
)
from pydantic.alias_generators import to_pascal

# Prices compare exactly as Decimal but go out as JSON numbers
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


def _pascal_or_snake(field_name: str) -> AliasChoices:
    return AliasChoices(to_pascal(field_name), field_name)


class CatalogSchema(BaseModel):
    """Base for catalog payloads.

    Accepts ``Price`` or ``price`` on input and always writes ``Price``.
    """

    model_config = ConfigDict(
        alias_generator=AliasGenerator(
            validation_alias=_pascal_or_snake,
            serialization_alias=to_pascal,
        ),
        populate_by_name=True,
        extra="ignore",
    )


class Product(CatalogSchema):
    """A single catalog product."""

    id: int | str
    name: str = ""
    description: str = ""
    price: Price
    size: str | None = None

    @field_validator("name", "description", mode="before")
    @classmethod
    def _null_text_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class CatalogEnvelope(CatalogSchema):
    """Outer document returned by a catalog source."""

    products: list[Product]


class FilterCriteria(BaseModel):
    """Filters applied to the fetched catalog. Absent fields do not constrain."""

    min_price: Decimal | None = Field(None, description="Inclusive minimum price")
    max_price: Decimal | None = Field(None, description="Inclusive maximum price")
    size: str | None = Field(None, description="Exact size, case-insensitive")
    highlight: list[str] = Field(
        default_factory=list, description="Words to emphasize in descriptions"
    )

    @classmethod
    def from_query(
        cls,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        size: str | None = None,
        highlight: str | None = None,
    ) -> Self:
        """Build criteria from raw query values.

        ``highlight`` is comma-separated; terms are stripped and blanks dropped.
        An empty ``size`` means no size filter.
        """
        terms = [term.strip() for term in highlight.split(",")] if highlight else []
        return cls(
            min_price=min_price,
            max_price=max_price,
            size=size or None,
            highlight=[term for term in terms if term],
        )


class FilterMetadata(CatalogSchema):
    """Summary of the whole fetched catalog, independent of any filter."""

    min_price: Price | None
    max_price: Price | None
    sizes: list[str | None]
    common_words: list[str]

    @classmethod
    def empty(cls) -> Self:
        """Metadata for a catalog with no products."""
        return cls(min_price=None, max_price=None, sizes=[], common_words=[])


class FilterResponse(CatalogSchema):
    """Response of the filter endpoint."""

    filter: FilterMetadata
    products: list[Product]
