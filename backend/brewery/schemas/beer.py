"""
Brewery Backend — Beer Request/Response Schemas
=================================================

What:  Pydantic models defining the beer API contract.
How:   Three shapes per resource:
         BeerDTO      → what the API returns (GET)
         BeerRequest  → POST / PUT body, validated
         BeerPatch    → PATCH body, every field optional

PUT is a full replace:
    Name, style and UPC are free text. An empty string is a legal value and
    PUT stores it as given; only the column lengths are enforced.

PATCH bounds:
    A patch only carries the fields the client wants to change, so nothing is
    required. Strings and price are capped at their column sizes. Numeric
    ranges are not re-checked at patch time; the service applies any
    non-null number as given.

Price:
    Decimal end to end (NUMERIC(10, 2) in the database). JSON input may be a
    number or a string; output is a JSON number such as 12.99
    (every NUMERIC(10, 2) value round-trips through a float).

Client-supplied `id`, `createdDate` and `lastModifiedDate` are not part of
the request models and are silently ignored.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_serializer

from brewery.schemas.common import ApiModel

NAME_MAX_LENGTH = 255
UPC_MAX_LENGTH = 25
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2


class BeerDTO(ApiModel):
    """
    What:  Full representation of a beer as exposed over the wire.
    Who:   Returned by GET /api/v2/beer (as array items) and GET /api/v2/beer/{id}.
    """
    id: Optional[int] = Field(default=None, description="Server-assigned identifier")
    beer_name: Optional[str] = Field(default=None, description="Name of the beer")
    beer_style: Optional[str] = Field(default=None, description="Style, e.g. IPA, Stout")
    upc: Optional[str] = Field(default=None, description="Universal Product Code")
    quantity_on_hand: Optional[int] = Field(default=None, description="Units in stock")
    price: Optional[Decimal] = Field(default=None, description="Unit price")
    created_date: Optional[datetime] = Field(default=None, description="When the beer was created")
    last_modified_date: Optional[datetime] = Field(
        default=None, description="When the beer was last modified"
    )

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Optional[Decimal]) -> Optional[float]:
        return float(price) if price is not None else None


class BeerRequest(ApiModel):
    """
    What:  Body of POST /api/v2/beer and PUT /api/v2/beer/{id}.

    Constraints:
        beerName, beerStyle: required, at most 255 characters (may be empty)
        upc: optional, at most 25 characters (may be empty)
        quantityOnHand: optional, non-negative
        price: required, non-negative, at most 10 digits with 2 decimals
    """
    beer_name: str = Field(max_length=NAME_MAX_LENGTH)
    beer_style: str = Field(max_length=NAME_MAX_LENGTH)
    upc: Optional[str] = Field(default=None, max_length=UPC_MAX_LENGTH)
    quantity_on_hand: Optional[int] = Field(default=None, ge=0)
    price: Decimal = Field(
        ge=0, max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )


class BeerPatch(ApiModel):
    """
    What:  Body of PATCH /api/v2/beer/{id}.

    Merge rules (applied by BeerService.patch_beer):
        string fields: applied only when they contain a non-whitespace character
        quantityOnHand, price: applied whenever present and not null
    """
    beer_name: Optional[str] = Field(default=None, max_length=NAME_MAX_LENGTH)
    beer_style: Optional[str] = Field(default=None, max_length=NAME_MAX_LENGTH)
    upc: Optional[str] = Field(default=None, max_length=UPC_MAX_LENGTH)
    quantity_on_hand: Optional[int] = None
    price: Optional[Decimal] = Field(
        default=None, max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
