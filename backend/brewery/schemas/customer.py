"""
Brewery Backend — Customer Request/Response Schemas
=====================================================

Same three shapes as the beer schemas: CustomerDTO (response),
CustomerRequest (POST/PUT, validated), CustomerPatch (PATCH, optional).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from brewery.schemas.common import ApiModel

CUSTOMER_NAME_MIN_LENGTH = 3
CUSTOMER_NAME_MAX_LENGTH = 255


class CustomerDTO(ApiModel):
    id: Optional[int] = Field(default=None, description="Server-assigned identifier")
    customer_name: Optional[str] = Field(default=None, description="Customer display name")
    created_date: Optional[datetime] = Field(default=None)
    last_modified_date: Optional[datetime] = Field(default=None)


class CustomerRequest(ApiModel):
    """Body of POST and PUT. `customerName` is required, 3–255 characters."""
    customer_name: str = Field(
        min_length=CUSTOMER_NAME_MIN_LENGTH,
        max_length=CUSTOMER_NAME_MAX_LENGTH,
    )


class CustomerPatch(ApiModel):
    """
    Body of PATCH. A blank or missing name leaves the stored one untouched;
    any other name must satisfy the same 3–255 bounds as CustomerRequest.
    """
    customer_name: Optional[str] = Field(default=None, max_length=CUSTOMER_NAME_MAX_LENGTH)

    @field_validator("customer_name")
    @classmethod
    def validate_min_length(cls, v: Optional[str]) -> Optional[str]:
        if v and v.strip() and len(v) < CUSTOMER_NAME_MIN_LENGTH:
            raise ValueError(
                f"String should have at least {CUSTOMER_NAME_MIN_LENGTH} characters"
            )
        return v
