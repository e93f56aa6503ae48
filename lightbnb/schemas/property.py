"""
Pydantic schemas for property input and search options.
Numeric fields are coerced here so that only integers and decimals are ever bound.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from decimal import Decimal


class PropertyCreate(BaseModel):
    """
    Schema for creating a new property.
    
    Text columns are optional here; NOT NULL columns are enforced by the store
    and surface as constraint violations.
    """
    
    owner_id: int = Field(..., description="Id of the owning user")
    
    title: Optional[str] = Field(None, examples=["Speed lamp"])
    description: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url: Optional[str] = None
    
    cost_per_night: int = Field(
        0,
        description="Nightly price in cents",
        examples=[93061]
    )
    
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    
    country: Optional[str] = Field(None, examples=["Canada"])
    street: Optional[str] = None
    city: Optional[str] = Field(None, examples=["Vancouver"])
    province: Optional[str] = None
    post_code: Optional[str] = None


class PropertySearchOptions(BaseModel):
    """
    Property search filters. All are optional and combine with AND.
    
    Empty strings count as "not supplied" so that search forms can be passed
    through unchanged.
    """
    
    city: Optional[str] = Field(
        None,
        description="Substring of the city name",
        examples=["van"]
    )
    
    owner_id: Optional[int] = Field(None, description="Only properties of this owner")
    
    minimum_price_per_night: Optional[Decimal] = Field(
        None,
        description="Inclusive lower bound in dollars",
        examples=[50]
    )
    
    maximum_price_per_night: Optional[Decimal] = Field(
        None,
        description="Inclusive upper bound in dollars",
        examples=[150]
    )
    
    minimum_rating: Optional[Decimal] = Field(
        None,
        description="Lower bound on the average review rating"
    )
    
    model_config = {"extra": "ignore"}
    
    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Treat blank form values as missing."""
        if isinstance(v, str) and not v.strip():
            return None
        return v
    
    @property
    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())
