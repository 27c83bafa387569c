from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from lightbnb.utils.money import MAX_PRICE

MAX_ID = 2**31 - 1


class FilterCriteria(BaseModel):
    """
    Optional constraints for a property search. Prices are in major units
    (dollars); they are converted to cents when the query is built.
    """
    city: Optional[str] = None
    minimum_price_per_night: Optional[Decimal] = Field(default=None, ge=0, le=MAX_PRICE)
    maximum_price_per_night: Optional[Decimal] = Field(default=None, ge=0, le=MAX_PRICE)
    minimum_rating: Optional[Decimal] = Field(default=None, ge=0, le=5)
    owner_id: Optional[int] = Field(default=None, gt=0, le=MAX_ID)

    @field_validator("*", mode="before")
    @classmethod
    def blank_means_absent(cls, v):
        # The search form submits every field, empty ones as ""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("city")
    @classmethod
    def strip_city(cls, v):
        return v.strip() if v is not None else v

    @model_validator(mode="after")
    def check_price_range(self):
        low, high = self.minimum_price_per_night, self.maximum_price_per_night
        if low is not None and high is not None and low > high:
            raise ValueError("minimum_price_per_night cannot exceed maximum_price_per_night")
        return self

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)

    class Config:
        json_schema_extra = {
            "example": {
                "city": "Vancouver",
                "minimum_price_per_night": 50,
                "maximum_price_per_night": 150,
                "minimum_rating": 4,
            }
        }
