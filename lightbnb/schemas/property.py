from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from lightbnb.schemas.property_search import MAX_ID
from lightbnb.utils.money import MAX_PRICE


class PropertyCreate(BaseModel):
    owner_id: int = Field(gt=0, le=MAX_ID)
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    thumbnail_photo_url: str = Field(min_length=1, max_length=255)
    cover_photo_url: str = Field(min_length=1, max_length=255)
    cost_per_night: Decimal = Field(ge=0, le=MAX_PRICE)  # dollars; stored as cents
    parking_spaces: int = Field(default=0, ge=0)
    number_of_bathrooms: int = Field(default=0, ge=0)
    number_of_bedrooms: int = Field(default=0, ge=0)
    country: str = Field(min_length=1, max_length=255)
    street: str = Field(min_length=1, max_length=255)
    city: str = Field(min_length=1, max_length=255)
    province: str = Field(min_length=1, max_length=255)
    post_code: str = Field(min_length=1, max_length=255)

    class Config:
        json_schema_extra = {
            "example": {
                "owner_id": 1,
                "title": "Speed lamp",
                "description": "description",
                "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg?auto=compress&cs=tinysrgb&h=350",
                "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
                "cost_per_night": 930.61,
                "parking_spaces": 6,
                "number_of_bathrooms": 4,
                "number_of_bedrooms": 8,
                "country": "Canada",
                "street": "536 Namsub Highway",
                "city": "Sotboske",
                "province": "Quebec",
                "post_code": "28142",
            }
        }
