"""Listing data models"""

from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator


class Category(str, Enum):
    """Listing category, valued by its canonical display string"""
    ELECTRONICS = "Electronics"
    FASHION = "Fashion"
    HOME_AND_GARDEN = "Home & Garden"
    MOTORS = "Motors"
    COLLECTIBLES_AND_ART = "Collectibles & Art"
    SPORTING_GOODS = "Sporting Goods"
    TOYS_AND_HOBBIES = "Toys & Hobbies"
    BUSINESS_AND_INDUSTRIAL = "Business & Industrial"
    MUSIC = "Music"
    HEALTH_AND_BEAUTY = "Health & Beauty"
    BOOKS = "Books"
    CAMERAS_AND_PHOTO = "Cameras & Photo"
    COMPUTERS_TABLETS_AND_NETWORKING = "Computers, Tablets & Networking"
    CELL_PHONES_AND_ACCESSORIES = "Cell Phones & Accessories"
    VIDEO_GAMES_AND_CONSOLES = "Video Games & Consoles"

    @classmethod
    def display_names(cls) -> list:
        return [category.value for category in cls]


class Price(BaseModel):
    """Listing price"""
    currency: str = Field(min_length=3, max_length=3)
    amount: Decimal = Field(gt=0)

    class Config:
        frozen = True

    @field_validator("currency")
    @classmethod
    def _upper_currency(cls, value: str) -> str:
        return value.upper()


class Location(BaseModel):
    """Listing location: country code, municipality and geohash"""
    country: str = Field(min_length=2, max_length=2)
    municipality: str = Field(min_length=1)
    geohash: str = Field(min_length=7, max_length=7)

    class Config:
        frozen = True

    @field_validator("country")
    @classmethod
    def _upper_country(cls, value: str) -> str:
        return value.upper()

    @field_validator("municipality")
    @classmethod
    def _municipality_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Municipality cannot be blank")
        return value


class ListingBase(BaseModel):
    """Base listing fields"""
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1)
    price: Price
    category: Category
    location: Location

    @field_validator("name", "description")
    @classmethod
    def _not_blank(cls, value: str, info) -> str:
        if not value.strip():
            raise ValueError(f"{info.field_name.capitalize()} cannot be blank")
        return value


class ListingCreate(ListingBase):
    """Model for creating or replacing a listing"""
    pass


class Listing(ListingBase):
    """Complete listing model"""
    listing_id: UUID = Field(default_factory=uuid4)

    class Config:
        from_attributes = True
        frozen = True
