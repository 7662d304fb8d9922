"""Dish models."""
from pydantic import BaseModel


class Dish(BaseModel):
    """Catalog dish."""

    id: str
    name: str
    description: str
    price: int  # Whole currency units, > 0
    image_url: str
