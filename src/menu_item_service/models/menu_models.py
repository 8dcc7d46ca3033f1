"""Menu data models.

These models represent the menu items served by the admin API and the
response envelopes returned alongside them.
"""

from enum import Enum

from pydantic import BaseModel, Field


class MenuCategory(str, Enum):
    """Enumeration of menu categories."""

    APPETIZER = "appetizer"
    ENTREE = "entree"
    DESSERT = "dessert"
    BEVERAGE = "beverage"


class MenuItem(BaseModel):
    """Menu item model.

    Field values are checked by the validation service before a record is
    built, so the constraints here only document the shape of stored items.
    """

    id: int = Field(..., description="Unique identifier assigned by the store", gt=0)
    name: str = Field(..., description="Item name", min_length=3)
    description: str = Field(..., description="Item description", min_length=10)
    price: float = Field(..., description="Item price", gt=0)
    category: MenuCategory = Field(..., description="Menu section the item belongs to")
    ingredients: list[str] = Field(..., description="Ingredients in display order", min_length=1)
    available: bool = Field(default=True, description="Whether item is currently available")


class MessageResponse(BaseModel):
    """Plain message response, used for deletes and lookups that miss."""

    message: str


class ValidationErrorResponse(BaseModel):
    """Response body for rejected writes."""

    error: str
    messages: list[str]
