"""
Order Model
Schema for submitted drink orders
"""
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class Caffeine(str, Enum):
    DECAF = "decaf"
    REGULAR = "regular"


class DrinkOrder(BaseModel):
    """
    Full order record as stored in the orders document.

    Fields are passed through as sent: id (str), name (str), caffeine
    (decaf | regular), drinkType (a drink choice id), timestamp (ms since
    epoch) and completed (bool). Updates replace the stored record
    wholesale, so fields left out stay out.
    """
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "id": "1718000000000",
                "name": "Ana",
                "caffeine": "regular",
                "drinkType": "latte",
                "timestamp": 1718000000000,
                "completed": False
            }
        },
    )

    id: Any = None
    name: Any = None
    caffeine: Any = None
    drinkType: Any = None
    timestamp: Any = None
    completed: Any = None

    def to_record(self) -> dict:
        return self.model_dump(exclude_unset=True)


class OrderCreate(BaseModel):
    """Schema for submitting an order; id, timestamp and completed are server-assigned"""
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {"name": "Ana", "caffeine": "regular", "drinkType": "latte"}
        },
    )

    name: Any = None
    caffeine: Any = None
    drinkType: Any = None

    def to_record(self) -> dict:
        return self.model_dump(exclude_unset=True)
