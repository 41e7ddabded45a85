"""
Drink Choice Model
Schema for the configurable list of drink types
"""
import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from app.errors import BadRequestError

_WHITESPACE = re.compile(r"\s+")


def derive_choice_id(name: str) -> str:
    """Lowercase the name and collapse each whitespace run into a hyphen"""
    return _WHITESPACE.sub("-", name.lower())


class DrinkChoice(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    description: Any = None


class DrinkChoiceCreate(BaseModel):
    """
    Schema for adding a drink choice.

    Clients send either the bare object or the same object wrapped as
    ``{"newDrink": {...}}``; ``from_payload`` accepts both.
    """
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    description: Any = None

    @classmethod
    def from_payload(cls, body: Any) -> "DrinkChoiceCreate":
        inner = body.get("newDrink") if isinstance(body, dict) else None
        data = inner if isinstance(inner, dict) else body
        if not isinstance(data, dict) or not isinstance(data.get("name"), str) or not data["name"].strip():
            raise BadRequestError("Name is required")
        return cls.model_validate(data)

    def to_choice(self) -> DrinkChoice:
        record = self.model_dump(exclude_unset=True)
        record.pop("id", None)
        return DrinkChoice(id=derive_choice_id(self.name), **record)


DEFAULT_DRINK_CHOICES = [
    DrinkChoice(id="latte", name="Latte", description=""),
    DrinkChoice(id="americano", name="Americano", description="Espresso, no milk, water added"),
    DrinkChoice(id="espresso-shot", name="Espresso Shot", description=""),
]
