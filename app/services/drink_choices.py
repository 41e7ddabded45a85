"""
Drink Choice Service
List, add and remove the drink types offered on the order form
"""
from typing import Any, List, Optional

from app.errors import BadRequestError, NotFoundError, operation_guard
from app.log import get_logger
from app.models.drink_choice import DrinkChoiceCreate
from app.services.storage import ChoiceStore

logger = get_logger(__name__)


class ChoiceService:
    def __init__(self, store: ChoiceStore):
        self.store = store

    def list_choices(self) -> List[dict]:
        with operation_guard("Failed to read drink choices"):
            return self.store.load()

    def create_choice(self, body: Any) -> dict:
        """
        Add a drink choice.

        ``body`` is the raw request payload, bare or wrapped in ``newDrink``.
        The id is derived from the name and is not checked for duplicates.
        """
        payload = DrinkChoiceCreate.from_payload(body)

        with operation_guard("Failed to create drink choice"):
            choices = self.store.load()
            choice = payload.to_choice().model_dump(exclude_unset=True)
            choices.append(choice)
            self.store.save(choices)

            logger.info("drink_choice_created", choice_id=choice["id"], name=choice["name"])
            return choice

    def delete_choice(self, choice_id: Optional[str]) -> dict:
        if not choice_id:
            raise BadRequestError("Choice ID required")

        with operation_guard("Failed to delete drink choice"):
            choices = self.store.load()
            remaining = [c for c in choices if not (isinstance(c, dict) and c.get("id") == choice_id)]
            if len(remaining) == len(choices):
                raise NotFoundError("Choice not found")

            self.store.save(remaining)
            logger.info("drink_choice_deleted", choice_id=choice_id)
            return {"success": True}
