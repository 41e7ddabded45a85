"""
Drink Choice Routes
JSON endpoints for the drink choices collection
"""
from fastapi import APIRouter, Depends, Query, Request
from typing import Optional

from app.api.deps import get_choice_service, json_body_schema, read_json_body
from app.models.drink_choice import DrinkChoiceCreate
from app.services.drink_choices import ChoiceService

router = APIRouter()


@router.get("")
async def list_drink_choices(service: ChoiceService = Depends(get_choice_service)):
    """Get all drink choices; seeds the defaults on first use"""
    return service.list_choices()


@router.post("", openapi_extra=json_body_schema(DrinkChoiceCreate))
async def create_drink_choice(
    request: Request,
    service: ChoiceService = Depends(get_choice_service)
):
    """Add a drink choice; accepts the bare object or one wrapped in newDrink"""
    body = await read_json_body(request, "Failed to create drink choice")
    return service.create_choice(body)


@router.delete("")
async def delete_drink_choice(
    id: Optional[str] = Query(None, description="Drink choice id"),
    service: ChoiceService = Depends(get_choice_service)
):
    """Remove a drink choice"""
    return service.delete_choice(id)
