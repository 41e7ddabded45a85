"""
Route Dependencies
Build services on top of the configured backing documents
"""
from typing import Any

from fastapi import Depends, Request

from app.config import Settings, get_settings
from app.errors import InternalError
from app.services.drink_choices import ChoiceService
from app.services.orders import OrderService
from app.services.storage import ChoiceStore, JsonFileDocument, OrderStore


def get_order_service(settings: Settings = Depends(get_settings)) -> OrderService:
    return OrderService(OrderStore(JsonFileDocument(settings.orders_path)))


def get_choice_service(settings: Settings = Depends(get_settings)) -> ChoiceService:
    return ChoiceService(ChoiceStore(JsonFileDocument(settings.drink_choices_path)))


async def read_json_body(request: Request, message: str) -> Any:
    """Parse the request body as JSON; an unparseable body fails the operation"""
    try:
        return await request.json()
    except ValueError as e:
        raise InternalError(message, details=str(e)) from e


def json_body_schema(model) -> dict:
    """OpenAPI request body for routes that read the raw JSON themselves"""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }
