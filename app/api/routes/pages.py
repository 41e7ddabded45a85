"""
Page Routes
Server-rendered order and settings pages
"""
import os

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.api.deps import get_choice_service, get_order_service
from app.log import get_logger
from app.services import display
from app.services.drink_choices import ChoiceService
from app.services.orders import OrderService

logger = get_logger(__name__)

router = APIRouter()

APP_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
TEMPLATE_DIR = os.path.join(APP_DIR, "templates")
STATIC_DIR = os.path.join(APP_DIR, "static")

templates = Jinja2Templates(directory=TEMPLATE_DIR)
templates.env.globals.update(
    drink_display_name=display.drink_display_name,
    choice_label=display.choice_label,
)
templates.env.filters.update(
    caffeine_label=display.caffeine_label,
    format_time=display.format_time,
    format_datetime=display.format_datetime,
    iso_timestamp=display.iso_timestamp,
)


def _load(orders: OrderService, choices: ChoiceService):
    """Fetch both collections; a failure leaves that list empty"""
    try:
        order_list = orders.list_orders()
    except Exception as e:
        logger.error("page_orders_unavailable", error=str(e))
        order_list = []
    try:
        choice_list = choices.list_choices()
    except Exception as e:
        logger.error("page_choices_unavailable", error=str(e))
        choice_list = []
    return order_list, choice_list


@router.get("/", response_class=HTMLResponse)
async def order_page(
    request: Request,
    orders: OrderService = Depends(get_order_service),
    choices: ChoiceService = Depends(get_choice_service)
):
    """Order form and current order list"""
    order_list, choice_list = _load(orders, choices)
    return templates.TemplateResponse(
        request,
        "index.html",
        {"orders": order_list, "choices": choice_list},
    )


@router.get("/settings", response_class=HTMLResponse)
async def settings_page(
    request: Request,
    orders: OrderService = Depends(get_order_service),
    choices: ChoiceService = Depends(get_choice_service)
):
    """Drink choice management and order removal"""
    order_list, choice_list = _load(orders, choices)
    return templates.TemplateResponse(
        request,
        "settings.html",
        {"orders": order_list, "choices": choice_list},
    )
