"""
Display helpers shared by the order and settings pages
"""
from datetime import datetime, timezone
from typing import Iterable, Optional

from app.models.order import Caffeine


def choice_label(choice: dict) -> str:
    name = choice.get("name") or ""
    description = choice.get("description")
    return f"{name} ({description})" if description else name


def drink_display_name(drink_type: Optional[str], choices: Iterable[dict]) -> str:
    """Label for an order's drink type, falling back to the raw id when the choice is gone"""
    for choice in choices:
        if choice.get("id") == drink_type:
            return choice_label(choice)
    return drink_type or ""


def caffeine_label(caffeine: Optional[str]) -> str:
    return "Decaf" if caffeine == Caffeine.DECAF.value else "Regular"


def _to_datetime(timestamp) -> Optional[datetime]:
    if not isinstance(timestamp, (int, float)) or isinstance(timestamp, bool):
        return None
    return datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc)


# Pages render UTC text and the page scripts rewrite it in the browser's locale

def iso_timestamp(timestamp) -> str:
    moment = _to_datetime(timestamp)
    return moment.isoformat(timespec="seconds") if moment else ""


def format_time(timestamp) -> str:
    moment = _to_datetime(timestamp)
    return moment.strftime("%H:%M UTC") if moment else ""


def format_datetime(timestamp) -> str:
    moment = _to_datetime(timestamp)
    return moment.strftime("%Y-%m-%d %H:%M:%S UTC") if moment else ""
