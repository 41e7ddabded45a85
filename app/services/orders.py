"""
Order Service
List, create, replace and delete drink orders
"""
import time
from typing import Any, Callable, List, Optional

from app.errors import BadRequestError, NotFoundError, operation_guard
from app.log import get_logger
from app.models.order import DrinkOrder, OrderCreate
from app.services.storage import OrderStore

logger = get_logger(__name__)


class OrderIdGenerator:
    """Millisecond-based ids, bumped so each one is greater than the last"""

    def __init__(self):
        self._last = 0

    def next_id(self, now_ms: int) -> str:
        value = max(now_ms, self._last + 1)
        self._last = value
        return str(value)


# Shared across requests so ids stay unique within the process
order_ids = OrderIdGenerator()


class OrderService:
    def __init__(
        self,
        store: OrderStore,
        clock: Callable[[], float] = time.time,
        ids: Optional[OrderIdGenerator] = None,
    ):
        self.store = store
        self.clock = clock
        self.ids = ids or order_ids

    def list_orders(self) -> List[dict]:
        with operation_guard("Failed to read orders"):
            return self.store.load()

    def create_order(self, body: Any) -> dict:
        with operation_guard("Failed to create order"):
            payload = OrderCreate.model_validate(body)
            orders = self.store.load()
            now_ms = int(self.clock() * 1000)

            order = payload.to_record()
            order.update(
                id=self.ids.next_id(now_ms),
                timestamp=now_ms,
                completed=False,
            )
            orders.append(order)
            self.store.save(orders)

            logger.info(
                "order_created",
                order_id=order["id"],
                name=order.get("name"),
                drink_type=order.get("drinkType"),
            )
            return order

    def update_order(self, body: Any) -> dict:
        """Replace the stored order with the same id; nothing is merged"""
        with operation_guard("Failed to update order"):
            update = DrinkOrder.model_validate(body)
            orders = self.store.load()
            index = next(
                (i for i, o in enumerate(orders) if isinstance(o, dict) and o.get("id") == update.id),
                None,
            )
            if update.id is None or index is None:
                raise NotFoundError("Order not found")

            record = update.to_record()
            orders[index] = record
            self.store.save(orders)

            logger.info("order_updated", order_id=update.id, completed=record.get("completed"))
            return record

    def delete_order(self, order_id: Optional[str]) -> dict:
        if not order_id:
            raise BadRequestError("Order ID required")

        with operation_guard("Failed to delete order"):
            orders = self.store.load()
            remaining = [o for o in orders if not (isinstance(o, dict) and o.get("id") == order_id)]
            if len(remaining) == len(orders):
                raise NotFoundError("Order not found")

            self.store.save(remaining)
            logger.info("order_deleted", order_id=order_id)
            return {"success": True}
