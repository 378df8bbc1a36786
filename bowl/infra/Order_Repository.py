"""Order repository: one order per (customer, delivery date), items replaced on each save."""
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional
from uuid import uuid4

from bowl.domain.Order import Order, OrderItem
from bowl.infra.paths import ORDERS_FILENAME, data_file
from bowl.infra.storage import atomic_write, read_json, write_lock

logger = logging.getLogger(__name__)


class OrderRepository:
    def __init__(self, data_dir: Optional[Path] = None):
        self.path = data_file(ORDERS_FILENAME, data_dir)

    def get_all(self) -> List[Order]:
        return [Order.from_dict(row) for row in read_json(self.path, [])]

    def get_for_date(self, delivery_date: str) -> List[Order]:
        orders = [o for o in self.get_all() if o.delivery_date == delivery_date]
        return sorted(orders, key=lambda o: o.created_at)

    def find(self, customer_id: str, delivery_date: str) -> Optional[Order]:
        return next((o for o in self.get_all()
                     if o.customer_id == customer_id and o.delivery_date == delivery_date), None)

    def items_for_date(self, delivery_date: str) -> List[OrderItem]:
        return [it for o in self.get_for_date(delivery_date) for it in o.items]

    def upsert(self, customer_id: str, delivery_date: str, items: List[OrderItem],
               room: Optional[str] = None, allergies: Optional[str] = None,
               created_at: Optional[datetime] = None) -> Order:
        with write_lock:
            orders = self.get_all()
            order = next((o for o in orders
                          if o.customer_id == customer_id and o.delivery_date == delivery_date), None)
            if order is None:
                stamp = created_at if created_at is not None else datetime.now()
                order = Order(str(uuid4()), customer_id, delivery_date,
                              created_at=stamp.isoformat(timespec="seconds"))
                orders.append(order)
            order.items = list(items)
            order.room = room
            order.allergies = allergies
            atomic_write(self.path, [o.to_dict() for o in orders])
        logger.info(f"Order saved: {order}")
        return order
