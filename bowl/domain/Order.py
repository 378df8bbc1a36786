"""Order aggregate: one customer's bowl for one delivery date, with its ingredient items."""
from typing import List, Optional


class OrderItem:
    def __init__(self, ingredient_id: str = "", quantity: int = 1):
        self.ingredient_id = ingredient_id
        self.quantity = quantity

    def __eq__(self, other):
        if not isinstance(other, OrderItem):
            return NotImplemented
        return (self.ingredient_id, self.quantity) == (other.ingredient_id, other.quantity)

    def __repr__(self) -> str:
        return f"OrderItem({self.ingredient_id!r}, {self.quantity})"

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        try:
            quantity = int(d.get("quantity") or 0)
        except (TypeError, ValueError):
            quantity = 0
        return OrderItem(str(d.get("ingredient_id") or ""), quantity)

    def to_dict(self):
        return {"ingredient_id": self.ingredient_id, "quantity": self.quantity}


class Order:
    def __init__(self, id: str = "", customer_id: str = "", delivery_date: str = "",
                 room: Optional[str] = None, allergies: Optional[str] = None,
                 created_at: str = "", items: Optional[List[OrderItem]] = None):
        self.id = id
        self.customer_id = customer_id
        self.delivery_date = delivery_date
        self.room = room
        self.allergies = allergies
        self.created_at = created_at
        self.items = items[:] if items else []

    def __str__(self) -> str:
        return f"Order {self.id} - {self.customer_id} - {self.delivery_date} - {len(self.items)} items"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Order(
            id=str(d.get("id") or ""),
            customer_id=str(d.get("customer_id") or ""),
            delivery_date=d.get("delivery_date") or "",
            room=d.get("room"),
            allergies=d.get("allergies"),
            created_at=d.get("created_at") or "",
            items=[OrderItem.from_dict(it) for it in d.get("items", []) or []],
        )

    def to_dict(self):
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "delivery_date": self.delivery_date,
            "room": self.room,
            "allergies": self.allergies,
            "created_at": self.created_at,
            "items": [it.to_dict() for it in self.items],
        }
