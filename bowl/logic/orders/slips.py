"""Order slips: one printable card per order, items grouped by layer."""
from __future__ import annotations
from typing import Any, Dict, Iterable, List

from bowl.domain.Customer import Customer
from bowl.domain.Ingredient import Ingredient
from bowl.domain.Layer import Layer
from bowl.domain.Order import Order
from bowl.logic.scheduling.delivery import format_date
from bowl.utilities.constants import OTHER_LAYER_NAME, OTHER_LAYER_SORT

__all__ = ["group_items_by_layer", "build_order_slips"]


def group_items_by_layer(order: Order, ingredients: Dict[str, Ingredient],
                         layers: Dict[str, Layer]) -> List[Dict[str, Any]]:
    """[{layer, items: ["Oats", "Berries 2x"]}] ordered by layer sort order.

    Items whose ingredient or layer is unknown fall under "Sonstiges" (sorted last).
    """
    groups: Dict[str, Dict[str, Any]] = {}
    for item in order.items:
        ing = ingredients.get(item.ingredient_id)
        layer = layers.get(ing.layer_id) if ing else None
        key = layer.name if layer else OTHER_LAYER_NAME
        sort_order = layer.sort_order if layer else OTHER_LAYER_SORT
        name = ing.name if ing else '?'
        suffix = f" {item.quantity}x" if item.quantity > 1 else ""
        groups.setdefault(key, {"layer": key, "sort_order": sort_order, "items": []})
        groups[key]["items"].append(name + suffix)
    return sorted(groups.values(), key=lambda g: g["sort_order"])


def build_order_slips(orders: Iterable[Order], customers: Dict[str, Customer],
                      ingredients: Iterable[Ingredient], layers: Iterable[Layer]) -> List[Dict[str, Any]]:
    """Slip data for each order in creation order."""
    ing_index = {i.id: i for i in ingredients}
    layer_index = {l.id: l for l in layers}
    slips = []
    for order in sorted(orders, key=lambda o: o.created_at):
        customer = customers.get(order.customer_id)
        slips.append({
            "order_id": order.id,
            "customer": customer.name if customer else '?',
            "delivery_date": order.delivery_date,
            "delivery_label": format_date(order.delivery_date),
            "room": order.room,
            "allergies": order.allergies,
            "layers": group_items_by_layer(order, ing_index, layer_index),
        })
    return slips
