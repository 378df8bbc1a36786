"""Turn a customer's per-layer choices into order items.

selection:  {layer_id: [ingredient_id, ...]}           for single / multiple layers
quantities: {layer_id: {ingredient_id: quantity}}      for quantity layers
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Mapping, Optional

from bowl.domain.Ingredient import Ingredient
from bowl.domain.Layer import Layer
from bowl.domain.Order import OrderItem

__all__ = ["build_order_items", "InvalidSelection"]


class InvalidSelection(ValueError):
    """Raised when a submitted choice does not fit the layer's selection mode."""


def build_order_items(layers: Iterable[Layer], ingredients: Iterable[Ingredient],
                      selection: Optional[Mapping[str, List[str]]] = None,
                      quantities: Optional[Mapping[str, Mapping[str, int]]] = None) -> List[OrderItem]:
    """Validate choices against the catalog and return the items to store.

    single/multiple layers store quantity 1 per chosen ingredient, quantity layers store
    only entries > 0. Layers of type none/display_only never produce items.
    """
    selection = selection or {}
    quantities = quantities or {}
    layer_index: Dict[str, Layer] = {l.id: l for l in layers}
    ingredient_layer: Dict[str, str] = {i.id: i.layer_id for i in ingredients}

    for layer_id in list(selection) + list(quantities):
        if layer_id not in layer_index:
            raise InvalidSelection(f"Unknown layer: {layer_id}")

    def _check_member(layer: Layer, ingredient_id: str):
        if ingredient_layer.get(ingredient_id) != layer.id:
            raise InvalidSelection(f"Ingredient {ingredient_id} does not belong to layer {layer.name}")

    items: List[OrderItem] = []
    for layer in sorted(layer_index.values(), key=lambda l: l.sort_order):
        if layer.selection_type in ("single", "multiple"):
            chosen = list(dict.fromkeys(selection.get(layer.id) or []))
            if layer.selection_type == "single" and len(chosen) > 1:
                raise InvalidSelection(f"Only one choice allowed for {layer.name}")
            for ingredient_id in chosen:
                _check_member(layer, ingredient_id)
                items.append(OrderItem(ingredient_id, 1))
        elif layer.selection_type == "quantity":
            allowed = layer.quantity_choices()
            for ingredient_id, qty in (quantities.get(layer.id) or {}).items():
                _check_member(layer, ingredient_id)
                if qty is None or qty <= 0:
                    continue
                if allowed and qty not in allowed:
                    raise InvalidSelection(f"Quantity {qty} not offered for {layer.name}")
                items.append(OrderItem(ingredient_id, int(qty)))
        elif selection.get(layer.id) or quantities.get(layer.id):
            raise InvalidSelection(f"Layer {layer.name} is not orderable")
    return items
