"""Shopping list builder.

Provides build_shopping_list(order_items, ingredients, repeat_factor=0.5).

Each order item contributes an effective count: the first unit selected counts fully,
every additional unit of the same ingredient within one order counts `repeat_factor`.
Totals are portion-weighted and rounded up to whole packages where a package size exists.
"""
import math
from typing import Any, Dict, Iterable, List, Optional, Union

from bowl.domain.Ingredient import Ingredient
from bowl.domain.Order import OrderItem
from bowl.domain.ShoppingList import ShoppingListLine
from bowl.utilities.constants import DEFAULT_REPEAT_FACTOR

ItemLike = Union[OrderItem, Dict[str, Any]]
IngredientLike = Union[Ingredient, Dict[str, Any]]


def effective_count(quantity: int, repeat_factor: float = DEFAULT_REPEAT_FACTOR) -> float:
    """1 + (quantity - 1) * repeat_factor; zero or negative quantities count nothing."""
    if quantity <= 0:
        return 0.0
    return 1 + (quantity - 1) * repeat_factor


def _item_fields(item: ItemLike):
    if isinstance(item, OrderItem):
        return item.ingredient_id, item.quantity
    return str(item.get('ingredient_id') or ''), int(item.get('quantity') or 0)


def packages_needed(total: float, package_amount: Optional[float]) -> Optional[int]:
    """Whole packages covering `total` (always rounded up); None when there is no package size."""
    if package_amount is None or package_amount <= 0:
        return None
    return math.ceil(total / package_amount)


def build_shopping_list(order_items: Iterable[ItemLike], ingredients: Iterable[IngredientLike],
                        repeat_factor: float = DEFAULT_REPEAT_FACTOR) -> List[ShoppingListLine]:
    """Aggregate order items of one delivery date into shopping list lines.

    Args:
        order_items: rows {ingredient_id, quantity} (or OrderItem) across all orders.
        ingredients: ingredient catalog (rows or Ingredient objects).
        repeat_factor: weight of every unit beyond the first, expected in 0..1. Not clamped here;
            AppSettings clamps it when loading.

    Returns:
        One line per ordered ingredient, in first-seen order. Items whose ingredient is
        not in the catalog are skipped.
    """
    catalog: Dict[str, Ingredient] = {}
    for ing in ingredients:
        obj = ing if isinstance(ing, Ingredient) else Ingredient.from_dict(ing)
        catalog[obj.id] = obj

    counts: Dict[str, float] = {}
    for item in order_items:
        ingredient_id, quantity = _item_fields(item)
        counts[ingredient_id] = counts.get(ingredient_id, 0.0) + effective_count(quantity, repeat_factor)

    lines: List[ShoppingListLine] = []
    for ingredient_id, count in counts.items():
        ing = catalog.get(ingredient_id)
        if ing is None:
            continue
        portion = ing.portion_amount if ing.portion_amount is not None else 1
        total = count * portion
        packages = packages_needed(total, ing.package_amount)
        lines.append(ShoppingListLine(
            ingredient_id=ingredient_id,
            name=ing.name,
            count=count,
            portion=portion,
            unit=ing.portion_unit or '',
            total=total,
            packages=packages,
            pkg_label=ing.package_display_label() if packages is not None else None,
        ))
    return lines

__all__ = ['build_shopping_list', 'effective_count', 'packages_needed']
