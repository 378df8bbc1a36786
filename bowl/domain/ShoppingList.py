"""ShoppingList aggregate: procurement lines for one delivery date."""
from typing import List, Optional


def format_amount(value: float) -> str:
    '''Renders 300.0 as "300" and 1.5 as "1.5".'''
    if value is None:
        return ""
    rounded = round(float(value), 3)
    return str(int(rounded)) if rounded.is_integer() else f"{rounded:g}"


class ShoppingListLine:
    def __init__(self, ingredient_id: str, name: str, count: float, portion: float, unit: str,
                 total: float, packages: Optional[int] = None, pkg_label: Optional[str] = None):
        self.ingredient_id = ingredient_id
        self.name = name
        self.count = count
        self.portion = portion
        self.unit = unit
        self.total = total
        self.packages = packages
        self.pkg_label = pkg_label

    def describe(self) -> str:
        '''Printable line, e.g. "3× 100g Oats (300g) → 1× 500g bag".'''
        text = f"{format_amount(self.count)}× {format_amount(self.portion)}{self.unit} {self.name}"
        text += f" ({format_amount(self.total)}{self.unit})"
        if self.packages is not None and self.pkg_label:
            text += f" → {self.packages}× {self.pkg_label}"
        return text

    def __str__(self) -> str:
        return self.describe()

    __repr__ = __str__

    def to_dict(self):
        return {
            "ingredient_id": self.ingredient_id,
            "name": self.name,
            "count": self.count,
            "portion": self.portion,
            "unit": self.unit,
            "total": self.total,
            "packages": self.packages,
            "pkg_label": self.pkg_label,
        }


class ShoppingList:
    def __init__(self, delivery_date: str = "", lines: Optional[List[ShoppingListLine]] = None,
                 repeat_factor: float = 0.5):
        self.delivery_date = delivery_date
        self.lines = lines[:] if lines else []
        self.repeat_factor = repeat_factor

    def get_items(self) -> List[ShoppingListLine]:
        return self.lines

    def __len__(self) -> int:
        return len(self.lines)

    def __str__(self) -> str:
        return f"Shopping List {self.delivery_date} ({len(self.lines)} lines)"

    __repr__ = __str__

    def to_dict(self):
        return {
            "delivery_date": self.delivery_date,
            "repeat_factor": self.repeat_factor,
            "items": [line.to_dict() for line in self.lines],
            "count": len(self.lines),
        }
