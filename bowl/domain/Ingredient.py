"""Ingredient domain entity: name, layer, portion size and purchasable package size."""
from typing import Optional


def _num(value) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class Ingredient:
    def __init__(self, id: str = "", layer_id: str = "", name: str = "", sort_order: int = 0,
                 portion_amount: Optional[float] = None, portion_unit: Optional[str] = None,
                 package_amount: Optional[float] = None, package_unit: Optional[str] = None,
                 package_label: Optional[str] = None, icon_url: Optional[str] = None):
        self.id = id
        self.layer_id = layer_id
        self.name = name
        self.sort_order = sort_order
        self.portion_amount = portion_amount
        self.portion_unit = portion_unit
        self.package_amount = package_amount
        self.package_unit = package_unit
        self.package_label = package_label
        self.icon_url = icon_url

    def package_display_label(self) -> Optional[str]:
        '''Explicit package label, else "<amount><unit>" when a package amount is known.'''
        if self.package_label:
            return self.package_label
        if self.package_amount is not None:
            amount = self.package_amount
            text = str(int(amount)) if float(amount).is_integer() else str(amount)
            return f"{text}{self.package_unit or ''}"
        return None

    def __str__(self) -> str:
        parts = [self.name]
        if self.portion_amount is not None:
            parts.append(f"{self.portion_amount}{self.portion_unit or ''}/portion")
        label = self.package_display_label()
        if label:
            parts.append(f"pkg {label}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a stored row. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            id=str(d.get("id") or ""),
            layer_id=str(d.get("layer_id") or ""),
            name=d.get("name") or "",
            sort_order=int(d.get("sort_order") or 0),
            portion_amount=_num(d.get("portion_amount")),
            portion_unit=d.get("portion_unit"),
            package_amount=_num(d.get("package_amount")),
            package_unit=d.get("package_unit"),
            package_label=d.get("package_label"),
            icon_url=d.get("icon_url"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "layer_id": self.layer_id,
            "name": self.name,
            "sort_order": self.sort_order,
            "portion_amount": self.portion_amount,
            "portion_unit": self.portion_unit,
            "package_amount": self.package_amount,
            "package_unit": self.package_unit,
            "package_label": self.package_label,
            "icon_url": self.icon_url,
        }
