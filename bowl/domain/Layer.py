"""Layer domain entity: a category of ingredient choices (base, topping, ...) with a selection mode."""
from typing import List, Optional

from bowl.utilities.constants import SELECTION_TYPES


class Layer:
    def __init__(self, id: str = "", name: str = "", sort_order: int = 0,
                 selection_type: str = "single", quantity_options: Optional[str] = None,
                 icon_url: Optional[str] = None):
        self.id = id
        self.name = name
        self.sort_order = sort_order
        self.selection_type = selection_type if selection_type in SELECTION_TYPES else "none"
        self.quantity_options = quantity_options
        self.icon_url = icon_url

    @property
    def orderable(self) -> bool:
        return self.selection_type in ("single", "multiple", "quantity")

    def quantity_choices(self) -> List[int]:
        '''Parses "1,2,3" into [1, 2, 3]; non-numeric entries are skipped.'''
        if not self.quantity_options:
            return []
        choices = []
        for part in self.quantity_options.split(","):
            try:
                choices.append(int(part.strip()))
            except ValueError:
                continue
        return choices

    def __str__(self) -> str:
        return f"{self.name} ({self.selection_type})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Layer(
            id=str(d.get("id") or ""),
            name=d.get("name") or "",
            sort_order=int(d.get("sort_order") or 0),
            selection_type=d.get("selection_type") or "none",
            quantity_options=d.get("quantity_options"),
            icon_url=d.get("icon_url"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "sort_order": self.sort_order,
            "selection_type": self.selection_type,
            "quantity_options": self.quantity_options,
            "icon_url": self.icon_url,
        }
