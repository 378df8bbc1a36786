"""AppSettings: typed view of the app_settings key/value rows.

Every field has a documented default used when the stored value is missing or unparsable:

    delivery_weekday       0    (Monday)
    order_cutoff_weekday   3    (Thursday; legacy stored "4" is read as "3")
    order_cutoff_hour      16
    order_cutoff_minute    0
    paused_delivery_dates  []   (stored comma/newline separated)
    repeat_factor          0.5  (stored as mehrfach_portion_faktor, clamped to 0..1)
"""
from typing import Dict, Iterable, List, Mapping, Optional, Union

from bowl.logic.scheduling.delivery import parse_paused_dates
from bowl.utilities.constants import (
    DEFAULT_CUTOFF_HOUR, DEFAULT_CUTOFF_MINUTE, DEFAULT_CUTOFF_WEEKDAY, DEFAULT_DELIVERY_WEEKDAY,
    DEFAULT_REPEAT_FACTOR, LEGACY_CUTOFF_WEEKDAY, SETTING_CUTOFF_HOUR, SETTING_CUTOFF_MINUTE,
    SETTING_CUTOFF_WEEKDAY, SETTING_DELIVERY_WEEKDAY, SETTING_PAUSED_DATES, SETTING_REPEAT_FACTOR,
)


def _int_or(value, default: int, low: int, high: int) -> int:
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return parsed if low <= parsed <= high else default


def _factor_or(value, default: float) -> float:
    try:
        parsed = float(str(value).strip())
    except (TypeError, ValueError):
        return default
    if parsed != parsed:  # NaN
        return default
    return min(1.0, max(0.0, parsed))


class AppSettings:
    def __init__(self, delivery_weekday: int = DEFAULT_DELIVERY_WEEKDAY,
                 order_cutoff_weekday: int = DEFAULT_CUTOFF_WEEKDAY,
                 order_cutoff_hour: int = DEFAULT_CUTOFF_HOUR,
                 order_cutoff_minute: int = DEFAULT_CUTOFF_MINUTE,
                 paused_delivery_dates: Optional[List[str]] = None,
                 repeat_factor: float = DEFAULT_REPEAT_FACTOR):
        self.delivery_weekday = delivery_weekday
        self.order_cutoff_weekday = order_cutoff_weekday
        self.order_cutoff_hour = order_cutoff_hour
        self.order_cutoff_minute = order_cutoff_minute
        self.paused_delivery_dates = paused_delivery_dates[:] if paused_delivery_dates else []
        self.repeat_factor = repeat_factor

    @property
    def paused_set(self) -> set:
        return set(self.paused_delivery_dates)

    @staticmethod
    def from_rows(rows: Union[Mapping[str, str], Iterable[Mapping[str, str]], None]):
        '''Builds settings from {key: value} or [{"key": .., "value": ..}, ...] rows.'''
        if rows is None:
            values: Dict[str, str] = {}
        elif isinstance(rows, Mapping):
            values = {k: ("" if v is None else str(v)) for k, v in rows.items()}
        else:
            values = {r.get("key"): ("" if r.get("value") is None else str(r.get("value"))) for r in rows}

        cutoff_raw = values.get(SETTING_CUTOFF_WEEKDAY, str(DEFAULT_CUTOFF_WEEKDAY)).strip()
        if cutoff_raw == LEGACY_CUTOFF_WEEKDAY:
            cutoff_raw = str(DEFAULT_CUTOFF_WEEKDAY)

        return AppSettings(
            delivery_weekday=_int_or(values.get(SETTING_DELIVERY_WEEKDAY), DEFAULT_DELIVERY_WEEKDAY, 0, 6),
            order_cutoff_weekday=_int_or(cutoff_raw, DEFAULT_CUTOFF_WEEKDAY, 0, 6),
            order_cutoff_hour=_int_or(values.get(SETTING_CUTOFF_HOUR), DEFAULT_CUTOFF_HOUR, 0, 23),
            order_cutoff_minute=_int_or(values.get(SETTING_CUTOFF_MINUTE), DEFAULT_CUTOFF_MINUTE, 0, 59),
            paused_delivery_dates=parse_paused_dates(values.get(SETTING_PAUSED_DATES)),
            repeat_factor=_factor_or(values.get(SETTING_REPEAT_FACTOR), DEFAULT_REPEAT_FACTOR),
        )

    def to_rows(self) -> List[Dict[str, str]]:
        '''Key/value rows as persisted in app_settings.'''
        return [
            {"key": SETTING_DELIVERY_WEEKDAY, "value": str(self.delivery_weekday)},
            {"key": SETTING_CUTOFF_WEEKDAY, "value": str(self.order_cutoff_weekday)},
            {"key": SETTING_CUTOFF_HOUR, "value": str(self.order_cutoff_hour)},
            {"key": SETTING_CUTOFF_MINUTE, "value": str(self.order_cutoff_minute)},
            {"key": SETTING_PAUSED_DATES, "value": "\n".join(self.paused_delivery_dates)},
            {"key": SETTING_REPEAT_FACTOR, "value": str(self.repeat_factor)},
        ]

    def to_dict(self):
        return {
            "delivery_weekday": self.delivery_weekday,
            "order_cutoff_weekday": self.order_cutoff_weekday,
            "order_cutoff_hour": self.order_cutoff_hour,
            "order_cutoff_minute": self.order_cutoff_minute,
            "paused_delivery_dates": list(self.paused_delivery_dates),
            "repeat_factor": self.repeat_factor,
        }

    def __str__(self) -> str:
        return (f"Settings - delivery weekday {self.delivery_weekday} - cutoff "
                f"{self.order_cutoff_weekday} {self.order_cutoff_hour:02d}:{self.order_cutoff_minute:02d}"
                f" - {len(self.paused_delivery_dates)} paused - factor {self.repeat_factor}")

    __repr__ = __str__
