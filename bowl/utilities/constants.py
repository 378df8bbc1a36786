from typing import Final

# Canonical storage format for delivery dates (lexicographically sortable)
DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Weekday index used everywhere in the app: 0 = Monday ... 6 = Sunday
DEFAULT_DELIVERY_WEEKDAY: Final[int] = 0
DEFAULT_CUTOFF_WEEKDAY: Final[int] = 3
DEFAULT_CUTOFF_HOUR: Final[int] = 16
DEFAULT_CUTOFF_MINUTE: Final[int] = 0
DEFAULT_REPEAT_FACTOR: Final[float] = 0.5

# Stored cutoff weekday written by older app versions (JS getDay numbering)
LEGACY_CUTOFF_WEEKDAY: Final[str] = "4"

DELIVERY_SEARCH_DAYS: Final[int] = 365

SELECTION_TYPES: Final[tuple[str, ...]] = ("none", "single", "multiple", "quantity", "display_only")
OTHER_LAYER_NAME: Final[str] = "Sonstiges"
OTHER_LAYER_SORT: Final[int] = 99

WEEKDAY_NAMES_DE: Final[tuple[str, ...]] = (
    "Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"
)
MONTH_NAMES_DE: Final[tuple[str, ...]] = (
    "Januar", "Februar", "März", "April", "Mai", "Juni",
    "Juli", "August", "September", "Oktober", "November", "Dezember"
)

# Keys of the app_settings key/value table
SETTING_DELIVERY_WEEKDAY: Final[str] = "delivery_weekday"
SETTING_CUTOFF_WEEKDAY: Final[str] = "order_cutoff_weekday"
SETTING_CUTOFF_HOUR: Final[str] = "order_cutoff_hour"
SETTING_CUTOFF_MINUTE: Final[str] = "order_cutoff_minute"
SETTING_PAUSED_DATES: Final[str] = "paused_delivery_dates"
SETTING_REPEAT_FACTOR: Final[str] = "mehrfach_portion_faktor"
