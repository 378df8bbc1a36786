from pathlib import Path

from bowl.utilities.config import DATA_DIR

# Data file names (one JSON file per table of the hosted store)
SETTINGS_FILENAME = 'settings.json'
LAYERS_FILENAME = 'layers.json'
INGREDIENTS_FILENAME = 'ingredients.json'
CUSTOMERS_FILENAME = 'customers.json'
ORDERS_FILENAME = 'orders.json'


def data_file(filename: str, data_dir: Path = None) -> Path:
    return Path(data_dir or DATA_DIR) / filename

__all__ = ['DATA_DIR', 'SETTINGS_FILENAME', 'LAYERS_FILENAME', 'INGREDIENTS_FILENAME',
           'CUSTOMERS_FILENAME', 'ORDERS_FILENAME', 'data_file']
