"""Catalog repository: layers and ingredients (file persistence)."""
import logging
from pathlib import Path
from typing import List, Optional
from uuid import uuid4

from bowl.domain.Ingredient import Ingredient
from bowl.domain.Layer import Layer
from bowl.infra.paths import INGREDIENTS_FILENAME, LAYERS_FILENAME, data_file
from bowl.infra.storage import atomic_write, read_json, write_lock

logger = logging.getLogger(__name__)


class CatalogRepository:
    def __init__(self, data_dir: Optional[Path] = None):
        self.layers_path = data_file(LAYERS_FILENAME, data_dir)
        self.ingredients_path = data_file(INGREDIENTS_FILENAME, data_dir)

    # --- Layers -----------------------------------------------------------
    def get_layers(self) -> List[Layer]:
        layers = [Layer.from_dict(row) for row in read_json(self.layers_path, [])]
        return sorted(layers, key=lambda l: l.sort_order)

    def get_layer(self, layer_id: str) -> Optional[Layer]:
        return next((l for l in self.get_layers() if l.id == layer_id), None)

    def save_layer(self, layer: Layer) -> Layer:
        '''Insert (new id when empty) or replace a layer by id.'''
        with write_lock:
            layers = self.get_layers()
            if not layer.id:
                layer.id = str(uuid4())
            layers = [l for l in layers if l.id != layer.id] + [layer]
            atomic_write(self.layers_path, [l.to_dict() for l in sorted(layers, key=lambda l: l.sort_order)])
        logger.info(f"Layer saved: {layer}")
        return layer

    def delete_layer(self, layer_id: str) -> bool:
        '''Deletes a layer; refuses while ingredients still reference it.'''
        with write_lock:
            layers = self.get_layers()
            if not any(l.id == layer_id for l in layers):
                return False
            if any(i.layer_id == layer_id for i in self.get_ingredients()):
                raise ValueError("Layer still has ingredients")
            atomic_write(self.layers_path, [l.to_dict() for l in layers if l.id != layer_id])
        logger.info(f"Layer deleted: {layer_id}")
        return True

    # --- Ingredients ------------------------------------------------------
    def get_ingredients(self) -> List[Ingredient]:
        ingredients = [Ingredient.from_dict(row) for row in read_json(self.ingredients_path, [])]
        return sorted(ingredients, key=lambda i: (i.layer_id, i.sort_order))

    def get_ingredient(self, ingredient_id: str) -> Optional[Ingredient]:
        return next((i for i in self.get_ingredients() if i.id == ingredient_id), None)

    def save_ingredient(self, ingredient: Ingredient) -> Ingredient:
        with write_lock:
            if not any(l.id == ingredient.layer_id for l in self.get_layers()):
                raise ValueError(f"Unknown layer: {ingredient.layer_id}")
            if not ingredient.id:
                ingredient.id = str(uuid4())
            ingredients = [i for i in self.get_ingredients() if i.id != ingredient.id] + [ingredient]
            atomic_write(self.ingredients_path, [i.to_dict() for i in ingredients])
        logger.info(f"Ingredient saved: {ingredient}")
        return ingredient

    def delete_ingredient(self, ingredient_id: str) -> bool:
        with write_lock:
            ingredients = self.get_ingredients()
            remaining = [i for i in ingredients if i.id != ingredient_id]
            if len(remaining) == len(ingredients):
                return False
            atomic_write(self.ingredients_path, [i.to_dict() for i in remaining])
        logger.info(f"Ingredient deleted: {ingredient_id}")
        return True
