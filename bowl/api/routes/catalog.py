from fastapi import APIRouter, HTTPException

from bowl.domain.Ingredient import Ingredient
from bowl.domain.Layer import Layer
from bowl.infra.Catalog_Repository import CatalogRepository
from bowl.utilities.validators import IngredientInput, LayerInput

router = APIRouter(prefix="/api")


@router.get("/catalog")
def get_catalog():
    """Layers (by sort order) with their ingredients."""
    repo = CatalogRepository()
    ingredients = repo.get_ingredients()
    return {
        "layers": [
            {**layer.to_dict(),
             "ingredients": [i.to_dict() for i in ingredients if i.layer_id == layer.id]}
            for layer in repo.get_layers()
        ]
    }


@router.post("/layers")
def add_layer(payload: LayerInput):
    layer = Layer(name=payload.name, sort_order=payload.sort_order,
                  selection_type=payload.selection_type, quantity_options=payload.quantity_options)
    return CatalogRepository().save_layer(layer).to_dict()


@router.put("/layers/{layer_id}")
def edit_layer(layer_id: str, payload: LayerInput):
    repo = CatalogRepository()
    if repo.get_layer(layer_id) is None:
        raise HTTPException(status_code=404, detail="Layer not found")
    layer = Layer(id=layer_id, name=payload.name, sort_order=payload.sort_order,
                  selection_type=payload.selection_type, quantity_options=payload.quantity_options)
    return repo.save_layer(layer).to_dict()


@router.delete("/layers/{layer_id}")
def delete_layer(layer_id: str):
    try:
        deleted = CatalogRepository().delete_layer(layer_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Layer not found")
    return {"status": "ok", "deleted": layer_id}


def _ingredient_from(payload: IngredientInput, ingredient_id: str = "") -> Ingredient:
    return Ingredient(id=ingredient_id, **payload.model_dump())


@router.post("/ingredients")
def add_ingredient(payload: IngredientInput):
    try:
        return CatalogRepository().save_ingredient(_ingredient_from(payload)).to_dict()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/ingredients/{ingredient_id}")
def edit_ingredient(ingredient_id: str, payload: IngredientInput):
    repo = CatalogRepository()
    if repo.get_ingredient(ingredient_id) is None:
        raise HTTPException(status_code=404, detail="Ingredient not found")
    try:
        return repo.save_ingredient(_ingredient_from(payload, ingredient_id)).to_dict()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/ingredients/{ingredient_id}")
def delete_ingredient(ingredient_id: str):
    if not CatalogRepository().delete_ingredient(ingredient_id):
        raise HTTPException(status_code=404, detail="Ingredient not found")
    return {"status": "ok", "deleted": ingredient_id}
