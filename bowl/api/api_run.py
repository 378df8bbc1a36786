from fastapi import FastAPI, HTTPException, Query, Response

from datetime import date as _date, datetime, timedelta
from typing import Optional
import logging

from bowl.api.routes import catalog, customers, settings as settings_routes
from bowl.api.routes.settings import load_settings
from bowl.domain.Settings import AppSettings
from bowl.domain.ShoppingList import ShoppingList
from bowl.infra.Catalog_Repository import CatalogRepository
from bowl.infra.Customer_Repository import CustomerRepository
from bowl.infra.Order_Repository import OrderRepository
from bowl.infra.pdf_utils import generate_order_slips_pdf, generate_shopping_list_pdf
from bowl.logic.orders.selection import InvalidSelection, build_order_items
from bowl.logic.orders.slips import build_order_slips, group_items_by_layer
from bowl.logic.scheduling.delivery import (
    date_to_ymd,
    delivery_dates_between,
    format_date,
    get_cutoff_for_delivery,
    get_next_delivery_day,
    is_deliverable_date,
    is_order_closed_for_delivery,
    parse_ymd,
)
from bowl.logic.shopping.list_builder import build_shopping_list
from bowl.utilities.validators import OrderInput

# Logging
logger = logging.getLogger("bowl_app")

CALENDAR_DEFAULT_DAYS = 365

# Initialize FastAPI app
app = FastAPI(title="Bowl Ordering API")

# Include routers
app.include_router(settings_routes.router)
app.include_router(catalog.router)
app.include_router(customers.router)


def _now() -> datetime:
    """Current local time (single seam for the clock)."""
    return datetime.now()


# -------------------- Helpers --------------------
def _parse_date_param(value: str) -> _date:
    try:
        return parse_ymd(value)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date (expected YYYY-MM-DD)")


def _delivery_or_next(delivery_date: Optional[str], settings: AppSettings) -> str:
    """Explicit delivery date (validated) or the next delivery day."""
    if delivery_date:
        return date_to_ymd(_parse_date_param(delivery_date))
    return get_next_delivery_day(settings.delivery_weekday, settings.paused_delivery_dates, today=_now())


def _delivery_status(ymd: str, settings: AppSettings) -> dict:
    now = _now()
    cutoff = get_cutoff_for_delivery(ymd, settings.order_cutoff_weekday,
                                     settings.order_cutoff_hour, settings.order_cutoff_minute)
    return {
        "delivery_date": ymd,
        "label": format_date(ymd),
        "deliverable": is_deliverable_date(parse_ymd(ymd), settings.delivery_weekday,
                                           settings.paused_set, today=now),
        "cutoff": cutoff.isoformat(),
        "closed": is_order_closed_for_delivery(ymd, settings.order_cutoff_weekday,
                                               settings.order_cutoff_hour, settings.order_cutoff_minute,
                                               now=now),
    }


def _shopping_list_for(ymd: str, settings: AppSettings) -> ShoppingList:
    items = OrderRepository().items_for_date(ymd)
    ingredients = CatalogRepository().get_ingredients()
    lines = build_shopping_list(items, ingredients, settings.repeat_factor)
    return ShoppingList(ymd, lines, settings.repeat_factor)


def _slips_for(ymd: str):
    catalog_repo = CatalogRepository()
    return build_order_slips(OrderRepository().get_for_date(ymd), CustomerRepository().get_all(),
                             catalog_repo.get_ingredients(), catalog_repo.get_layers())


def _pdf_response(pdf_bytes: bytes, filename: str) -> Response:
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


# -------------------- API: Delivery --------------------
@app.get('/api/delivery/next')
def api_delivery_next():
    """Next delivery day with its order cutoff."""
    settings = load_settings()
    return _delivery_status(_delivery_or_next(None, settings), settings)


@app.get('/api/delivery/check')
def api_delivery_check(date: str = Query(..., description="Delivery date (YYYY-MM-DD)")):
    settings = load_settings()
    return _delivery_status(_delivery_or_next(date, settings), settings)


@app.get('/api/delivery/calendar')
def api_delivery_calendar(start: Optional[str] = Query(default=None), end: Optional[str] = Query(default=None)):
    """Delivery and paused dates in [start, end] (defaults: today .. one year ahead)."""
    settings = load_settings()
    start_d = _parse_date_param(start) if start else _now().date()
    end_d = _parse_date_param(end) if end else start_d + timedelta(days=CALENDAR_DEFAULT_DAYS)
    if end_d < start_d:
        raise HTTPException(status_code=400, detail="'end' must not be before 'start'")
    deliveries = delivery_dates_between(start_d, end_d, settings.delivery_weekday, settings.paused_delivery_dates)
    return {
        "start": date_to_ymd(start_d),
        "end": date_to_ymd(end_d),
        "delivery_dates": [date_to_ymd(d) for d in deliveries],
        "paused_dates": sorted(settings.paused_delivery_dates),
    }


# -------------------- API: Orders --------------------
@app.get('/api/orders')
def api_orders(delivery_date: Optional[str] = Query(default=None)):
    """Order overview for one delivery date."""
    settings = load_settings()
    ymd = _delivery_or_next(delivery_date, settings)
    customers_by_id = CustomerRepository().get_all()
    catalog_repo = CatalogRepository()
    ingredients = {i.id: i for i in catalog_repo.get_ingredients()}
    layers = {l.id: l for l in catalog_repo.get_layers()}
    orders = []
    for order in OrderRepository().get_for_date(ymd):
        customer = customers_by_id.get(order.customer_id)
        items = []
        for it in order.items:
            ing = ingredients.get(it.ingredient_id)
            layer = layers.get(ing.layer_id) if ing else None
            items.append({
                "ingredient_id": it.ingredient_id,
                "name": ing.name if ing else "?",
                "layer": layer.name if layer else None,
                "quantity": it.quantity,
            })
        orders.append({
            "id": order.id,
            "customer": customer.name if customer else "?",
            "created_at": order.created_at,
            "items": items,
        })
    return {"delivery_date": ymd, "orders": orders, "count": len(orders)}


@app.get('/api/orders/mine')
def api_my_order(customer_id: str = Query(...), delivery_date: str = Query(...)):
    ymd = date_to_ymd(_parse_date_param(delivery_date))
    order = OrderRepository().find(customer_id, ymd)
    if order is None:
        raise HTTPException(status_code=404, detail="No order for this delivery date")
    catalog_repo = CatalogRepository()
    groups = group_items_by_layer(order,
                                  {i.id: i for i in catalog_repo.get_ingredients()},
                                  {l.id: l for l in catalog_repo.get_layers()})
    return {**order.to_dict(), "label": format_date(ymd), "layers": groups}


@app.post('/api/orders')
def api_submit_order(payload: OrderInput):
    settings = load_settings()
    if CustomerRepository().get(payload.customer_id) is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    status = _delivery_status(payload.delivery_date, settings)
    if not status["deliverable"]:
        raise HTTPException(status_code=400, detail="No delivery on this date")
    if status["closed"]:
        logger.info("Order refused after cutoff customer=%s date=%s", payload.customer_id, payload.delivery_date)
        raise HTTPException(status_code=400, detail="Order window closed for this delivery date")

    catalog_repo = CatalogRepository()
    try:
        items = build_order_items(catalog_repo.get_layers(), catalog_repo.get_ingredients(),
                                  payload.selection, payload.quantities)
    except InvalidSelection as e:
        raise HTTPException(status_code=400, detail=str(e))

    order = OrderRepository().upsert(payload.customer_id, payload.delivery_date, items,
                                     room=payload.room, allergies=payload.allergies,
                                     created_at=_now())
    logger.info("Order saved customer=%s date=%s items=%s", payload.customer_id, payload.delivery_date, len(items))
    return order.to_dict()


# -------------------- API: Shopping List --------------------
@app.get('/api/shopping-list')
def api_shopping_list(delivery_date: Optional[str] = Query(default=None)):
    settings = load_settings()
    ymd = _delivery_or_next(delivery_date, settings)
    return {**_shopping_list_for(ymd, settings).to_dict(), "label": format_date(ymd)}


@app.get('/api/shopping-list/pdf')
def api_shopping_list_pdf(delivery_date: Optional[str] = Query(default=None)):
    settings = load_settings()
    ymd = _delivery_or_next(delivery_date, settings)
    return _pdf_response(generate_shopping_list_pdf(_shopping_list_for(ymd, settings)),
                         f"einkaufsliste_{ymd}.pdf")


# -------------------- API: Order Slips --------------------
@app.get('/api/order-slips')
def api_order_slips(delivery_date: Optional[str] = Query(default=None)):
    ymd = _delivery_or_next(delivery_date, load_settings())
    slips = _slips_for(ymd)
    return {"delivery_date": ymd, "slips": slips, "count": len(slips)}


@app.get('/api/order-slips/pdf')
def api_order_slips_pdf(delivery_date: Optional[str] = Query(default=None)):
    ymd = _delivery_or_next(delivery_date, load_settings())
    return _pdf_response(generate_order_slips_pdf(_slips_for(ymd)), f"bestellzettel_{ymd}.pdf")
