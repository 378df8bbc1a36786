"""
Input validation schemas using Pydantic for the HTTP layer.
"""
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from bowl.utilities.constants import DATE_FORMAT, SELECTION_TYPES


def _check_ymd(v: str) -> str:
    # raises ValueError -> 422; re-format so "2026-3-2" is stored as "2026-03-02"
    return datetime.strptime(v.strip(), DATE_FORMAT).strftime(DATE_FORMAT)


class CustomerLoginInput(BaseModel):
    """Customer identification: name + date of birth."""
    name: str = Field(..., min_length=1, max_length=100)
    date_of_birth: str

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        if not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()

    @field_validator('date_of_birth')
    @classmethod
    def validate_dob(cls, v):
        return _check_ymd(v)


class OrderInput(BaseModel):
    """Order submission: choices per layer for one delivery date."""
    customer_id: str = Field(..., min_length=1)
    delivery_date: str
    selection: Dict[str, List[str]] = Field(default_factory=dict)
    quantities: Dict[str, Dict[str, int]] = Field(default_factory=dict)
    room: Optional[str] = Field(None, max_length=100)
    allergies: Optional[str] = Field(None, max_length=500)

    @field_validator('delivery_date')
    @classmethod
    def validate_delivery_date(cls, v):
        return _check_ymd(v)

    @field_validator('quantities')
    @classmethod
    def validate_quantities(cls, v):
        for per_layer in v.values():
            if any(q < 0 for q in per_layer.values()):
                raise ValueError('Quantity cannot be negative')
        return v

    @field_validator('room', 'allergies')
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
        return v or None


class SettingsInput(BaseModel):
    """Admin settings update; weekdays use 0 = Monday ... 6 = Sunday."""
    delivery_weekday: int = Field(..., ge=0, le=6)
    order_cutoff_weekday: int = Field(..., ge=0, le=6)
    order_cutoff_hour: int = Field(..., ge=0, le=23)
    order_cutoff_minute: int = Field(..., ge=0, le=59)
    paused_delivery_dates: List[str] = Field(default_factory=list)
    repeat_factor: float = Field(0.5, ge=0, le=1)

    @field_validator('paused_delivery_dates')
    @classmethod
    def validate_paused(cls, v):
        """Validate, de-duplicate and sort paused dates."""
        return sorted({_check_ymd(d) for d in v if d and d.strip()})


class LayerInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    sort_order: int = Field(0, ge=0)
    selection_type: str = Field('single', pattern=r'^(' + '|'.join(SELECTION_TYPES) + r')$')
    quantity_options: Optional[str] = None

    @field_validator('quantity_options')
    @classmethod
    def validate_quantity_options(cls, v):
        """Comma separated positive integers, e.g. "1,2,3"."""
        if v is None or not v.strip():
            return None
        parts = [p.strip() for p in v.split(',') if p.strip()]
        if not all(p.isdigit() and int(p) > 0 for p in parts):
            raise ValueError('quantity_options must be comma separated positive integers')
        return ','.join(parts)


class IngredientInput(BaseModel):
    layer_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    sort_order: int = Field(0, ge=0)
    portion_amount: Optional[float] = Field(None, gt=0)
    portion_unit: Optional[str] = Field(None, max_length=20)
    package_amount: Optional[float] = Field(None, gt=0)
    package_unit: Optional[str] = Field(None, max_length=20)
    package_label: Optional[str] = Field(None, max_length=50)

    @field_validator('name', 'portion_unit', 'package_unit', 'package_label')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v
