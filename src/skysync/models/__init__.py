"""SkySync data models."""

from skysync.models.forecast import CurrentConditions, Forecast, HourlySeries
from skysync.models.place import Address, Place, ReversePlace

__all__ = [
    "Address",
    "CurrentConditions",
    "Forecast",
    "HourlySeries",
    "Place",
    "ReversePlace",
]
