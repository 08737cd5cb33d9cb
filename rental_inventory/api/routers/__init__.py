"""Router modules exposed for convenient imports."""

from . import available_equipments, equipment_types, healthz, readyz, rental_points

__all__ = [
    "available_equipments",
    "equipment_types",
    "healthz",
    "readyz",
    "rental_points",
]
