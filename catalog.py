import itertools
import logging
from typing import Iterator, List, Optional

from schemas import Vehicle, VehicleKind

logger = logging.getLogger(__name__)

# Flat luxury tax, charged once per rental
LUXURY_SURCHARGE = 50.0


def price_for(vehicle: Vehicle, days: int) -> float:
    """Price of renting `vehicle` for `days` days. No validation on `days`."""
    base = vehicle.base_price_per_day * days
    if vehicle.kind == VehicleKind.standard:
        return base
    if vehicle.kind == VehicleKind.luxury:
        return base + LUXURY_SURCHARGE
    raise ValueError(f"Unknown vehicle kind: {vehicle.kind!r}")


class VehicleCatalog:
    def __init__(self):
        self._vehicles: List[Vehicle] = []
        self._serials = itertools.count(1)

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(self._vehicles)

    def __len__(self) -> int:
        return len(self._vehicles)

    def add(self, vehicle: Vehicle):
        # Duplicate IDs are accepted; lookups by ID return the first match
        vehicle.serial = next(self._serials)
        self._vehicles.append(vehicle)
        logger.debug("Added vehicle %s (%s %s)", vehicle.vehicle_id, vehicle.brand, vehicle.model)

    def find_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        return next((v for v in self._vehicles if v.vehicle_id == vehicle_id), None)

    def find_by_serial(self, serial: int) -> Optional[Vehicle]:
        return next((v for v in self._vehicles if v.serial == serial), None)

    def find_rentable(self, vehicle_id: str) -> Optional[Vehicle]:
        return next((v for v in self.find_available() if v.vehicle_id == vehicle_id), None)

    def find_available(self) -> Iterator[Vehicle]:
        return (v for v in self._vehicles if v.is_rentable)

    def find_by_text(self, query: str) -> Iterator[Vehicle]:
        q = query.lower()
        return (v for v in self._vehicles if q in v.brand.lower() or q in v.model.lower())

    def set_maintenance(self, vehicle_id: str, flag: bool) -> bool:
        vehicle = self.find_by_id(vehicle_id)
        if vehicle is None:
            return False
        vehicle.under_maintenance = flag
        logger.debug("Vehicle %s under_maintenance=%s", vehicle_id, flag)
        return True

    def mark_rented(self, vehicle: Vehicle):
        vehicle.available = False

    def mark_returned(self, vehicle: Vehicle):
        # Maintenance flag is left as is
        vehicle.available = True
