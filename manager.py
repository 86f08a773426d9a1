"""
Rental manager

Ties the vehicle catalog, the customer registry and the rental ledger
together. Every public method takes the manager lock and never raises for a
logical failure: unknown IDs and unavailable vehicles come back as a Result
with ok=False and a message meant for the user.
"""

import logging
import threading
from functools import wraps
from typing import List, Optional

from catalog import VehicleCatalog, price_for
from errors import CustomerNotFound, InvalidRequest, RentalError, VehicleNotFound, VehicleUnavailable
from ledger import RentalLedger
from registry import CustomerRegistry
from schemas import (
    Customer,
    HistoryEntry,
    Rental,
    RentalReceipt,
    Result,
    Vehicle,
    VehicleKind,
    VehicleSummary,
)

logger = logging.getLogger(__name__)

SEED_FLEET = [
    Vehicle(vehicle_id="C001", brand="Toyota", model="Camry", base_price_per_day=60.0),
    Vehicle(vehicle_id="C002", brand="Honda", model="Accord", base_price_per_day=70.0),
    Vehicle(vehicle_id="LC001", brand="Mercedes", model="S-Class", base_price_per_day=200.0, kind=VehicleKind.luxury),
    Vehicle(vehicle_id="LC002", brand="BMW", model="7 Series", base_price_per_day=250.0, kind=VehicleKind.luxury),
]


def locked(method):
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


def failure(error: RentalError) -> Result:
    return Result(ok=False, message=error.message, error=error.code)


def summarize(vehicle: Vehicle) -> VehicleSummary:
    return VehicleSummary(
        vehicle_id=vehicle.vehicle_id,
        brand=vehicle.brand,
        model=vehicle.model,
        kind=vehicle.kind,
        price_per_day=price_for(vehicle, 1),
    )


class RentalManager:
    def __init__(
        self,
        catalog: Optional[VehicleCatalog] = None,
        registry: Optional[CustomerRegistry] = None,
        ledger: Optional[RentalLedger] = None,
    ):
        self.catalog = catalog if catalog is not None else VehicleCatalog()
        self.registry = registry if registry is not None else CustomerRegistry()
        self.ledger = ledger if ledger is not None else RentalLedger()
        # Requests may arrive from several worker threads
        self._lock = threading.RLock()

    # Seeding and registration
    @locked
    def add_vehicle(self, vehicle: Vehicle):
        self.catalog.add(vehicle)

    @locked
    def add_customer(self, customer: Customer):
        self.registry.add(customer)

    @locked
    def register_customer(self, name: str) -> Customer:
        customer = self.registry.register(name)
        logger.info("Customer added with ID: %s", customer.customer_id)
        return customer

    # Lookups that raise; only used behind the public methods
    def _customer(self, customer_id: str) -> Customer:
        customer = self.registry.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFound()
        return customer

    def _vehicle(self, vehicle_id: str) -> Vehicle:
        vehicle = self.catalog.find_by_id(vehicle_id)
        if vehicle is None:
            raise VehicleNotFound()
        return vehicle

    def _rentable_vehicle(self, vehicle_id: str) -> Vehicle:
        vehicle = self.catalog.find_rentable(vehicle_id)
        if vehicle is None:
            raise VehicleUnavailable()
        return vehicle

    # Rentals
    @locked
    def rent_vehicle(self, vehicle_id: str, customer_id: str, days: int) -> Result:
        try:
            customer = self._customer(customer_id)
            if days <= 0:
                raise InvalidRequest()
            vehicle = self._rentable_vehicle(vehicle_id)
        except RentalError as e:
            logger.warning("Rent of %s by %s refused: %s", vehicle_id, customer_id, e.message)
            return failure(e)

        self.catalog.mark_rented(vehicle)
        rental = self.ledger.open(vehicle, customer, days)
        self.registry.append_rental_to_history(customer, rental)

        message = f"Successfully rented {vehicle.brand} {vehicle.model} to {customer.name} for {days} days."
        logger.info(message)
        receipt = RentalReceipt(
            vehicle_id=vehicle.vehicle_id,
            brand=vehicle.brand,
            model=vehicle.model,
            customer_id=customer.customer_id,
            customer_name=customer.name,
            days=days,
            total_price=price_for(vehicle, days),
        )
        return Result(ok=True, message=message, receipt=receipt)

    @locked
    def return_vehicle(self, vehicle_id: str) -> Result:
        try:
            vehicle = self._vehicle(vehicle_id)
        except RentalError as e:
            logger.warning("Return of %s refused: %s", vehicle_id, e.message)
            return failure(e)

        # A vehicle that was never rented is "returned" all the same
        self.catalog.mark_returned(vehicle)
        self.ledger.close_by_vehicle(vehicle)
        logger.info("Vehicle %s returned", vehicle_id)
        return Result(ok=True, message="Vehicle returned successfully.")

    # Maintenance
    @locked
    def mark_vehicle_for_maintenance(self, vehicle_id: str) -> Result:
        if not self.catalog.set_maintenance(vehicle_id, True):
            logger.warning("Maintenance of %s refused: unknown vehicle", vehicle_id)
            return failure(VehicleNotFound())
        logger.info("Vehicle %s marked as under maintenance", vehicle_id)
        return Result(ok=True, message="Vehicle marked as under maintenance.")

    @locked
    def clear_vehicle_maintenance(self, vehicle_id: str) -> Result:
        if not self.catalog.set_maintenance(vehicle_id, False):
            return failure(VehicleNotFound())
        logger.info("Vehicle %s back from maintenance", vehicle_id)
        return Result(ok=True, message="Vehicle maintenance cleared.")

    # Read-only projections
    @locked
    def list_available_vehicles(self) -> List[VehicleSummary]:
        return [summarize(v) for v in self.catalog.find_available()]

    @locked
    def search_vehicles(self, query: str) -> List[VehicleSummary]:
        return [summarize(v) for v in self.catalog.find_by_text(query)]

    @locked
    def rental_history(self, customer_id: str) -> Result:
        try:
            customer = self._customer(customer_id)
        except RentalError as e:
            return failure(e)

        history = []
        for rental in self.ledger.history_for(customer):
            vehicle = self.catalog.find_by_serial(rental.vehicle_serial) or self.catalog.find_by_id(rental.vehicle_id)
            history.append(HistoryEntry(brand=vehicle.brand, model=vehicle.model, days=rental.days))
        return Result(ok=True, message=f"Rental History for {customer.name}", history=history)

    @locked
    def active_rentals(self) -> List[Rental]:
        return self.ledger.active()

    @locked
    def list_customers(self) -> List[Customer]:
        # Snapshots, serialized after the lock is released
        return [c.model_copy(deep=True) for c in self.registry]


def build_manager(seed: bool = True) -> RentalManager:
    manager = RentalManager()
    if seed:
        # Copies, so every manager owns its own fleet state
        for vehicle in SEED_FLEET:
            manager.add_vehicle(vehicle.model_copy())
    return manager
