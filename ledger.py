import logging
from typing import List

from schemas import Customer, Rental, Vehicle

logger = logging.getLogger(__name__)


def is_rental_of(rental: Rental, vehicle: Vehicle) -> bool:
    return rental.vehicle_id == vehicle.vehicle_id and rental.vehicle_serial == vehicle.serial


class RentalLedger:
    """Active rental agreements. A customer's history is kept separately and outlives these."""

    def __init__(self):
        self._rentals: List[Rental] = []

    def __len__(self) -> int:
        return len(self._rentals)

    def open(self, vehicle: Vehicle, customer: Customer, days: int) -> Rental:
        # Caller has already checked vehicle.is_rentable
        rental = Rental(
            vehicle_id=vehicle.vehicle_id,
            customer_id=customer.customer_id,
            days=days,
            vehicle_serial=vehicle.serial,
        )
        self._rentals.append(rental)
        logger.debug("Opened rental of %s by %s", vehicle.vehicle_id, customer.customer_id)
        return rental

    def close_by_vehicle(self, vehicle: Vehicle) -> int:
        # Vehicle IDs may repeat, the serial tells the vehicles apart
        remaining = [r for r in self._rentals if not is_rental_of(r, vehicle)]
        closed = len(self._rentals) - len(remaining)
        self._rentals = remaining
        if closed:
            logger.debug("Closed %d rental(s) of %s", closed, vehicle.vehicle_id)
        return closed

    def references(self, vehicle_id: str) -> bool:
        return any(r.vehicle_id == vehicle_id for r in self._rentals)

    def active(self) -> List[Rental]:
        return list(self._rentals)

    def history_for(self, customer: Customer) -> List[Rental]:
        return customer.history
