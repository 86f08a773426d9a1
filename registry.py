import logging
from typing import Iterator, List, Optional

from schemas import Customer, Rental

logger = logging.getLogger(__name__)

CUSTOMER_ID_PREFIX = "CUST"


class CustomerRegistry:
    def __init__(self):
        self._customers: List[Customer] = []

    def __iter__(self) -> Iterator[Customer]:
        return iter(self._customers)

    def __len__(self) -> int:
        return len(self._customers)

    def register(self, name: str) -> Customer:
        # Customers are never removed, so the count only grows and IDs are never reused
        customer = Customer(customer_id=f"{CUSTOMER_ID_PREFIX}{len(self._customers) + 1}", name=name)
        self._customers.append(customer)
        logger.debug("Registered %s as %s", name, customer.customer_id)
        return customer

    def add(self, customer: Customer):
        self._customers.append(customer)

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        return next((c for c in self._customers if c.customer_id == customer_id), None)

    def append_rental_to_history(self, customer: Customer, rental: Rental):
        customer.history.append(rental)
