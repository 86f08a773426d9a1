"""
Rental Schemas

Vehicle rental records as Pydantic models. Everything lives in memory for
the lifetime of the process:
- Vehicle  -> the fleet held by the catalog
- Customer -> the roster held by the registry
- Rental   -> an agreement held by the ledger and by the customer's history
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class VehicleKind(str, Enum):
    standard = "standard"
    luxury = "luxury"


class ErrorCode(str, Enum):
    not_found = "not_found"
    unavailable = "unavailable"
    invalid = "invalid"


class Vehicle(BaseModel):
    """
    Vehicles in the fleet
    Mutated in place on rent, return and maintenance
    """
    vehicle_id: str = Field(..., description="Unique fleet ID, e.g., C001")
    brand: str = Field(..., description="Manufacturer, e.g., Toyota")
    model: str = Field(..., description="Model, e.g., Camry")
    base_price_per_day: float = Field(..., gt=0, description="Daily base rate")
    kind: VehicleKind = Field(VehicleKind.standard, description="Pricing rule to apply")
    available: bool = Field(True, description="False while rented out")
    under_maintenance: bool = Field(False, description="True while in the workshop")
    serial: Optional[int] = Field(None, exclude=True, description="Set by the catalog on add, unique even when IDs repeat")

    @property
    def is_rentable(self) -> bool:
        return self.available and not self.under_maintenance


class Rental(BaseModel):
    """
    A rental agreement
    Refers to its vehicle and customer by ID, plus the vehicle's catalog serial
    """
    model_config = ConfigDict(frozen=True)

    vehicle_id: str
    customer_id: str
    days: int = Field(..., gt=0, description="Rental length in days")
    vehicle_serial: Optional[int] = Field(None, exclude=True, description="Catalog serial of the rented vehicle")


class Customer(BaseModel):
    customer_id: str = Field(..., description="Sequential ID, e.g., CUST1")
    name: str
    history: List[Rental] = Field(default_factory=list, description="Every rental, oldest first")


class VehicleSummary(BaseModel):
    vehicle_id: str
    brand: str
    model: str
    kind: VehicleKind
    price_per_day: float


class HistoryEntry(BaseModel):
    brand: str
    model: str
    days: int


class RentalReceipt(BaseModel):
    vehicle_id: str
    brand: str
    model: str
    customer_id: str
    customer_name: str
    days: int
    total_price: float


class Result(BaseModel):
    """Outcome of a manager operation, ready for display"""
    ok: bool
    message: str
    error: Optional[ErrorCode] = None
    receipt: Optional[RentalReceipt] = None
    history: List[HistoryEntry] = Field(default_factory=list)
