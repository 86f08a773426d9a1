import logging
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from config import Config, configure_logging
from manager import build_manager
from schemas import (
    Customer,
    ErrorCode,
    HistoryEntry,
    Rental,
    RentalReceipt,
    Result,
    Vehicle,
    VehicleKind,
    VehicleSummary,
)

configure_logging()
logger = logging.getLogger(__name__)

# Process-wide state, discarded on exit
manager = build_manager(seed=Config.SEED_FLEET)

STATUS_CODES = {
    ErrorCode.not_found: 404,
    ErrorCode.unavailable: 409,
    ErrorCode.invalid: 400,
}


def raise_for_result(result: Result) -> Result:
    if not result.ok:
        raise HTTPException(status_code=STATUS_CODES.get(result.error, 400), detail=result.message)
    return result


app = FastAPI(title="Vehicle Rental API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def read_root():
    return {"message": "Vehicle Rental Backend is running"}


# Vehicles Endpoints
@app.get("/api/vehicles", response_model=List[VehicleSummary])
def list_available_vehicles():
    return manager.list_available_vehicles()


@app.get("/api/vehicles/search", response_model=List[VehicleSummary])
def search_vehicles(q: str = ""):
    return manager.search_vehicles(q)


class CreateVehicleRequest(BaseModel):
    vehicle_id: str
    brand: str
    model: str
    base_price_per_day: float = Field(..., gt=0)
    kind: VehicleKind = VehicleKind.standard


@app.post("/api/vehicles", response_model=Vehicle)
def add_vehicle(payload: CreateVehicleRequest):
    vehicle = Vehicle(**payload.model_dump())
    manager.add_vehicle(vehicle)
    return vehicle


@app.post("/api/vehicles/{vehicle_id}/maintenance", response_model=Result)
def mark_for_maintenance(vehicle_id: str):
    return raise_for_result(manager.mark_vehicle_for_maintenance(vehicle_id))


@app.delete("/api/vehicles/{vehicle_id}/maintenance", response_model=Result)
def clear_maintenance(vehicle_id: str):
    return raise_for_result(manager.clear_vehicle_maintenance(vehicle_id))


@app.post("/api/vehicles/{vehicle_id}/return", response_model=Result)
def return_vehicle(vehicle_id: str):
    return raise_for_result(manager.return_vehicle(vehicle_id))


# Customers Endpoints
class RegisterCustomerRequest(BaseModel):
    name: str = Field(..., min_length=1)


@app.post("/api/customers", response_model=Customer)
def register_customer(payload: RegisterCustomerRequest):
    return manager.register_customer(payload.name)


@app.get("/api/customers", response_model=List[Customer])
def list_customers():
    return manager.list_customers()


@app.get("/api/customers/{customer_id}/rentals", response_model=List[HistoryEntry])
def rental_history(customer_id: str):
    return raise_for_result(manager.rental_history(customer_id)).history


# Rentals Endpoints
class RentVehicleRequest(BaseModel):
    vehicle_id: str
    customer_id: str
    days: int = Field(..., gt=0)


@app.post("/api/rentals", response_model=RentalReceipt)
def rent_vehicle(payload: RentVehicleRequest):
    result = raise_for_result(manager.rent_vehicle(payload.vehicle_id, payload.customer_id, payload.days))
    return result.receipt


@app.get("/api/rentals/active", response_model=List[Rental])
def list_active_rentals():
    return manager.active_rentals()


if __name__ == "__main__":
    import uvicorn
    logger.info("Starting on %s:%s", Config.HOST, Config.PORT)
    uvicorn.run(app, host=Config.HOST, port=Config.PORT)
