"""
Rental errors

Raised inside the rental manager and turned into a failed Result at its
boundary. Each error carries the user-facing message and an ErrorCode.
"""

from typing import Optional

from schemas import ErrorCode


class RentalError(Exception):
    code = ErrorCode.invalid
    default_message = "Request could not be processed."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequest(RentalError):
    """Arguments that can never produce a rental, e.g. a non-positive day count."""

    default_message = "Rental days must be greater than zero."


class NotFound(RentalError):
    code = ErrorCode.not_found
    default_message = "Not found."


class VehicleNotFound(NotFound):
    default_message = "Vehicle not found."


class CustomerNotFound(NotFound):
    default_message = "Customer not found."


class Unavailable(RentalError):
    code = ErrorCode.unavailable
    default_message = "Not available."


class VehicleUnavailable(Unavailable):
    """The vehicle is unknown, rented out, or under maintenance."""

    default_message = "Vehicle not available."
