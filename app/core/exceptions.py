from uuid import UUID

from fastapi import HTTPException, status


class VehicleNotFoundError(Exception):
    """Raised by the persistence layer when no vehicle row matches the given id."""

    def __init__(self, vehicle_id: UUID):
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle {vehicle_id} does not exist")


class AppException:
    """Class-based exception helpers for the HTTP status codes the API returns."""

    @staticmethod
    def raise_404(message: str = "Not Found"):
        """Raise a 404 Not Found exception."""
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)
