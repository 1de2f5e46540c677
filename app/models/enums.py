from enum import Enum


class VehicleStatus(str, Enum):
    available = "AVAILABLE"
    sold = "SOLD"
