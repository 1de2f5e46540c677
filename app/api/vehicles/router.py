import logging
from typing import Annotated, List
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status

from app.api.vehicles.schemas import (
    CreateVehicleRequest,
    MessageResponse,
    UpdateVehicleRequest,
    VehicleQueryParams,
    VehicleResponse,
)
from app.api.vehicles.service import VehicleService
from app.core.deps import get_sales_sync, get_vehicle_service
from app.core.exceptions import AppException, VehicleNotFoundError
from app.core.sales_sync import SalesServiceSync

logger = logging.getLogger(__name__)

router = APIRouter()

VEHICLE_NOT_FOUND = "Vehicle not found"


@router.post(
    "",
    response_model=VehicleResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new vehicle",
    description="Create a new vehicle in the inventory. Status defaults to AVAILABLE.",
)
async def create_vehicle(
    vehicle_data: CreateVehicleRequest,
    background_tasks: BackgroundTasks,
    vehicle_service: VehicleService = Depends(get_vehicle_service),
    sales_sync: SalesServiceSync = Depends(get_sales_sync),
):
    vehicle = await vehicle_service.create(vehicle_data)
    logger.info("Vehicle created with id: %s", vehicle.id)
    background_tasks.add_task(sales_sync.sync_vehicle, vehicle)
    return VehicleResponse.model_validate(vehicle)


@router.get(
    "",
    response_model=List[VehicleResponse],
    summary="Get all vehicles",
    description="List vehicles, newest first, optionally filtered by status, brand (partial, case-insensitive) and year.",
)
async def get_all_vehicles(
    filters: Annotated[VehicleQueryParams, Query()],
    vehicle_service: VehicleService = Depends(get_vehicle_service),
):
    vehicles = await vehicle_service.find_all(filters)
    return [VehicleResponse.model_validate(vehicle) for vehicle in vehicles]


@router.get(
    "/{vehicle_id}",
    response_model=VehicleResponse,
    summary="Get vehicle by ID",
)
async def get_vehicle_by_id(
    vehicle_id: UUID,
    vehicle_service: VehicleService = Depends(get_vehicle_service),
):
    vehicle = await vehicle_service.find_by_id(vehicle_id)
    if vehicle is None:
        AppException().raise_404(VEHICLE_NOT_FOUND)
    return VehicleResponse.model_validate(vehicle)


@router.put(
    "/{vehicle_id}",
    response_model=VehicleResponse,
    summary="Update vehicle",
    description="Partially update a vehicle. Fields left out of the body are not changed.",
)
async def update_vehicle(
    vehicle_id: UUID,
    vehicle_data: UpdateVehicleRequest,
    background_tasks: BackgroundTasks,
    vehicle_service: VehicleService = Depends(get_vehicle_service),
    sales_sync: SalesServiceSync = Depends(get_sales_sync),
):
    try:
        vehicle = await vehicle_service.update(vehicle_id, vehicle_data.changes())
    except VehicleNotFoundError:
        AppException().raise_404(VEHICLE_NOT_FOUND)
    logger.info("Vehicle updated with id: %s", vehicle_id)
    background_tasks.add_task(sales_sync.sync_vehicle, vehicle)
    return VehicleResponse.model_validate(vehicle)


@router.delete(
    "/{vehicle_id}",
    response_model=MessageResponse,
    summary="Delete vehicle",
)
async def delete_vehicle(
    vehicle_id: UUID,
    vehicle_service: VehicleService = Depends(get_vehicle_service),
):
    try:
        await vehicle_service.delete(vehicle_id)
    except VehicleNotFoundError:
        AppException().raise_404(VEHICLE_NOT_FOUND)
    logger.info("Vehicle deleted with id: %s", vehicle_id)
    return {"message": "Vehicle deleted successfully"}


@router.post(
    "/{vehicle_id}/sell",
    response_model=VehicleResponse,
    summary="Mark vehicle as sold",
    description="Set the vehicle status to SOLD. Selling an already sold vehicle is allowed and logged.",
)
async def sell_vehicle(
    vehicle_id: UUID,
    background_tasks: BackgroundTasks,
    vehicle_service: VehicleService = Depends(get_vehicle_service),
    sales_sync: SalesServiceSync = Depends(get_sales_sync),
):
    try:
        vehicle = await vehicle_service.sell(vehicle_id)
    except VehicleNotFoundError:
        AppException().raise_404(VEHICLE_NOT_FOUND)
    logger.info("Vehicle sold with id: %s", vehicle_id)
    background_tasks.add_task(sales_sync.sync_vehicle, vehicle)
    return VehicleResponse.model_validate(vehicle)
