import logging
import uuid
from typing import Any, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.vehicles.schemas import CreateVehicleRequest, VehicleQueryParams
from app.core.exceptions import VehicleNotFoundError
from app.models.enums import VehicleStatus
from app.models.vehicle import Vehicle, utcnow

logger = logging.getLogger(__name__)


class VehicleService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, vehicle_data: CreateVehicleRequest) -> Vehicle:
        new_vehicle = Vehicle(
            id=uuid.uuid4(),
            brand=vehicle_data.brand,
            model=vehicle_data.model,
            year=vehicle_data.year,
            color=vehicle_data.color,
            price=vehicle_data.price,
            status=VehicleStatus(vehicle_data.status).value,
        )

        self.db.add(new_vehicle)
        await self.db.commit()
        await self.db.refresh(new_vehicle)
        return new_vehicle

    async def find_by_id(self, vehicle_id: uuid.UUID) -> Optional[Vehicle]:
        return await self.db.get(Vehicle, vehicle_id)

    async def find_all(self, filters: Optional[VehicleQueryParams] = None) -> List[Vehicle]:
        logger.info("Fetching vehicles: filters=%s", filters.model_dump(exclude_none=True) if filters else {})
        query = select(Vehicle)

        if filters is not None:
            if filters.status:
                query = query.where(Vehicle.status == VehicleStatus(filters.status).value)
            if filters.brand:
                query = query.where(Vehicle.brand.icontains(filters.brand, autoescape=True))
            if filters.year is not None:
                query = query.where(Vehicle.year == filters.year)

        query = query.order_by(Vehicle.created_at.desc())

        result = await self.db.execute(query)
        vehicles = list(result.scalars().all())
        logger.info("Vehicles fetched: count=%s", len(vehicles))
        return vehicles

    async def update(self, vehicle_id: uuid.UUID, changes: dict[str, Any]) -> Vehicle:
        """
        Apply only the given fields in a single UPDATE ... RETURNING statement.
        Raises VehicleNotFoundError when no row matched, so there is no separate existence check.
        """
        values = dict(changes)
        if "status" in values:
            values["status"] = VehicleStatus(values["status"]).value
        values["updated_at"] = utcnow()

        result = await self.db.execute(
            update(Vehicle)
            .where(Vehicle.id == vehicle_id)
            .values(**values)
            .returning(Vehicle)
            .execution_options(populate_existing=True)
        )
        vehicle = result.scalar_one_or_none()
        if vehicle is None:
            await self.db.rollback()
            raise VehicleNotFoundError(vehicle_id)

        await self.db.commit()
        return vehicle

    async def delete(self, vehicle_id: uuid.UUID) -> None:
        result = await self.db.execute(delete(Vehicle).where(Vehicle.id == vehicle_id))
        if result.rowcount == 0:
            await self.db.rollback()
            raise VehicleNotFoundError(vehicle_id)
        await self.db.commit()

    async def sell(self, vehicle_id: uuid.UUID) -> Vehicle:
        vehicle = await self.find_by_id(vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError(vehicle_id)

        if vehicle.status == VehicleStatus.sold.value:
            logger.warning("Vehicle %s is already marked as SOLD", vehicle_id)

        return await self.update(vehicle_id, {"status": VehicleStatus.sold})
