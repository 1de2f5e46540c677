from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.vehicles.service import VehicleService
from app.core.database import get_db
from app.core.sales_sync import SalesServiceSync


async def get_vehicle_service(db: AsyncSession = Depends(get_db)) -> VehicleService:
    return VehicleService(db)


def get_sales_sync(request: Request) -> SalesServiceSync:
    """The sync client opened at startup."""
    return request.app.state.sales_sync
