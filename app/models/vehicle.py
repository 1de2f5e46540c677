import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, Numeric, String, Uuid

from app.core.database import Base
from app.models.enums import VehicleStatus


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    brand = Column(String, index=True, nullable=False)
    model = Column(String, nullable=False)
    year = Column(Integer, index=True, nullable=False)
    color = Column(String, nullable=False)
    price = Column(Numeric(12, 2, asdecimal=True), nullable=False)
    status = Column(String, default=VehicleStatus.available.value, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<Vehicle id={self.id} {self.brand} {self.model} {self.year} status={self.status}>"
