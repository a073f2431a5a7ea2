import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from smarthome.database import Base

class DeviceStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"

class Device(Base):
    __tablename__ = "devices"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    device_model_id = Column(Integer, nullable=False)
    house_id = Column(Integer, nullable=False, index=True)
    serial_number = Column(String, nullable=False)
    name = Column(String, nullable=False)
    status = Column(String, nullable=False, default=DeviceStatus.ACTIVE.value)  # "active", "inactive"
    last_updated = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)

class DeviceAttribute(Base):
    __tablename__ = "devices_attributes"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    # a device delete takes any attribute rows a failed cleanup left behind
    device_id = Column(Integer, ForeignKey("devices.id", ondelete="CASCADE"), nullable=False, index=True)
    key = Column(String, nullable=False)
    value = Column(String, nullable=False)  # untyped, meaning is up to the caller
