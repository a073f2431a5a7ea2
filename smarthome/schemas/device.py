from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import List
from datetime import datetime

# Range of the INTEGER columns ids and foreign keys are stored in
SQL_INT_MIN = -(2 ** 63)
SQL_INT_MAX = 2 ** 63 - 1

class DeviceAttributeBase(BaseModel):
    key: str
    value: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class DeviceAttributeCreate(DeviceAttributeBase):
    device_id: int

class DeviceAttributeResponse(DeviceAttributeBase):
    id: int
    device_id: int

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

class DeviceCreate(BaseModel):
    serial_number: str = Field(min_length=1)
    device_model_id: int = Field(gt=0, le=SQL_INT_MAX)
    house_id: int = Field(gt=0, le=SQL_INT_MAX)
    name: str = Field(min_length=1)

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class DeviceUpdate(BaseModel):
    """Partial update: empty name/serialNumber keep the stored value,
    houseId and deviceModelId are always rewritten."""
    serial_number: str = ""
    device_model_id: int = Field(ge=SQL_INT_MIN, le=SQL_INT_MAX)
    house_id: int = Field(ge=SQL_INT_MIN, le=SQL_INT_MAX)
    name: str = ""

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class DeviceResponse(BaseModel):
    id: int
    serial_number: str
    device_model_id: int
    house_id: int
    name: str
    status: str
    attributes: List[DeviceAttributeResponse] = []
    last_updated: datetime
    created_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

class MessageResponse(BaseModel):
    message: str
