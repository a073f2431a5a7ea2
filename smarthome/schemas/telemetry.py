from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import List
from datetime import datetime

class TelemetryMetric(BaseModel):
    id: str
    key: str
    value: str
    unit: str

class TelemetryRecord(BaseModel):
    id: str
    device_id: str
    created_at: datetime
    metrics: List[TelemetryMetric] = Field(alias="metricId")
    house_id: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True
