from datetime import datetime
from typing import List
from pydantic import BaseModel


class VersionResponse(BaseModel):
    version: str


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime


class InfoResponse(BaseModel):
    application: str
    version: str
    endpoints: List[str]
