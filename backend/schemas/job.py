from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# Payload for POST /api/jobs; the client sends employerId
class JobCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: str
    employer_id: int = Field(alias="employerId")


# Employer identity attached to each listed job (name only)
class EmployerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class JobOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: str
    employer: Optional[EmployerOut] = None
    bids: List[int] = []
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
