from typing import Literal, Optional
from pydantic import Field
from family_emr.schemas.base import CamelModel

Priority = Literal['low', 'medium', 'high']


class PendingItemCreate(CamelModel):
    patient_id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: Optional[str] = None
    priority: Priority = 'medium'
    completed: bool = False


class PendingItemUpdate(CamelModel):
    patient_id: str = Field(default=None, min_length=1)
    title: str = Field(default=None, min_length=1)
    description: Optional[str] = None
    priority: Priority = None
    completed: bool = None
