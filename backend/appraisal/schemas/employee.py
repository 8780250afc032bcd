from datetime import date
from typing import Optional
from pydantic import BaseModel


class EmployeeResponse(BaseModel):
    id: str
    name: str
    position: Optional[str] = None
    department: Optional[str] = None
    email: Optional[str] = None
    hire_date: Optional[date] = None

    model_config = {"from_attributes": True}
