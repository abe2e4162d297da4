"""Employee request and response schemas."""

from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic.alias_generators import to_camel


class EmployeeLoginRequest(BaseModel):
    """Employee login payload."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    employee_id: Any = None
    password: Any = None


class EmployeeProfile(BaseModel):
    """Public employee fields. Never carries the password hash."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    employee_id: str
    full_name: str
    role: str
    department: str


class EmployeeAuthResponse(BaseModel):
    """Employee login success body."""

    message: str
    employee: EmployeeProfile
    token: str = Field(description="Signed employee session token")
