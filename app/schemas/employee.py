# app/schemas/employee.py
from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.models.employee import EmployeeModel


class EmployeeBase(BaseModel):
    contactNo: Optional[Union[str, int]] = None
    emailId: Optional[str] = None
    deptId: Optional[Union[int, str]] = Field(None, description="DepartmentChild or DepartmentParent ID")
    department: Optional[str] = None
    gender: Optional[str] = None
    role: Optional[str] = None
    title: Optional[str] = None
    location: Optional[str] = None
    managerId: Optional[Union[int, str]] = Field(None, description="Employee ID of the manager")
    hireDate: Optional[datetime] = None
    skills: Optional[List[Any]] = None
    tags: Optional[List[Any]] = None
    isActive: Optional[bool] = None

    # Remaining profile fields are validated by EmployeeModel
    model_config = ConfigDict(extra="allow")


class EmployeeCreate(EmployeeBase):
    employeeName: str
    password: Optional[str] = None


class EmployeeUpdate(EmployeeBase):
    employeeName: Optional[str] = None
    password: Optional[str] = None


class EmployeeOut(EmployeeModel):
    password: Any = Field(default=None, exclude=True)
