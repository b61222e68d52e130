# app/schemas/department.py
from typing import Optional, Union

from pydantic import BaseModel, Field

from app.models.department import DepartmentChildModel, DepartmentParentModel


class DepartmentParentBase(BaseModel):
    departmentLogo: Optional[str] = None
    description: Optional[str] = None
    leadContact: Optional[str] = None
    leadEmail: Optional[str] = None
    leadPhone: Optional[Union[str, int]] = None


class DepartmentParentCreate(DepartmentParentBase):
    departmentName: str


class DepartmentParentUpdate(DepartmentParentBase):
    departmentName: Optional[str] = None


class DepartmentChildCreate(BaseModel):
    departmentName: str
    parentDeptId: Union[int, str] = Field(..., description="Parent department ID")
    description: Optional[str] = None


class DepartmentChildUpdate(BaseModel):
    departmentName: Optional[str] = None
    parentDeptId: Optional[Union[int, str]] = Field(None, description="Parent department ID")
    description: Optional[str] = None


DepartmentParentOut = DepartmentParentModel
DepartmentChildOut = DepartmentChildModel
