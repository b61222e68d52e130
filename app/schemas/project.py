# app/schemas/project.py
from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.models.project import ProjectModel
from app.models.project_employee import ProjectEmployeeModel


class ProjectBase(BaseModel):
    clientName: Optional[str] = None
    clientIndustry: Optional[str] = None
    startDate: Optional[datetime] = None
    endDate: Optional[datetime] = None
    leadByEmpId: Optional[Union[int, str]] = Field(None, description="Employee ID of the project lead")
    sponsorEmpId: Optional[Union[int, str]] = Field(None, description="Employee ID of the sponsor")
    contactPerson: Optional[str] = None
    contactNo: Optional[Union[str, int]] = None
    emailId: Optional[str] = None
    status: Optional[str] = None
    tags: Optional[List[Any]] = None

    # Planning, approval and governance fields are validated by ProjectModel
    model_config = ConfigDict(extra="allow")


class ProjectCreate(ProjectBase):
    projectName: str


class ProjectUpdate(ProjectBase):
    projectName: Optional[str] = None


class ProjectEmployeeBase(BaseModel):
    role: Optional[str] = None
    allocationPct: Optional[float] = Field(None, ge=0, le=100)
    billable: Optional[bool] = None
    billingRate: Optional[float] = None
    costRate: Optional[float] = None
    notes: Optional[str] = None
    responsibilities: Optional[List[Any]] = None
    skillsApplied: Optional[List[Any]] = None
    toolsUsed: Optional[List[Any]] = None

    model_config = ConfigDict(extra="allow")


class ProjectEmployeeCreate(ProjectEmployeeBase):
    projectId: Union[int, str] = Field(..., description="Project ID")
    empId: Union[int, str] = Field(..., description="Employee ID")
    assignedDate: Optional[datetime] = None


class ProjectEmployeeUpdate(ProjectEmployeeBase):
    assignedDate: Optional[datetime] = None
    isActive: Optional[bool] = None


ProjectOut = ProjectModel
ProjectEmployeeOut = ProjectEmployeeModel
