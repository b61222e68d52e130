# app/models/project_employee.py
from typing import Any, Union

from pydantic import Field

from app.models.base import DocumentModel, LooseDatetime


class ProjectEmployeeModel(DocumentModel):
    COLLECTION = "ProjectEmployee"
    BUSINESS_KEY = "empProjectId"
    LABEL = "project employees"

    empProjectId: Union[int, str]
    projectId: Any = None
    empId: Any = None
    assignedDate: LooseDatetime = None
    role: Any = None
    isActive: Any = True
    allocationPct: Any = None
    billable: Any = None
    billingRate: Any = None
    costRate: Any = None
    notes: Any = None
    responsibilities: Any = Field(default_factory=list)
    skillsApplied: Any = Field(default_factory=list)
    toolsUsed: Any = Field(default_factory=list)
    schedule: Any = None
    contribution: Any = None
    unassignedAt: LooseDatetime = None
