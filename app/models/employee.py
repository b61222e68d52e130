# app/models/employee.py
from typing import Any, Union

from pydantic import Field

from app.models.base import DocumentModel, LooseDatetime


class EmployeeModel(DocumentModel):
    COLLECTION = "Employee"
    BUSINESS_KEY = "employeeId"
    LABEL = "employees"

    employeeId: Union[int, str]
    employeeName: Any = None
    contactNo: Any = None
    emailId: Any = None
    deptId: Any = None
    department: Any = None
    password: Any = None
    gender: Any = None
    role: Any = None
    title: Any = None
    avatarUrl: Any = None
    location: Any = None
    timezone: Any = None
    employmentType: Any = None
    managerId: Any = None
    hireDate: LooseDatetime = None
    bio: Any = None
    about: Any = None
    notes: Any = None
    tags: Any = Field(default_factory=list)
    skills: Any = Field(default_factory=list)
    certifications: Any = Field(default_factory=list)
    interests: Any = Field(default_factory=list)
    languages: Any = Field(default_factory=list)
    socialLinks: Any = None
    workPreferences: Any = None
    availability: Any = None
    preferences: Any = None
    performanceSnapshot: Any = None
    documents: Any = None
    customFields: Any = None
    isActive: Any = True
    lastActiveAt: LooseDatetime = None
