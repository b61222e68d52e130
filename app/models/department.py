# app/models/department.py
from typing import Any, Union

from app.models.base import DocumentModel


class DepartmentParentModel(DocumentModel):
    COLLECTION = "DepartmentParent"
    BUSINESS_KEY = "departmentId"
    LABEL = "department parents"

    departmentId: Union[int, str]
    departmentName: Any = None
    departmentLogo: Any = None
    description: Any = None
    leadContact: Any = None
    leadEmail: Any = None
    leadPhone: Any = None


class DepartmentChildModel(DocumentModel):
    COLLECTION = "DepartmentChild"
    BUSINESS_KEY = "childDeptId"
    LABEL = "department children"

    childDeptId: Union[int, str]
    departmentName: Any = None
    parentDeptId: Any = None
    description: Any = None
