# app/routes/department.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database import get_database
from app.models.department import DepartmentChildModel, DepartmentParentModel
from app.models.employee import EmployeeModel
from app.routes.common import (
    create_error_response,
    find_by_key,
    key_query,
    save_document,
    update_document,
)
from app.schemas.department import (
    DepartmentChildCreate,
    DepartmentChildOut,
    DepartmentChildUpdate,
    DepartmentParentCreate,
    DepartmentParentOut,
    DepartmentParentUpdate,
)
from app.utils.counter import next_sequence

router = APIRouter()


async def ensure_parent_exists(db: AsyncIOMotorDatabase, parent_dept_id):
    parent = await db[DepartmentParentModel.COLLECTION].find_one(
        key_query(DepartmentParentModel.BUSINESS_KEY, parent_dept_id)
    )
    if not parent:
        raise HTTPException(
            status_code=400,
            detail=create_error_response(
                message="Parent department not found",
                details=f"No parent department found with ID: {parent_dept_id}",
                example="Create the parent department first"
            )
        )
    return parent


async def ensure_no_employees(db: AsyncIOMotorDatabase, dept_id, label: str):
    employee = await db[EmployeeModel.COLLECTION].find_one(key_query("deptId", dept_id))
    if employee:
        raise HTTPException(
            status_code=400,
            detail=create_error_response(
                message=f"Cannot delete {label}",
                details=f"Employees are still assigned to department {dept_id}",
                example="Move employees to another department before deleting this one"
            )
        )


# Parent departments

@router.post("/departments/parents", response_model=DepartmentParentOut)
async def create_parent_department(
    department: DepartmentParentCreate,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    department_id = await next_sequence(db, DepartmentParentModel.BUSINESS_KEY)
    document = DepartmentParentModel.model_validate(
        {**department.model_dump(exclude_unset=True), "departmentId": department_id}
    )
    return DepartmentParentModel.model_validate(await save_document(db, document))


@router.get("/departments/parents", response_model=List[DepartmentParentOut])
async def get_parent_departments(skip: int = 0, limit: int = 100, db: AsyncIOMotorDatabase = Depends(get_database)):
    departments = await db[DepartmentParentModel.COLLECTION].find().skip(skip).limit(limit).to_list(length=limit)
    return [DepartmentParentModel.model_validate(dept) for dept in departments]


@router.get("/departments/parents/{department_id}", response_model=DepartmentParentOut)
async def get_parent_department(department_id: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    department = await find_by_key(db, DepartmentParentModel, department_id, "Department")
    return DepartmentParentModel.model_validate(department)


@router.put("/departments/parents/{department_id}", response_model=DepartmentParentOut)
async def update_parent_department(
    department_id: str,
    department: DepartmentParentUpdate,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    existing = await find_by_key(db, DepartmentParentModel, department_id, "Department")
    updated = await update_document(
        db, DepartmentParentModel, existing, department.model_dump(exclude_unset=True)
    )
    return DepartmentParentModel.model_validate(updated)


@router.delete("/departments/parents/{department_id}")
async def delete_parent_department(department_id: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    department = await find_by_key(db, DepartmentParentModel, department_id, "Department")

    child = await db[DepartmentChildModel.COLLECTION].find_one(
        key_query("parentDeptId", department["departmentId"])
    )
    if child:
        raise HTTPException(
            status_code=400,
            detail=create_error_response(
                message="Cannot delete department",
                details="Department still has child departments",
                example="Delete or move the child departments first"
            )
        )
    await ensure_no_employees(db, department["departmentId"], "department")

    await db[DepartmentParentModel.COLLECTION].delete_one({"departmentId": department["departmentId"]})
    return {"message": "Department deleted successfully"}


# Child departments

@router.post("/departments/children", response_model=DepartmentChildOut)
async def create_child_department(
    department: DepartmentChildCreate,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    parent = await ensure_parent_exists(db, department.parentDeptId)
    child_dept_id = await next_sequence(db, DepartmentChildModel.BUSINESS_KEY)
    document = DepartmentChildModel.model_validate({
        **department.model_dump(exclude_unset=True),
        "parentDeptId": parent["departmentId"],
        "childDeptId": child_dept_id,
    })
    return DepartmentChildModel.model_validate(await save_document(db, document))


@router.get("/departments/children", response_model=List[DepartmentChildOut])
async def get_child_departments(
    parentDeptId: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    query = key_query("parentDeptId", parentDeptId) if parentDeptId is not None else {}
    departments = await db[DepartmentChildModel.COLLECTION].find(query).skip(skip).limit(limit).to_list(length=limit)
    return [DepartmentChildModel.model_validate(dept) for dept in departments]


@router.get("/departments/children/{child_dept_id}", response_model=DepartmentChildOut)
async def get_child_department(child_dept_id: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    department = await find_by_key(db, DepartmentChildModel, child_dept_id, "Department")
    return DepartmentChildModel.model_validate(department)


@router.put("/departments/children/{child_dept_id}", response_model=DepartmentChildOut)
async def update_child_department(
    child_dept_id: str,
    department: DepartmentChildUpdate,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    existing = await find_by_key(db, DepartmentChildModel, child_dept_id, "Department")
    changes = department.model_dump(exclude_unset=True)
    if changes.get("parentDeptId") is not None:
        parent = await ensure_parent_exists(db, changes["parentDeptId"])
        changes["parentDeptId"] = parent["departmentId"]

    updated = await update_document(db, DepartmentChildModel, existing, changes)
    return DepartmentChildModel.model_validate(updated)


@router.delete("/departments/children/{child_dept_id}")
async def delete_child_department(child_dept_id: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    department = await find_by_key(db, DepartmentChildModel, child_dept_id, "Department")
    await ensure_no_employees(db, department["childDeptId"], "department")

    await db[DepartmentChildModel.COLLECTION].delete_one({"childDeptId": department["childDeptId"]})
    return {"message": "Department deleted successfully"}
