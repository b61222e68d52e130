# app/routes/employee.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database import get_database
from app.models.base import utcnow
from app.models.department import DepartmentChildModel, DepartmentParentModel
from app.models.employee import EmployeeModel
from app.models.project_employee import ProjectEmployeeModel
from app.routes.common import (
    create_error_response,
    find_by_key,
    key_query,
    save_document,
    update_document,
)
from app.schemas.employee import EmployeeCreate, EmployeeOut, EmployeeUpdate
from app.utils.counter import next_sequence

router = APIRouter()


async def validate_department(db: AsyncIOMotorDatabase, dept_id):
    """An employee's deptId may point at a child or a parent department."""
    if dept_id is None:
        return
    child = await db[DepartmentChildModel.COLLECTION].find_one(
        key_query(DepartmentChildModel.BUSINESS_KEY, dept_id)
    )
    if child:
        return
    parent = await db[DepartmentParentModel.COLLECTION].find_one(
        key_query(DepartmentParentModel.BUSINESS_KEY, dept_id)
    )
    if parent:
        return
    raise HTTPException(
        status_code=400,
        detail=create_error_response(
            message="Invalid department",
            details=f"No department found with ID: {dept_id}",
            example="Create the department before assigning employees to it"
        )
    )


@router.post("/employees", response_model=EmployeeOut)
async def create_employee(employee: EmployeeCreate, db: AsyncIOMotorDatabase = Depends(get_database)):
    await validate_department(db, employee.deptId)

    # Email addresses identify employees at login
    if employee.emailId:
        existing = await db[EmployeeModel.COLLECTION].find_one({"emailId": employee.emailId})
        if existing:
            raise HTTPException(
                status_code=400,
                detail=create_error_response(
                    message="Email already registered",
                    details=f"Employee with email '{employee.emailId}' already exists",
                    example="Please provide a unique email address"
                )
            )

    employee_id = await next_sequence(db, EmployeeModel.BUSINESS_KEY)
    document = EmployeeModel.model_validate(
        {**employee.model_dump(exclude_unset=True), "employeeId": employee_id}
    )
    created = await save_document(db, document)
    return EmployeeOut.model_validate(created)


@router.get("/employees", response_model=List[EmployeeOut])
async def get_employees(
    deptId: Optional[str] = None,
    isActive: Optional[bool] = None,
    skip: int = 0,
    limit: int = 100,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    query = {}
    if deptId is not None:
        query.update(key_query("deptId", deptId))
    if isActive is not None:
        query["isActive"] = isActive

    employees = await db[EmployeeModel.COLLECTION].find(query).skip(skip).limit(limit).to_list(length=limit)
    return [EmployeeOut.model_validate(employee) for employee in employees]


@router.get("/employees/{employee_id}", response_model=EmployeeOut)
async def get_employee(employee_id: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    employee = await find_by_key(db, EmployeeModel, employee_id, "Employee")
    return EmployeeOut.model_validate(employee)


@router.put("/employees/{employee_id}", response_model=EmployeeOut)
async def update_employee(
    employee_id: str,
    employee: EmployeeUpdate,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    existing = await find_by_key(db, EmployeeModel, employee_id, "Employee")
    changes = employee.model_dump(exclude_unset=True)
    changes.pop(EmployeeModel.BUSINESS_KEY, None)

    if "deptId" in changes:
        await validate_department(db, changes["deptId"])
    if changes.get("isActive") is False:
        changes.setdefault("lastActiveAt", utcnow())

    updated = await update_document(db, EmployeeModel, existing, changes)
    return EmployeeOut.model_validate(updated)


@router.delete("/employees/{employee_id}")
async def delete_employee(employee_id: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    employee = await find_by_key(db, EmployeeModel, employee_id, "Employee")

    # Check for active project assignments
    assignment = await db[ProjectEmployeeModel.COLLECTION].find_one(
        {**key_query("empId", employee["employeeId"]), "isActive": True}
    )
    if assignment:
        raise HTTPException(
            status_code=400,
            detail=create_error_response(
                message="Cannot delete employee",
                details="Employee has active project assignments",
                example="Unassign the employee from all projects before removing them"
            )
        )

    delete_result = await db[EmployeeModel.COLLECTION].delete_one({"employeeId": employee["employeeId"]})
    if delete_result.deleted_count == 0:
        raise HTTPException(
            status_code=500,
            detail=create_error_response(
                message="Deletion failed",
                details="Failed to delete the employee",
                example="Please try again or contact support if the problem persists"
            )
        )

    return {"message": "Employee deleted successfully"}
