# app/routes/project.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database import get_database
from app.models.base import utcnow
from app.models.employee import EmployeeModel
from app.models.project import ProjectModel
from app.models.project_employee import ProjectEmployeeModel
from app.routes.common import (
    create_error_response,
    find_by_key,
    key_query,
    save_document,
    update_document,
)
from app.schemas.project import (
    ProjectCreate,
    ProjectEmployeeCreate,
    ProjectEmployeeOut,
    ProjectEmployeeUpdate,
    ProjectOut,
    ProjectUpdate,
)
from app.utils.counter import next_sequence

router = APIRouter()


async def validate_employee_refs(db: AsyncIOMotorDatabase, changes: dict):
    """Lead and sponsor must be existing employees."""
    for field in ("leadByEmpId", "sponsorEmpId"):
        emp_id = changes.get(field)
        if emp_id is None:
            continue
        employee = await db[EmployeeModel.COLLECTION].find_one(key_query("employeeId", emp_id))
        if not employee:
            raise HTTPException(
                status_code=400,
                detail=create_error_response(
                    message="Employee not found",
                    details=f"No employee found for {field}: {emp_id}",
                    example="Please ensure you're using a valid employee ID"
                )
            )


@router.post("/projects", response_model=ProjectOut)
async def create_project(project: ProjectCreate, db: AsyncIOMotorDatabase = Depends(get_database)):
    changes = project.model_dump(exclude_unset=True)
    await validate_employee_refs(db, changes)

    project_id = await next_sequence(db, ProjectModel.BUSINESS_KEY)
    document = ProjectModel.model_validate({**changes, "projectId": project_id})
    return ProjectModel.model_validate(await save_document(db, document))


@router.get("/projects", response_model=List[ProjectOut])
async def get_projects(
    status: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    query = {"status": status} if status else {}
    projects = await db[ProjectModel.COLLECTION].find(query).skip(skip).limit(limit).to_list(length=limit)
    return [ProjectModel.model_validate(project) for project in projects]


@router.get("/projects/{project_id}", response_model=ProjectOut)
async def get_project(project_id: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    return ProjectModel.model_validate(await find_by_key(db, ProjectModel, project_id, "Project"))


@router.put("/projects/{project_id}", response_model=ProjectOut)
async def update_project(project_id: str, project: ProjectUpdate, db: AsyncIOMotorDatabase = Depends(get_database)):
    existing = await find_by_key(db, ProjectModel, project_id, "Project")
    changes = project.model_dump(exclude_unset=True)
    changes.pop(ProjectModel.BUSINESS_KEY, None)
    await validate_employee_refs(db, changes)

    updated = await update_document(db, ProjectModel, existing, changes)
    return ProjectModel.model_validate(updated)


@router.delete("/projects/{project_id}")
async def delete_project(project_id: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    project = await find_by_key(db, ProjectModel, project_id, "Project")

    assignment = await db[ProjectEmployeeModel.COLLECTION].find_one(
        {**key_query("projectId", project["projectId"]), "isActive": True}
    )
    if assignment:
        raise HTTPException(
            status_code=400,
            detail=create_error_response(
                message="Cannot delete project",
                details="Project has active employee assignments",
                example="Unassign all employees before deleting the project"
            )
        )

    await db[ProjectModel.COLLECTION].delete_one({"projectId": project["projectId"]})
    return {"message": "Project deleted successfully"}


# Project assignments

@router.get("/projects/{project_id}/employees", response_model=List[ProjectEmployeeOut])
async def get_project_employees(
    project_id: str,
    include_inactive: bool = False,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    project = await find_by_key(db, ProjectModel, project_id, "Project")
    query = key_query("projectId", project["projectId"])
    if not include_inactive:
        query["isActive"] = True

    assignments = await db[ProjectEmployeeModel.COLLECTION].find(query).to_list(length=None)
    return [ProjectEmployeeModel.model_validate(assignment) for assignment in assignments]


@router.post("/project-employees", response_model=ProjectEmployeeOut)
async def assign_employee(
    assignment: ProjectEmployeeCreate,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    project = await find_by_key(db, ProjectModel, assignment.projectId, "Project")
    employee = await find_by_key(db, EmployeeModel, assignment.empId, "Employee")

    existing = await db[ProjectEmployeeModel.COLLECTION].find_one({
        **key_query("projectId", project["projectId"]),
        **key_query("empId", employee["employeeId"]),
        "isActive": True,
    })
    if existing:
        raise HTTPException(
            status_code=400,
            detail=create_error_response(
                message="Employee already assigned",
                details=f"Employee {employee['employeeId']} is already assigned to project {project['projectId']}",
                example="Update the existing assignment instead"
            )
        )

    emp_project_id = await next_sequence(db, ProjectEmployeeModel.BUSINESS_KEY)
    document = ProjectEmployeeModel.model_validate({
        "assignedDate": utcnow(),
        **assignment.model_dump(exclude_unset=True),
        "projectId": project["projectId"],
        "empId": employee["employeeId"],
        "empProjectId": emp_project_id,
    })
    return ProjectEmployeeModel.model_validate(await save_document(db, document))


@router.put("/project-employees/{emp_project_id}", response_model=ProjectEmployeeOut)
async def update_assignment(
    emp_project_id: str,
    assignment: ProjectEmployeeUpdate,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    existing = await find_by_key(db, ProjectEmployeeModel, emp_project_id, "Assignment")
    changes = assignment.model_dump(exclude_unset=True)
    for field in ("empProjectId", "projectId", "empId"):
        changes.pop(field, None)

    updated = await update_document(db, ProjectEmployeeModel, existing, changes)
    return ProjectEmployeeModel.model_validate(updated)


@router.delete("/project-employees/{emp_project_id}", response_model=ProjectEmployeeOut)
async def unassign_employee(emp_project_id: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    existing = await find_by_key(db, ProjectEmployeeModel, emp_project_id, "Assignment")
    updated = await update_document(
        db,
        ProjectEmployeeModel,
        existing,
        {"isActive": False, "unassignedAt": utcnow()},
    )
    return ProjectEmployeeModel.model_validate(updated)
