# app/database.py
import logging

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING
from pymongo.errors import OperationFailure

from app.config import get_settings
from app.models.counter import CounterModel
from app.models.department import DepartmentChildModel, DepartmentParentModel
from app.models.employee import EmployeeModel
from app.models.project import ProjectModel
from app.models.project_employee import ProjectEmployeeModel

logger = logging.getLogger(__name__)

# Seed order keeps referenced documents ahead of the documents pointing at them
DOCUMENT_MODELS = [
    CounterModel,
    DepartmentParentModel,
    DepartmentChildModel,
    EmployeeModel,
    ProjectModel,
    ProjectEmployeeModel,
]


class Database:
    client: AsyncIOMotorClient = None
    db = None

db = Database()

async def connect_to_mongo():
    settings = get_settings()
    db.client = AsyncIOMotorClient(settings.DATABASE_URL)
    db.db = db.client[settings.database_name]
    logger.info("Connected to MongoDB: %s", settings.database_name)

async def close_mongo_connection():
    if db.client:
        db.client.close()
        db.client = None
        db.db = None
        logger.info("Closed MongoDB connection")

async def get_database():
    return db.db

async def safe_create_index(collection, keys, **kwargs):
    try:
        return await collection.create_index(keys, **kwargs)
    except OperationFailure as e:
        logger.warning("Skipping index %s: %s", kwargs.get("name"), e)
        return None

async def init_db():
    if not db.client:
        await connect_to_mongo()

    # One document per business key; the seed upserts and the API rely on it
    for model in DOCUMENT_MODELS:
        await safe_create_index(
            db.db[model.COLLECTION],
            [(model.BUSINESS_KEY, ASCENDING)],
            unique=True,
            name=f"{model.BUSINESS_KEY}_unique",
        )

    await safe_create_index(db.db[EmployeeModel.COLLECTION], [("deptId", ASCENDING)], name="deptId")
    await safe_create_index(db.db[DepartmentChildModel.COLLECTION], [("parentDeptId", ASCENDING)], name="parentDeptId")
    await safe_create_index(
        db.db[ProjectEmployeeModel.COLLECTION],
        [("projectId", ASCENDING), ("empId", ASCENDING)],
        name="projectId_empId",
    )

    logger.info("Database initialized successfully!")
    return True
