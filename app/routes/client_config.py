# app/routes/client_config.py
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.config import Settings, get_settings

router = APIRouter()


class DemoLogin(BaseModel):
    username: str
    password: str


class ApiConfig(BaseModel):
    baseUrl: str


class ClientConfig(BaseModel):
    """Runtime configuration consumed by the single-page front-end."""
    production: bool
    demoLogin: DemoLogin
    api: ApiConfig


@router.get("/client-config", response_model=ClientConfig)
async def get_client_config(settings: Settings = Depends(get_settings)):
    return ClientConfig(
        production=settings.PRODUCTION,
        demoLogin=DemoLogin(username=settings.DEMO_USERNAME, password=settings.DEMO_PASSWORD),
        api=ApiConfig(baseUrl=settings.API_BASE_URL),
    )
