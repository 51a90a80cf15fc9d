# src/api/routes/health_router.py
from fastapi import APIRouter, Depends
from dependency_injector.wiring import Provide, inject

from core.containers.app_containers import AppContainer

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("/")
@inject
async def health_check(service=Depends(Provide[AppContainer.project_service])):
    return {
        "status": "ok",
        "projects": len(service.projects),
    }
