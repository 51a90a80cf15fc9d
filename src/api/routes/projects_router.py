# src/api/routes/projects_router.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from dependency_injector.wiring import Provide, inject

from core.containers.app_containers import AppContainer
from showcase.models import Project

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("/", response_model=List[Project], response_model_by_alias=True)
@inject
async def list_projects(
    featured: Optional[bool] = None,
    tag: Optional[str] = None,
    q: Optional[str] = Query(default=None, description="title / description search"),
    service=Depends(Provide[AppContainer.project_service]),
):
    return service.list_projects(featured=featured, tag=tag, query=q)


@router.get("/tags", response_model=List[str])
@inject
async def list_tags(service=Depends(Provide[AppContainer.project_service])):
    return service.tags()
