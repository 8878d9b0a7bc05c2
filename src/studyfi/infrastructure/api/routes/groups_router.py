"""Router for study group management."""

from fastapi import APIRouter, status

from studyfi.infrastructure.api.dependencies import GroupSvc
from studyfi.infrastructure.api.schemas import GroupRequest, GroupResponse
from studyfi.infrastructure.persistence.models import GroupModel

router = APIRouter()


@router.post(
    "",
    response_model=GroupResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new group",
)
async def create_group(group_data: GroupRequest, group_service: GroupSvc) -> GroupModel:
    return await group_service.create_group(group_data.name, group_data.description)


@router.get(
    "",
    response_model=list[GroupResponse],
    summary="List groups",
)
async def list_groups(group_service: GroupSvc) -> list[GroupModel]:
    return await group_service.list_groups()


@router.get(
    "/{group_id}",
    response_model=GroupResponse,
    summary="Get a group",
    responses={404: {"description": "Group not found"}},
)
async def get_group(group_id: str, group_service: GroupSvc) -> GroupModel:
    return await group_service.get_group(group_id)


@router.put(
    "/{group_id}",
    response_model=GroupResponse,
    summary="Update a group",
    responses={404: {"description": "Group not found"}},
)
async def update_group(
    group_id: str, group_data: GroupRequest, group_service: GroupSvc
) -> GroupModel:
    """Replace a group's name and description."""
    return await group_service.update_group(group_id, group_data.name, group_data.description)
