# dashboard/adapters/inbound/api/v1/endpoints/announcement_endpoint.py

from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.adapters.inbound.api.deps import get_db, get_current_identity
from dashboard.application.dtos.base_dto import DataResponse
from dashboard.application.dtos.announcement_dto import (
    AnnouncementCreate,
    AnnouncementUpdate,
    AnnouncementOutput,
)
from dashboard.application.use_cases.announcement_use_cases import AsyncAnnouncementService
from dashboard.domain.models.identity_domain_model import AuthenticatedIdentity

router = APIRouter()


def get_announcement_service(db: AsyncSession = Depends(get_db)) -> AsyncAnnouncementService:
    return AsyncAnnouncementService(db)


@router.get(
    "/get-all-announcements",
    response_model=DataResponse[List[AnnouncementOutput]],
    summary="List Announcements - Non-deleted announcements, newest first",
)
async def get_all_announcements(
        skip: int = Query(0, ge=0),
        limit: int = Query(100, ge=1, le=500),
        service: AsyncAnnouncementService = Depends(get_announcement_service),
):
    announcements = await service.list_all(skip=skip, limit=limit)
    return {"message": "Announcements retrieved successfully", "data": announcements}


@router.get(
    "/get-announcement/{announcement_id}",
    response_model=DataResponse[AnnouncementOutput],
    summary="Get Announcement - By ID",
)
async def get_announcement(
        announcement_id: UUID = Path(...),
        service: AsyncAnnouncementService = Depends(get_announcement_service),
):
    announcement = await service.get(announcement_id)
    return {"message": "Announcement retrieved successfully", "data": announcement}


@router.post(
    "/create-announcement",
    response_model=DataResponse[AnnouncementOutput],
    status_code=status.HTTP_201_CREATED,
    summary="Create Announcement - Owned by the authenticated user",
)
async def create_announcement(
        data: AnnouncementCreate,
        identity: AuthenticatedIdentity = Depends(get_current_identity),
        service: AsyncAnnouncementService = Depends(get_announcement_service),
):
    announcement = await service.create(data, identity)
    return {"message": "Announcement created successfully", "data": announcement}


@router.put(
    "/update-announcement/{announcement_id}",
    response_model=DataResponse[AnnouncementOutput],
    summary="Update Announcement - Owner only",
)
async def update_announcement(
        data: AnnouncementUpdate,
        announcement_id: UUID = Path(...),
        identity: AuthenticatedIdentity = Depends(get_current_identity),
        service: AsyncAnnouncementService = Depends(get_announcement_service),
):
    announcement = await service.update(announcement_id, data, identity)
    return {"message": "Announcement updated successfully", "data": announcement}


@router.delete(
    "/delete-announcement/{announcement_id}",
    response_model=DataResponse[AnnouncementOutput],
    summary="Delete Announcement - Soft delete, owner only",
)
async def delete_announcement(
        announcement_id: UUID = Path(...),
        identity: AuthenticatedIdentity = Depends(get_current_identity),
        service: AsyncAnnouncementService = Depends(get_announcement_service),
):
    announcement = await service.delete(announcement_id, identity)
    return {"message": "Announcement soft deleted successfully", "data": announcement}
