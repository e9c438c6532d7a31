# dashboard/adapters/inbound/api/v1/endpoints/quiz_endpoint.py

from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.adapters.inbound.api.deps import get_db, get_current_identity
from dashboard.application.dtos.base_dto import DataResponse
from dashboard.application.dtos.quiz_dto import QuizCreate, QuizUpdate, QuizOutput
from dashboard.application.use_cases.quiz_use_cases import AsyncQuizService
from dashboard.domain.models.identity_domain_model import AuthenticatedIdentity

# every quiz route requires an authenticated user
router = APIRouter(dependencies=[Depends(get_current_identity)])


def get_quiz_service(db: AsyncSession = Depends(get_db)) -> AsyncQuizService:
    return AsyncQuizService(db)


@router.get(
    "/get-all-quizzes",
    response_model=DataResponse[List[QuizOutput]],
    summary="List Quizzes - Non-deleted quizzes, newest first",
)
async def get_all_quizzes(
        skip: int = Query(0, ge=0),
        limit: int = Query(100, ge=1, le=500),
        service: AsyncQuizService = Depends(get_quiz_service),
):
    quizzes = await service.list_all(skip=skip, limit=limit)
    return {"message": "Quizzes retrieved successfully", "data": quizzes}


@router.get(
    "/get-quiz/{quiz_id}",
    response_model=DataResponse[QuizOutput],
    summary="Get Quiz - By ID",
)
async def get_quiz(
        quiz_id: UUID = Path(...),
        service: AsyncQuizService = Depends(get_quiz_service),
):
    quiz = await service.get(quiz_id)
    return {"message": "Quiz retrieved successfully", "data": quiz}


@router.post(
    "/create-quiz",
    response_model=DataResponse[QuizOutput],
    status_code=status.HTTP_201_CREATED,
    summary="Create Quiz - Owned by the authenticated user",
)
async def create_quiz(
        data: QuizCreate,
        identity: AuthenticatedIdentity = Depends(get_current_identity),
        service: AsyncQuizService = Depends(get_quiz_service),
):
    quiz = await service.create(data, identity)
    return {"message": "Quiz created successfully", "data": quiz}


@router.put(
    "/update-quiz/{quiz_id}",
    response_model=DataResponse[QuizOutput],
    summary="Update Quiz - Owner only",
)
async def update_quiz(
        data: QuizUpdate,
        quiz_id: UUID = Path(...),
        identity: AuthenticatedIdentity = Depends(get_current_identity),
        service: AsyncQuizService = Depends(get_quiz_service),
):
    quiz = await service.update(quiz_id, data, identity)
    return {"message": "Quiz updated successfully", "data": quiz}


@router.delete(
    "/delete-quiz/{quiz_id}",
    response_model=DataResponse[QuizOutput],
    summary="Delete Quiz - Soft delete, owner only",
)
async def delete_quiz(
        quiz_id: UUID = Path(...),
        identity: AuthenticatedIdentity = Depends(get_current_identity),
        service: AsyncQuizService = Depends(get_quiz_service),
):
    quiz = await service.delete(quiz_id, identity)
    return {"message": "Quiz soft deleted successfully", "data": quiz}
