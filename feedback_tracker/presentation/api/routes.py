from fastapi import APIRouter, Depends, HTTPException, Response, status
from typing import List

from feedback_tracker.presentation.schemas import (
    FeedbackDTO,
    FeedbackRequestDTO,
    StatusRequestDTO,
    HealthStatusDTO,
)
from feedback_tracker.application import (
    ListFeedbackUseCase,
    CreateFeedbackUseCase,
    UpdateFeedbackUseCase,
    UpdateFeedbackStatusUseCase,
    DeleteFeedbackUseCase,
)
from feedback_tracker.domain import ValidationError, NotFoundError
from feedback_tracker.presentation.dependencies import (
    get_list_use_case,
    get_create_use_case,
    get_update_use_case,
    get_status_use_case,
    get_delete_use_case,
)


router = APIRouter()
feedback_router = APIRouter(prefix="/api/feedback", tags=["feedback"])


@router.get("/", response_model=HealthStatusDTO)
def root() -> HealthStatusDTO:
    """Health check endpoint."""
    return HealthStatusDTO(message="Feedback Tracker Running")


@feedback_router.get("", response_model=List[FeedbackDTO])
def list_feedback(
    use_case: ListFeedbackUseCase = Depends(get_list_use_case)
) -> List[FeedbackDTO]:
    """List all feedback, newest first."""
    return [FeedbackDTO.from_entity(feedback) for feedback in use_case.execute()]


@feedback_router.post("", response_model=FeedbackDTO)
def create_feedback(
    body: FeedbackRequestDTO,
    use_case: CreateFeedbackUseCase = Depends(get_create_use_case)
) -> FeedbackDTO:
    """Submit a new feedback item."""
    try:
        feedback = use_case.execute(
            body.title,
            body.description,
            body.category,
            body.priority,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors)
    return FeedbackDTO.from_entity(feedback)


@feedback_router.put("/{feedback_id}", response_model=FeedbackDTO)
def update_feedback(
    feedback_id: str,
    body: FeedbackRequestDTO,
    use_case: UpdateFeedbackUseCase = Depends(get_update_use_case)
) -> FeedbackDTO:
    """Edit title, description, category and priority."""
    try:
        feedback = use_case.execute(
            feedback_id,
            body.title,
            body.description,
            body.category,
            body.priority,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors)
    return FeedbackDTO.from_entity(feedback)


@feedback_router.patch("/{feedback_id}/status", response_model=FeedbackDTO)
def update_feedback_status(
    feedback_id: str,
    body: StatusRequestDTO,
    use_case: UpdateFeedbackStatusUseCase = Depends(get_status_use_case)
) -> FeedbackDTO:
    """Change the status of a feedback item."""
    try:
        feedback = use_case.execute(feedback_id, body.status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors)
    return FeedbackDTO.from_entity(feedback)


@feedback_router.delete("/{feedback_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_feedback(
    feedback_id: str,
    use_case: DeleteFeedbackUseCase = Depends(get_delete_use_case)
) -> Response:
    """Delete a feedback item."""
    try:
        use_case.execute(feedback_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


router.include_router(feedback_router)
