"""Routes for ticket comments."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from releasetrack.application.use_cases.comments import (
    create_comment as create_comment_uc,
    list_comments as list_comments_uc,
)
from releasetrack.application.use_cases.tickets import get_ticket as get_ticket_uc
from releasetrack.domain.entities import User
from releasetrack.infrastructure.database import get_db
from releasetrack.infrastructure.email import EmailDeliveryClient
from releasetrack.interfaces.api.dependencies import get_acting_user, get_delivery_client
from releasetrack.interfaces.api.schemas import CommentCreate, CommentCreateRead, CommentRead

router = APIRouter(prefix="/tickets/{ticket_id}/comments", tags=["comments"])


@router.get("/", response_model=list[CommentRead])
def list_comments(ticket_id: str, db: Session = Depends(get_db)) -> list[CommentRead]:
    try:
        comments = list_comments_uc(db, ticket_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return [CommentRead.model_validate(comment) for comment in comments]


@router.post("/", response_model=CommentCreateRead, status_code=status.HTTP_201_CREATED)
def create_comment(
    ticket_id: str,
    comment_in: CommentCreate,
    db: Session = Depends(get_db),
    author: User | None = Depends(get_acting_user),
    client: EmailDeliveryClient = Depends(get_delivery_client),
) -> CommentCreateRead:
    """Add a comment; every mentioned user receives an email."""

    try:
        get_ticket_uc(db, ticket_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    try:
        outcome = create_comment_uc(
            db,
            ticket_id=ticket_id,
            content=comment_in.content,
            author=author,
            mentions=comment_in.mentions,
            client=client,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return CommentCreateRead.model_validate(outcome)


__all__ = ["router"]
