"""Routes for ticket attachment metadata."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from releasetrack.application.use_cases.attachments import (
    delete_attachment as delete_attachment_uc,
    list_attachments as list_attachments_uc,
    register_attachment as register_attachment_uc,
)
from releasetrack.application.use_cases.tickets import get_ticket as get_ticket_uc
from releasetrack.domain.entities import User
from releasetrack.infrastructure.database import get_db
from releasetrack.interfaces.api.dependencies import get_acting_user
from releasetrack.interfaces.api.schemas import AttachmentCreate, AttachmentRead

router = APIRouter(prefix="/tickets/{ticket_id}/attachments", tags=["attachments"])


@router.get("/", response_model=list[AttachmentRead])
def list_attachments(ticket_id: str, db: Session = Depends(get_db)) -> list[AttachmentRead]:
    return [
        AttachmentRead.model_validate(attachment)
        for attachment in list_attachments_uc(db, ticket_id)
    ]


@router.post("/", response_model=AttachmentRead, status_code=status.HTTP_201_CREATED)
def register_attachment(
    ticket_id: str,
    attachment_in: AttachmentCreate,
    db: Session = Depends(get_db),
    uploader: User | None = Depends(get_acting_user),
) -> AttachmentRead:
    """Record a file that the client already uploaded to storage."""

    try:
        get_ticket_uc(db, ticket_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    try:
        attachment = register_attachment_uc(
            db,
            ticket_id=ticket_id,
            uploaded_by=uploader.id if uploader is not None else None,
            **attachment_in.model_dump(),
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return AttachmentRead.model_validate(attachment)


@router.delete("/{attachment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_attachment(
    ticket_id: str, attachment_id: int, db: Session = Depends(get_db)
) -> Response:
    try:
        delete_attachment_uc(db, ticket_id, attachment_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
