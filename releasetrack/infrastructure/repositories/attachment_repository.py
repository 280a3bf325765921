"""Persistence layer for ticket attachment metadata."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from releasetrack.domain.entities import Attachment
from releasetrack.infrastructure.models import AttachmentModel
from releasetrack.utils import ensure_app_timezone, now_in_app_timezone


class AttachmentRepository:
    """Provide CRUD helpers for :class:`Attachment` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_ticket(self, ticket_id: str) -> Sequence[Attachment]:
        query = (
            self.session.query(AttachmentModel)
            .filter(AttachmentModel.ticket_id == ticket_id)
            .order_by(AttachmentModel.created_at.desc(), AttachmentModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, attachment_id: int) -> Attachment | None:
        model = self.session.get(AttachmentModel, attachment_id)
        return self._to_entity(model) if model else None

    def create(self, attachment: Attachment) -> Attachment:
        model = AttachmentModel()
        self._apply_entity_to_model(model, attachment)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, attachment_id: int) -> bool:
        model = self.session.get(AttachmentModel, attachment_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(model: AttachmentModel, attachment: Attachment) -> None:
        model.ticket_id = attachment.ticket_id
        model.file_name = attachment.file_name
        model.file_path = attachment.file_path
        model.file_size = attachment.file_size
        model.file_type = attachment.file_type
        model.mime_type = attachment.mime_type
        model.original_size = attachment.original_size
        model.compressed = attachment.compressed
        model.uploaded_by = attachment.uploaded_by
        model.created_at = attachment.created_at or now_in_app_timezone()

    @staticmethod
    def _to_entity(model: AttachmentModel) -> Attachment:
        return Attachment(
            id=model.id,
            ticket_id=model.ticket_id,
            file_name=model.file_name,
            file_path=model.file_path,
            file_size=model.file_size,
            file_type=model.file_type,
            mime_type=model.mime_type,
            original_size=model.original_size,
            compressed=bool(model.compressed),
            uploaded_by=model.uploaded_by,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["AttachmentRepository"]
