"""Persistence layer for ticket comments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from releasetrack.domain.entities import Comment
from releasetrack.infrastructure.models import CommentModel
from releasetrack.utils import ensure_app_timezone, now_in_app_timezone


class CommentRepository:
    """Provide create and list helpers for :class:`Comment` entries."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_ticket(self, ticket_id: str) -> Sequence[Comment]:
        query = (
            self.session.query(CommentModel)
            .filter(CommentModel.ticket_id == ticket_id)
            .order_by(CommentModel.created_at, CommentModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, comment: Comment) -> Comment:
        model = CommentModel(
            ticket_id=comment.ticket_id,
            author_id=comment.author_id,
            content=comment.content,
            mentions=[int(user_id) for user_id in comment.mentions],
            created_at=comment.created_at or now_in_app_timezone(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: CommentModel) -> Comment:
        return Comment(
            id=model.id,
            ticket_id=model.ticket_id,
            author_id=model.author_id,
            content=model.content,
            mentions=list(model.mentions or []),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["CommentRepository"]
