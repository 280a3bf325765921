"""Persistence layer for releases."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from releasetrack.domain.entities import RELEASE_ID_PREFIX, Release
from releasetrack.infrastructure.models import ReleaseModel
from releasetrack.utils import ensure_app_timezone, now_in_app_timezone

from .identifiers import next_prefixed_id


class ReleaseRepository:
    """Provide CRUD operations for :class:`Release` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, status: str | None = None) -> Sequence[Release]:
        query = self.session.query(ReleaseModel)
        if status is not None:
            query = query.filter(ReleaseModel.status == status)
        query = query.order_by(ReleaseModel.target.desc(), ReleaseModel.created_at.desc())
        return [self._to_entity(model) for model in query.all()]

    def get(self, release_id: str) -> Release | None:
        model = self.session.get(ReleaseModel, release_id)
        return self._to_entity(model) if model else None

    def exists(self, release_id: str) -> bool:
        return self.session.get(ReleaseModel, release_id) is not None

    def next_release_id(self) -> str:
        """Return the next ``RELEASE-1`` style identifier."""

        return next_prefixed_id(self.session, ReleaseModel.id, RELEASE_ID_PREFIX)

    def create(self, release: Release) -> Release:
        model = ReleaseModel(id=release.id)
        self._apply_entity_to_model(model, release)
        model.created_at = release.created_at or now_in_app_timezone()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, release: Release) -> Release:
        model = self.session.get(ReleaseModel, release.id)
        if model is None:
            msg = f"Release with id {release.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, release)
        model.updated_at = release.updated_at or now_in_app_timezone()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, release_id: str) -> bool:
        model = self.session.get(ReleaseModel, release_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(model: ReleaseModel, release: Release) -> None:
        model.name = release.name
        model.version = release.version
        model.target = release.target
        model.status = release.status
        model.description = release.description
        model.stakeholder_summary = release.stakeholder_summary

    @staticmethod
    def _to_entity(model: ReleaseModel) -> Release:
        return Release(
            id=model.id,
            name=model.name,
            version=model.version,
            target=model.target,
            status=model.status,
            description=model.description,
            stakeholder_summary=model.stakeholder_summary,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["ReleaseRepository"]
