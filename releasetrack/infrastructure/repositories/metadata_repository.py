"""Persistence layer for Salesforce metadata items."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from releasetrack.domain.entities import METADATA_ID_PREFIX, MetadataItem
from releasetrack.infrastructure.models import MetadataItemModel
from releasetrack.utils import ensure_app_timezone, now_in_app_timezone

from .identifiers import next_prefixed_id


class MetadataItemRepository:
    """Provide CRUD operations for :class:`MetadataItem` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        ticket_id: str | None = None,
        release_id: str | None = None,
        type: str | None = None,
    ) -> Sequence[MetadataItem]:
        query = self.session.query(MetadataItemModel)
        if ticket_id is not None:
            query = query.filter(MetadataItemModel.ticket_id == ticket_id)
        if release_id is not None:
            query = query.filter(MetadataItemModel.release_id == release_id)
        if type is not None:
            query = query.filter(MetadataItemModel.type == type)
        query = query.order_by(
            MetadataItemModel.created_at.desc(), MetadataItemModel.id.desc()
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, item_id: str) -> MetadataItem | None:
        model = self.session.get(MetadataItemModel, item_id)
        return self._to_entity(model) if model else None

    def exists(self, item_id: str) -> bool:
        return self.session.get(MetadataItemModel, item_id) is not None

    def next_item_id(self) -> str:
        """Return the next ``META-00001`` style identifier."""

        return next_prefixed_id(
            self.session, MetadataItemModel.id, METADATA_ID_PREFIX, width=5
        )

    def create(self, item: MetadataItem) -> MetadataItem:
        model = MetadataItemModel(id=item.id)
        self._apply_entity_to_model(model, item)
        model.created_at = item.created_at or now_in_app_timezone()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, item: MetadataItem) -> MetadataItem:
        model = self.session.get(MetadataItemModel, item.id)
        if model is None:
            msg = f"Metadata item with id {item.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, item)
        model.updated_at = item.updated_at or now_in_app_timezone()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, item_id: str) -> bool:
        model = self.session.get(MetadataItemModel, item_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(model: MetadataItemModel, item: MetadataItem) -> None:
        model.name = item.name
        model.type = item.type
        model.action = item.action
        model.api_name = item.api_name
        model.object = item.object
        model.description = item.description
        model.technical_details = item.technical_details
        model.ticket_id = item.ticket_id
        model.release_id = item.release_id

    @staticmethod
    def _to_entity(model: MetadataItemModel) -> MetadataItem:
        return MetadataItem(
            id=model.id,
            name=model.name,
            type=model.type,
            action=model.action,
            api_name=model.api_name,
            object=model.object,
            description=model.description,
            technical_details=model.technical_details,
            ticket_id=model.ticket_id,
            release_id=model.release_id,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["MetadataItemRepository"]
