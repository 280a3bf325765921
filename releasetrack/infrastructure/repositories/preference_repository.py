"""Persistence layer for notification preferences."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from releasetrack.domain.entities import NotificationPreference
from releasetrack.infrastructure.models import UserPreferenceModel

_FLAG_FIELDS = (
    "email_notifications_enabled",
    "notify_on_status_change",
    "notify_on_assignee_change",
    "notify_on_comments",
    "notify_on_mentions",
    "daily_digest",
)


class PreferenceRepository:
    """Read and upsert rows of the ``user_preferences`` table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> NotificationPreference | None:
        model = self.session.get(UserPreferenceModel, user_id)
        return self._to_entity(model) if model else None

    def get_map_by_user_ids(
        self, user_ids: Iterable[int]
    ) -> dict[int, NotificationPreference]:
        """Return stored preferences keyed by user id using a single query."""

        unique_ids = {int(user_id) for user_id in user_ids}
        if not unique_ids:
            return {}
        query = self.session.query(UserPreferenceModel).filter(
            UserPreferenceModel.user_id.in_(unique_ids)
        )
        return {model.user_id: self._to_entity(model) for model in query.all()}

    def save(self, preference: NotificationPreference) -> NotificationPreference:
        model = self.session.get(UserPreferenceModel, preference.user_id)
        if model is None:
            model = UserPreferenceModel(user_id=preference.user_id)
        for name in _FLAG_FIELDS:
            setattr(model, name, bool(getattr(preference, name)))
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserPreferenceModel) -> NotificationPreference:
        return NotificationPreference(
            user_id=model.user_id,
            **{name: bool(getattr(model, name)) for name in _FLAG_FIELDS},
        )


__all__ = ["PreferenceRepository"]
