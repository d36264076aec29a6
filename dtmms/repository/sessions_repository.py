from dtmms.common.constants import SESSION_ID_PREFIX, StorageCollection
from dtmms.dto.session_dto import SessionCreateDto, SessionPatchDto
from dtmms.entity.session_entity import SessionEntity
from dtmms.repository.base_collection_repository import BaseCollectionRepository


class SessionsRepository(BaseCollectionRepository):
    collection = StorageCollection.SESSIONS
    entity_class = SessionEntity
    patch_class = SessionPatchDto

    def get_by_programme_id(self, programme_id: str) -> list[SessionEntity]:
        return self._find_all(lambda session: session.programme_id == programme_id)

    def get_by_trainer_id(self, trainer_id: str) -> list[SessionEntity]:
        return self._find_all(lambda session: session.trainer_id == trainer_id)

    def create(self, session: SessionCreateDto) -> SessionEntity:
        # Sessions carry a scheduled date but no creation timestamp.
        return self._insert(
            {
                **session.model_dump(exclude_none=True),
                "id": self._new_id(SESSION_ID_PREFIX),
            }
        )

    def update(self, session_id: str, patch: SessionPatchDto) -> SessionEntity | None:
        return self._update(session_id, patch)

    def delete(self, session_id: str) -> bool:
        return self._delete_by_id(session_id)
