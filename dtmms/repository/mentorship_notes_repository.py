from dtmms.common.constants import MENTORSHIP_NOTE_ID_PREFIX, StorageCollection
from dtmms.dto.mentorship_dto import MentorshipNoteCreateDto
from dtmms.entity.mentorship_note_entity import MentorshipNoteEntity
from dtmms.repository.base_collection_repository import BaseCollectionRepository


class MentorshipNotesRepository(BaseCollectionRepository):
    """Append-only repository for notes written by mentors."""

    collection = StorageCollection.MENTORSHIP_NOTES
    entity_class = MentorshipNoteEntity

    def get_by_assignment_id(self, assignment_id: str) -> list[MentorshipNoteEntity]:
        return self._find_all(lambda note: note.assignment_id == assignment_id)

    def get_by_mentor_id(self, mentor_id: str) -> list[MentorshipNoteEntity]:
        return self._find_all(lambda note: note.mentor_id == mentor_id)

    def create(self, note: MentorshipNoteCreateDto) -> MentorshipNoteEntity:
        return self._insert(
            {
                **note.model_dump(exclude_none=True),
                "id": self._new_id(MENTORSHIP_NOTE_ID_PREFIX),
                "created_at": self._now(),
            }
        )
