from dtmms.common.constants import MENTORSHIP_ASSIGNMENT_ID_PREFIX, StorageCollection
from dtmms.dto.mentorship_dto import (
    MentorshipAssignmentCreateDto,
    MentorshipAssignmentPatchDto,
)
from dtmms.entity.mentorship_assignment_entity import MentorshipAssignmentEntity
from dtmms.repository.base_collection_repository import BaseCollectionRepository


class MentorshipAssignmentsRepository(BaseCollectionRepository):
    collection = StorageCollection.MENTORSHIPS
    entity_class = MentorshipAssignmentEntity
    patch_class = MentorshipAssignmentPatchDto

    def get_by_mentor_id(self, mentor_id: str) -> list[MentorshipAssignmentEntity]:
        return self._find_all(lambda assignment: assignment.mentor_id == mentor_id)

    def get_by_trainee_id(self, trainee_id: str) -> list[MentorshipAssignmentEntity]:
        return self._find_all(lambda assignment: assignment.trainee_id == trainee_id)

    def create(
        self, assignment: MentorshipAssignmentCreateDto
    ) -> MentorshipAssignmentEntity:
        return self._insert(
            {
                **assignment.model_dump(exclude_none=True),
                "id": self._new_id(MENTORSHIP_ASSIGNMENT_ID_PREFIX),
                "assigned_at": self._now(),
            }
        )

    def update(
        self, assignment_id: str, patch: MentorshipAssignmentPatchDto
    ) -> MentorshipAssignmentEntity | None:
        return self._update(assignment_id, patch)
