from dtmms.common.constants import ATTENDANCE_ID_PREFIX, StorageCollection
from dtmms.dto.attendance_dto import AttendanceCreateDto, AttendancePatchDto
from dtmms.entity.attendance_entity import AttendanceEntity
from dtmms.repository.base_collection_repository import BaseCollectionRepository


class AttendanceRepository(BaseCollectionRepository):
    collection = StorageCollection.ATTENDANCE
    entity_class = AttendanceEntity
    patch_class = AttendancePatchDto

    def get_by_session_id(self, session_id: str) -> list[AttendanceEntity]:
        return self._find_all(lambda record: record.session_id == session_id)

    def get_by_trainee_id(self, trainee_id: str) -> list[AttendanceEntity]:
        return self._find_all(lambda record: record.trainee_id == trainee_id)

    def create(self, attendance: AttendanceCreateDto) -> AttendanceEntity:
        """
        Record attendance for one trainee at one session.

        Existing records for the same session and trainee are not checked, so
        calling this twice produces two records.
        """
        return self._insert(
            {
                **attendance.model_dump(exclude_none=True),
                "id": self._new_id(ATTENDANCE_ID_PREFIX),
                "marked_at": self._now(),
            }
        )

    def update(
        self, attendance_id: str, patch: AttendancePatchDto
    ) -> AttendanceEntity | None:
        return self._update(attendance_id, patch)
