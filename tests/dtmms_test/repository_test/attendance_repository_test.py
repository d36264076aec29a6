from unittest import main
from dtmms.common.training_enums import AttendanceStatus
from dtmms.dto.attendance_dto import AttendanceCreateDto, AttendancePatchDto
from tests.dtmms_test.repository_test.base_repository_test_lib import (
    BaseRepositoryTestLib,
    TEST_NOW,
)


class TestAttendanceRepository(BaseRepositoryTestLib):
    def test_get_by_session_id(self):
        records = self.attendance_repository.get_by_session_id("session-1")

        self.assertEqual([r.id for r in records], ["att-1", "att-2", "att-3"])

    def test_get_by_trainee_id(self):
        records = self.attendance_repository.get_by_trainee_id("trainee-1")

        self.assertEqual([r.id for r in records], ["att-1", "att-4", "att-9"])

    def test_create_sets_marked_at(self):
        created = self.attendance_repository.create(
            AttendanceCreateDto(
                session_id="session-3",
                trainee_id="trainee-1",
                status=AttendanceStatus.PRESENT,
                marked_by="trainer-1",
            )
        )

        self.assertTrue(created.id.startswith("att-"))
        self.assertEqual(created.marked_at, TEST_NOW)
        self.assertIsNone(created.notes)

    def test_create_twice_duplicates(self):
        dto = AttendanceCreateDto(
            session_id="session-1",
            trainee_id="trainee-1",
            status=AttendanceStatus.LATE,
            marked_by="trainer-1",
        )

        self.attendance_repository.create(dto)

        self.assertEqual(
            len(
                [
                    r
                    for r in self.attendance_repository.get_by_session_id("session-1")
                    if r.trainee_id == "trainee-1"
                ]
            ),
            2,
        )

    def test_update_status_and_clear_notes(self):
        updated = self.attendance_repository.update(
            "att-5", AttendancePatchDto(status=AttendanceStatus.EXCUSED, notes=None)
        )

        self.assertEqual(updated.status, AttendanceStatus.EXCUSED)
        self.assertIsNone(updated.notes)
        self.assertEqual(updated.marked_at, "2024-02-12T09:00:00Z")


if __name__ == "__main__":
    main()
