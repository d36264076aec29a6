from unittest import main
from dtmms.common.constants import StorageCollection
from dtmms.dto.session_dto import SessionCreateDto, SessionPatchDto
from tests.dtmms_test.repository_test.base_repository_test_lib import (
    BaseRepositoryTestLib,
)


class TestSessionsRepository(BaseRepositoryTestLib):
    def test_get_by_programme_id(self):
        sessions = self.sessions_repository.get_by_programme_id("prog-2")

        self.assertEqual([s.id for s in sessions], ["session-4", "session-5"])

    def test_get_by_trainer_id(self):
        self.assertEqual(len(self.sessions_repository.get_by_trainer_id("trainer-1")), 3)

    def test_create_has_no_timestamp(self):
        created = self.sessions_repository.create(
            SessionCreateDto(
                programme_id="prog-1",
                title="PowerPoint Basics",
                date="2024-02-26",
                start_time="09:00",
                end_time="12:00",
                venue="Lab A",
                trainer_id="trainer-1",
            )
        )

        self.assertTrue(created.id.startswith("session-"))
        record = self.entity_store.read_all(StorageCollection.SESSIONS)[-1]
        self.assertEqual(
            set(record),
            {
                "id",
                "programmeId",
                "title",
                "date",
                "startTime",
                "endTime",
                "venue",
                "trainerId",
            },
        )

    def test_update_venue(self):
        updated = self.sessions_repository.update(
            "session-2", SessionPatchDto(venue="Room 12")
        )

        self.assertEqual(updated.venue, "Room 12")
        self.assertEqual(updated.programme_id, "prog-1")

    def test_update_keeps_owning_trainer(self):
        updated = self.sessions_repository.update(
            "session-2", SessionPatchDto(venue="Room 12", trainer_id="trainer-2")
        )

        self.assertEqual(updated.venue, "Room 12")
        self.assertEqual(updated.trainer_id, "trainer-1")

    def test_delete(self):
        self.assertTrue(self.sessions_repository.delete("session-1"))
        self.assertIsNone(self.sessions_repository.get_by_id("session-1"))
        self.assertFalse(self.sessions_repository.delete("session-1"))


if __name__ == "__main__":
    main()
