from unittest import main
from dtmms.common.training_enums import EnrollmentStatus
from dtmms.dto.enrollment_dto import EnrollmentCreateDto, EnrollmentPatchDto
from tests.dtmms_test.repository_test.base_repository_test_lib import (
    BaseRepositoryTestLib,
    TEST_NOW,
)


class TestEnrollmentsRepository(BaseRepositoryTestLib):
    def test_get_by_trainee_id(self):
        enrollments = self.enrollments_repository.get_by_trainee_id("trainee-2")

        self.assertEqual([e.id for e in enrollments], ["enroll-2", "enroll-7"])

    def test_get_by_programme_id(self):
        enrollments = self.enrollments_repository.get_by_programme_id("prog-2")

        self.assertEqual(
            [e.trainee_id for e in enrollments], ["trainee-4", "trainee-5", "trainee-1"]
        )

    def test_create_increments_programme_count(self):
        created = self.enrollments_repository.create(
            EnrollmentCreateDto(trainee_id="trainee-4", programme_id="prog-1")
        )

        self.assertTrue(created.id.startswith("enroll-"))
        self.assertEqual(created.enrolled_at, TEST_NOW)
        self.assertEqual(created.status, EnrollmentStatus.ACTIVE)
        self.assertEqual(self.enrollments_repository.get_by_id(created.id), created)
        self.assertEqual(
            self.programmes_repository.get_by_id("prog-1").enrolled_count, 25
        )

    def test_duplicate_enrollments_are_allowed(self):
        self.enrollments_repository.create(
            EnrollmentCreateDto(trainee_id="trainee-1", programme_id="prog-1")
        )

        self.assertEqual(
            len(
                [
                    e
                    for e in self.enrollments_repository.get_by_trainee_id("trainee-1")
                    if e.programme_id == "prog-1"
                ]
            ),
            2,
        )

    def test_create_for_unknown_programme_keeps_enrollment(self):
        programmes_before = self.programmes_repository.get_all()

        created = self.enrollments_repository.create(
            EnrollmentCreateDto(trainee_id="trainee-1", programme_id="prog-missing")
        )

        self.assertIsNotNone(self.enrollments_repository.get_by_id(created.id))
        self.assertEqual(self.programmes_repository.get_all(), programmes_before)

    def test_status_change_does_not_decrement_count(self):
        self.enrollments_repository.update(
            "enroll-1", EnrollmentPatchDto(status=EnrollmentStatus.DROPPED)
        )

        self.assertEqual(
            self.enrollments_repository.get_by_id("enroll-1").status,
            EnrollmentStatus.DROPPED,
        )
        self.assertEqual(
            self.programmes_repository.get_by_id("prog-1").enrolled_count, 24
        )

    def test_no_delete_operation(self):
        self.assertFalse(hasattr(self.enrollments_repository, "delete"))


if __name__ == "__main__":
    main()
