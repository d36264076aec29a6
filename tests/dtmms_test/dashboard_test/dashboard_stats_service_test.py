from unittest import main
from dtmms.common.constants import StorageCollection
from dtmms.common.training_enums import (
    AttendanceStatus,
    EvaluatorRole,
    MentorshipStatus,
)
from dtmms.dashboard.dashboard_stats_service import (
    DashboardStatsService,
    calculate_attendance_rate,
)
from dtmms.dto.attendance_dto import AttendanceCreateDto
from dtmms.dto.evaluation_dto import EvaluationCreateDto
from dtmms.dto.mentorship_dto import (
    MentorshipAssignmentCreateDto,
    MentorshipAssignmentPatchDto,
)
from dtmms.dto.stats_dto import (
    AdminStatsDto,
    MentorStatsDto,
    TraineeStatsDto,
    TrainerStatsDto,
)
from dtmms.entity.evaluation_entity import EvaluationScores
from tests.dtmms_test.repository_test.base_repository_test_lib import (
    BaseRepositoryTestLib,
)


class DashboardStatsTestLib(BaseRepositoryTestLib):
    def setUp(self):
        super().setUp()
        self.service = DashboardStatsService(
            logger=self.mock_logger,
            users_repository=self.users_repository,
            programmes_repository=self.programmes_repository,
            sessions_repository=self.sessions_repository,
            enrollments_repository=self.enrollments_repository,
            attendance_repository=self.attendance_repository,
            mentorship_assignments_repository=self.mentorship_assignments_repository,
            mentorship_notes_repository=self.mentorship_notes_repository,
            evaluations_repository=self.evaluations_repository,
            materials_repository=self.materials_repository,
            date_time_util=self.mock_date_time_util,
        )

    def _mark(self, trainee_id: str, status: AttendanceStatus):
        self.attendance_repository.create(
            AttendanceCreateDto(
                session_id="session-x",
                trainee_id=trainee_id,
                status=status,
                marked_by="trainer-1",
            )
        )

    def _evaluate(self, trainee_id: str, overall_score: float):
        self.evaluations_repository.create(
            EvaluationCreateDto(
                trainee_id=trainee_id,
                programme_id="prog-1",
                evaluator_id="trainer-1",
                evaluator_role=EvaluatorRole.TRAINER,
                scores=EvaluationScores(
                    participation=4,
                    understanding=4,
                    application=4,
                    teamwork=4,
                    punctuality=4,
                ),
                overall_score=overall_score,
                comments="",
            )
        )


class TestDashboardStatsService(DashboardStatsTestLib):
    def test_admin_stats_from_seed(self):
        stats = self.service.get_admin_stats()

        self.assertEqual(
            stats,
            AdminStatsDto(
                total_users=10,
                total_trainees=5,
                total_trainers=2,
                total_mentors=2,
                active_programmes=2,
                completed_programmes=1,
                upcoming_programmes=2,
                average_attendance=78,
            ),
        )

    def test_trainer_stats_counts_distinct_trainees(self):
        stats = self.service.get_trainer_stats("trainer-2")

        self.assertEqual(
            stats,
            TrainerStatsDto(
                assigned_programmes=2,
                total_trainees=5,
                upcoming_sessions=2,
                materials_uploaded=2,
            ),
        )

    def test_trainer_upcoming_sessions_include_today(self):
        self.mock_date_time_util.today_iso_date.return_value = "2024-02-12"

        stats = self.service.get_trainer_stats("trainer-1")

        self.assertEqual(stats.assigned_programmes, 3)
        self.assertEqual(stats.total_trainees, 3)
        self.assertEqual(stats.upcoming_sessions, 2)
        self.assertEqual(stats.materials_uploaded, 2)

    def test_trainer_without_programmes(self):
        stats = self.service.get_trainer_stats("mentor-1")

        self.assertEqual(stats.assigned_programmes, 0)
        self.assertEqual(stats.total_trainees, 0)

    def test_mentor_stats_uses_placeholder_progress(self):
        self.mentorship_assignments_repository.update(
            "mentor-assign-5",
            MentorshipAssignmentPatchDto(status=MentorshipStatus.COMPLETED),
        )

        stats = self.service.get_mentor_stats("mentor-1")

        self.assertEqual(
            stats,
            MentorStatsDto(
                assigned_mentees=3,
                active_mentorships=2,
                notes_submitted=3,
                average_mentee_progress=75,
            ),
        )

    def test_trainee_stats_from_seed(self):
        stats = self.service.get_trainee_stats("trainee-1")

        self.assertEqual(
            stats,
            TraineeStatsDto(
                enrolled_programmes=2,
                completed_programmes=0,
                attendance_rate=67,
                average_performance=92,
                assigned_mentor="Chidi Nwosu",
            ),
        )

    def test_trainee_stats_counts_completed_enrollments(self):
        stats = self.service.get_trainee_stats("trainee-2")

        self.assertEqual(stats.enrolled_programmes, 1)
        self.assertEqual(stats.completed_programmes, 1)
        self.assertEqual(stats.attendance_rate, 50)
        self.assertEqual(stats.average_performance, 72)

    def test_trainee_average_performance_scales_mean(self):
        self._evaluate("trainee-1", 3.6)

        stats = self.service.get_trainee_stats("trainee-1")

        self.assertEqual(stats.average_performance, 82)

    def test_trainee_without_data(self):
        stats = self.service.get_trainee_stats("trainee-unknown")

        self.assertEqual(stats.attendance_rate, 0)
        self.assertEqual(stats.average_performance, 0)
        self.assertIsNone(stats.assigned_mentor)

    def test_trainee_mentor_is_first_active_assignment(self):
        self.mentorship_assignments_repository.update(
            "mentor-assign-3",
            MentorshipAssignmentPatchDto(status=MentorshipStatus.PAUSED),
        )
        self.mentorship_assignments_repository.create(
            MentorshipAssignmentCreateDto(
                mentor_id="mentor-1", trainee_id="trainee-3", programme_id="prog-1"
            )
        )
        self.mentorship_assignments_repository.create(
            MentorshipAssignmentCreateDto(
                mentor_id="mentor-2", trainee_id="trainee-3", programme_id="prog-4"
            )
        )

        stats = self.service.get_trainee_stats("trainee-3")

        self.assertEqual(stats.assigned_mentor, "Chidi Nwosu")

    def test_trainee_mentor_missing_user(self):
        self.users_repository.delete("mentor-2")

        stats = self.service.get_trainee_stats("trainee-3")

        self.assertIsNone(stats.assigned_mentor)

    def test_dashboard_stats_dispatches_on_role(self):
        cases = [
            ("admin-1", AdminStatsDto),
            ("trainer-1", TrainerStatsDto),
            ("mentor-2", MentorStatsDto),
            ("trainee-4", TraineeStatsDto),
        ]
        for user_id, expected_type in cases:
            with self.subTest(user_id=user_id):
                user = self.users_repository.get_by_id(user_id)
                self.assertIsInstance(
                    self.service.get_dashboard_stats(user), expected_type
                )

    def test_stats_are_recomputed_on_every_call(self):
        first = self.service.get_admin_stats()
        self._mark("trainee-5", AttendanceStatus.ABSENT)

        second = self.service.get_admin_stats()

        self.assertEqual(first.average_attendance, 78)
        self.assertEqual(second.average_attendance, 70)


class TestAttendanceRateFormula(DashboardStatsTestLib):
    seed_dataset = {}

    def test_no_records_is_zero(self):
        self.assertEqual(self.service.get_admin_stats().average_attendance, 0)

    def test_late_counts_as_attended(self):
        for status in (
            AttendanceStatus.PRESENT,
            AttendanceStatus.PRESENT,
            AttendanceStatus.ABSENT,
            AttendanceStatus.LATE,
        ):
            self._mark("trainee-1", status)

        self.assertEqual(self.service.get_admin_stats().average_attendance, 75)
        self.assertEqual(
            calculate_attendance_rate(self.attendance_repository.get_all()), 75
        )

    def test_rounds_half_up(self):
        self._mark("trainee-1", AttendanceStatus.PRESENT)
        for _ in range(7):
            self._mark("trainee-1", AttendanceStatus.ABSENT)

        # 1/8 is 12.5%.
        self.assertEqual(self.service.get_trainee_stats("trainee-1").attendance_rate, 13)

    def test_empty_store_counts(self):
        stats = self.service.get_admin_stats()

        self.assertEqual(stats.total_users, 0)
        self.assertEqual(self.entity_store.read_all(StorageCollection.USERS), [])


if __name__ == "__main__":
    main()
