from dtmms.common.constants import (
    ATTENDED_STATUSES,
    AVERAGE_MENTEE_PROGRESS_PLACEHOLDER,
    PERFORMANCE_PERCENT_SCALE,
)
from dtmms.common.training_enums import (
    EnrollmentStatus,
    MentorshipStatus,
    ProgrammeStatus,
)
from dtmms.common.user_role import UserRole
from dtmms.dto.stats_dto import (
    AdminStatsDto,
    MentorStatsDto,
    TraineeStatsDto,
    TrainerStatsDto,
)
from dtmms.entity.attendance_entity import AttendanceEntity
from dtmms.entity.users_entity import UsersEntity
from dtmms.utils.number_util import percentage, round_half_up


def calculate_attendance_rate(records: list[AttendanceEntity]) -> int:
    """
    Percentage of attendance records marked present or late.

    Args:
        records (list[AttendanceEntity]): The records to reduce.

    Returns:
        int: The rate rounded half-up to a whole percent, 0 for no records.
    """
    attended = sum(1 for record in records if record.status in ATTENDED_STATUSES)
    return percentage(attended, len(records))


class DashboardStatsService:
    """
    Computes the per-role dashboard summaries.

    Every call reads the repositories afresh; nothing is cached.
    """

    def __init__(
        self,
        logger,
        users_repository,
        programmes_repository,
        sessions_repository,
        enrollments_repository,
        attendance_repository,
        mentorship_assignments_repository,
        mentorship_notes_repository,
        evaluations_repository,
        materials_repository,
        date_time_util,
    ):
        self.logger = logger
        self.users_repository = users_repository
        self.programmes_repository = programmes_repository
        self.sessions_repository = sessions_repository
        self.enrollments_repository = enrollments_repository
        self.attendance_repository = attendance_repository
        self.mentorship_assignments_repository = mentorship_assignments_repository
        self.mentorship_notes_repository = mentorship_notes_repository
        self.evaluations_repository = evaluations_repository
        self.materials_repository = materials_repository
        self.date_time_util = date_time_util

    def get_dashboard_stats(
        self, user: UsersEntity
    ) -> AdminStatsDto | TrainerStatsDto | MentorStatsDto | TraineeStatsDto:
        """
        Return the summary matching the user's role.

        Args:
            user (UsersEntity): The user whose dashboard is shown.

        Returns:
            The admin, trainer, mentor or trainee stats for that user.
        """
        match user.role:
            case UserRole.ADMIN:
                return self.get_admin_stats()
            case UserRole.TRAINER:
                return self.get_trainer_stats(user.id)
            case UserRole.MENTOR:
                return self.get_mentor_stats(user.id)
            case UserRole.TRAINEE:
                return self.get_trainee_stats(user.id)
            case _:
                raise ValueError(f"Unsupported role: {user.role}")

    def get_admin_stats(self) -> AdminStatsDto:
        users = self.users_repository.get_all()
        programmes = self.programmes_repository.get_all()
        attendance = self.attendance_repository.get_all()

        def count_role(role: UserRole) -> int:
            return sum(1 for user in users if user.role == role)

        def count_status(status: ProgrammeStatus) -> int:
            return sum(1 for programme in programmes if programme.status == status)

        return AdminStatsDto(
            total_users=len(users),
            total_trainees=count_role(UserRole.TRAINEE),
            total_trainers=count_role(UserRole.TRAINER),
            total_mentors=count_role(UserRole.MENTOR),
            active_programmes=count_status(ProgrammeStatus.ONGOING),
            completed_programmes=count_status(ProgrammeStatus.COMPLETED),
            upcoming_programmes=count_status(ProgrammeStatus.UPCOMING),
            average_attendance=calculate_attendance_rate(attendance),
        )

    def get_trainer_stats(self, trainer_id: str) -> TrainerStatsDto:
        """
        Summarize one trainer's programmes, trainees, sessions and materials.

        Trainees are counted once even if enrolled in several of the trainer's
        programmes. Sessions dated today or later count as upcoming; ISO dates
        compare correctly as strings.

        Args:
            trainer_id (str): The trainer's user id.

        Returns:
            TrainerStatsDto: The trainer's dashboard figures.
        """
        programme_ids = {
            programme.id
            for programme in self.programmes_repository.get_by_trainer_id(trainer_id)
        }
        trainee_ids = {
            enrollment.trainee_id
            for enrollment in self.enrollments_repository.get_all()
            if enrollment.programme_id in programme_ids
        }
        today = self.date_time_util.today_iso_date()
        upcoming_sessions = [
            session
            for session in self.sessions_repository.get_by_trainer_id(trainer_id)
            if session.date >= today
        ]
        materials = [
            material
            for material in self.materials_repository.get_all()
            if material.programme_id in programme_ids
        ]

        return TrainerStatsDto(
            assigned_programmes=len(programme_ids),
            total_trainees=len(trainee_ids),
            upcoming_sessions=len(upcoming_sessions),
            materials_uploaded=len(materials),
        )

    def get_mentor_stats(self, mentor_id: str) -> MentorStatsDto:
        assignments = self.mentorship_assignments_repository.get_by_mentor_id(
            mentor_id
        )
        notes = self.mentorship_notes_repository.get_by_mentor_id(mentor_id)

        return MentorStatsDto(
            assigned_mentees=len(assignments),
            active_mentorships=sum(
                1
                for assignment in assignments
                if assignment.status == MentorshipStatus.ACTIVE
            ),
            notes_submitted=len(notes),
            average_mentee_progress=AVERAGE_MENTEE_PROGRESS_PLACEHOLDER,
        )

    def get_trainee_stats(self, trainee_id: str) -> TraineeStatsDto:
        """
        Summarize one trainee's enrollments, attendance, scores and mentor.

        Average performance maps the mean overall score (1-5) to a percentage.
        If several active mentorships exist only the first in stored order is
        reported.

        Args:
            trainee_id (str): The trainee's user id.

        Returns:
            TraineeStatsDto: The trainee's dashboard figures.
        """
        enrollments = self.enrollments_repository.get_by_trainee_id(trainee_id)
        attendance = self.attendance_repository.get_by_trainee_id(trainee_id)
        evaluations = self.evaluations_repository.get_by_trainee_id(trainee_id)

        average_performance = 0
        if evaluations:
            mean_score = sum(e.overall_score for e in evaluations) / len(evaluations)
            average_performance = int(
                round_half_up(mean_score * PERFORMANCE_PERCENT_SCALE)
            )

        return TraineeStatsDto(
            enrolled_programmes=sum(
                1 for e in enrollments if e.status == EnrollmentStatus.ACTIVE
            ),
            completed_programmes=sum(
                1 for e in enrollments if e.status == EnrollmentStatus.COMPLETED
            ),
            attendance_rate=calculate_attendance_rate(attendance),
            average_performance=average_performance,
            assigned_mentor=self._find_active_mentor_name(trainee_id),
        )

    def _find_active_mentor_name(self, trainee_id: str) -> str | None:
        active_assignment = next(
            (
                assignment
                for assignment in self.mentorship_assignments_repository.get_by_trainee_id(
                    trainee_id
                )
                if assignment.status == MentorshipStatus.ACTIVE
            ),
            None,
        )
        if active_assignment is None:
            return None

        mentor = self.users_repository.get_by_id(active_assignment.mentor_id)
        if mentor is None:
            self.logger.warning(
                f"Mentor {active_assignment.mentor_id} of trainee {trainee_id} not found."
            )
            return None
        return mentor.display_name
