from dtmms.common.training_enums import AttendanceStatus
from dtmms.dashboard.dashboard_stats_service import calculate_attendance_rate
from dtmms.dto.report_dto import (
    AttendanceReportDto,
    PerformanceReportDto,
    ProgrammePerformanceDto,
    TraineeAttendanceDto,
)
from dtmms.utils.number_util import round_half_up


class ReportService:
    """Builds attendance and performance reports."""

    def __init__(
        self,
        logger,
        users_repository,
        programmes_repository,
        sessions_repository,
        enrollments_repository,
        attendance_repository,
        evaluations_repository,
    ):
        self.logger = logger
        self.users_repository = users_repository
        self.programmes_repository = programmes_repository
        self.sessions_repository = sessions_repository
        self.enrollments_repository = enrollments_repository
        self.attendance_repository = attendance_repository
        self.evaluations_repository = evaluations_repository

    def get_attendance_report(self, programme_id: str) -> AttendanceReportDto | None:
        """
        Build the attendance report of one programme.

        Only attendance records of the programme's sessions are counted. Each
        enrolled trainee appears once, in enrollment order; trainees whose
        user record is missing are listed with their id as name.

        Args:
            programme_id (str): The programme to report on.

        Returns:
            AttendanceReportDto | None: The report, or None if the programme
                does not exist.
        """
        programme = self.programmes_repository.get_by_id(programme_id)
        if programme is None:
            self.logger.warning(f"Programme {programme_id} not found for report.")
            return None

        session_ids = {
            session.id
            for session in self.sessions_repository.get_by_programme_id(programme_id)
        }
        records = [
            record
            for record in self.attendance_repository.get_all()
            if record.session_id in session_ids
        ]

        trainee_ids = list(
            dict.fromkeys(
                enrollment.trainee_id
                for enrollment in self.enrollments_repository.get_by_programme_id(
                    programme_id
                )
            )
        )
        trainee_stats = []
        for trainee_id in trainee_ids:
            trainee_records = [r for r in records if r.trainee_id == trainee_id]
            trainee = self.users_repository.get_by_id(trainee_id)
            trainee_stats.append(
                TraineeAttendanceDto(
                    trainee_id=trainee_id,
                    trainee_name=trainee.display_name if trainee else trainee_id,
                    present=self._count(trainee_records, AttendanceStatus.PRESENT),
                    absent=self._count(trainee_records, AttendanceStatus.ABSENT),
                    late=self._count(trainee_records, AttendanceStatus.LATE),
                    attendance_rate=calculate_attendance_rate(trainee_records),
                )
            )

        return AttendanceReportDto(
            programme_id=programme.id,
            programme_name=programme.title,
            total_sessions=len(session_ids),
            average_attendance=calculate_attendance_rate(records),
            trainee_stats=trainee_stats,
        )

    def get_performance_report(self, trainee_id: str) -> PerformanceReportDto | None:
        """
        Build the performance report of one trainee.

        Evaluations are grouped by programme in order of first appearance.
        Averages are means of overallScore rounded half-up to one decimal.

        Args:
            trainee_id (str): The trainee to report on.

        Returns:
            PerformanceReportDto | None: The report, or None if the trainee
                does not exist.
        """
        trainee = self.users_repository.get_by_id(trainee_id)
        if trainee is None:
            self.logger.warning(f"Trainee {trainee_id} not found for report.")
            return None

        evaluations = self.evaluations_repository.get_by_trainee_id(trainee_id)
        grouped = {}
        for evaluation in evaluations:
            grouped.setdefault(evaluation.programme_id, []).append(evaluation)

        programmes = []
        for programme_id, programme_evaluations in grouped.items():
            programme = self.programmes_repository.get_by_id(programme_id)
            programmes.append(
                ProgrammePerformanceDto(
                    programme_id=programme_id,
                    programme_name=programme.title if programme else programme_id,
                    average_score=self._mean_score(programme_evaluations),
                    evaluations=programme_evaluations,
                )
            )

        return PerformanceReportDto(
            trainee_id=trainee.id,
            trainee_name=trainee.display_name,
            programmes=programmes,
            overall_average=self._mean_score(evaluations),
        )

    @staticmethod
    def _count(records, status: AttendanceStatus) -> int:
        return sum(1 for record in records if record.status == status)

    @staticmethod
    def _mean_score(evaluations) -> float:
        if not evaluations:
            return 0.0
        mean = sum(e.overall_score for e in evaluations) / len(evaluations)
        return round_half_up(mean, 1)
