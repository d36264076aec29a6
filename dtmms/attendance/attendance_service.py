from dtmms.common.training_enums import AttendanceStatus, EnrollmentStatus
from dtmms.dto.attendance_dto import AttendanceCreateDto, AttendancePatchDto
from dtmms.entity.attendance_entity import AttendanceEntity
from dtmms.entity.users_entity import UsersEntity


class AttendanceService:
    """Attendance marking for a single session."""

    def __init__(
        self,
        logger,
        users_repository,
        sessions_repository,
        enrollments_repository,
        attendance_repository,
    ):
        self.logger = logger
        self.users_repository = users_repository
        self.sessions_repository = sessions_repository
        self.enrollments_repository = enrollments_repository
        self.attendance_repository = attendance_repository

    def get_session_roster(self, session_id: str) -> list[UsersEntity]:
        """
        List the trainees expected at a session.

        These are the users actively enrolled in the session's programme, in
        enrollment order and without duplicates. Enrollments pointing to a
        missing user are skipped.

        Args:
            session_id (str): The session to list trainees for.

        Returns:
            list[UsersEntity]: The roster, empty if the session does not exist.
        """
        session = self.sessions_repository.get_by_id(session_id)
        if session is None:
            self.logger.warning(f"Session {session_id} not found.")
            return []

        trainee_ids = dict.fromkeys(
            enrollment.trainee_id
            for enrollment in self.enrollments_repository.get_by_programme_id(
                session.programme_id
            )
            if enrollment.status == EnrollmentStatus.ACTIVE
        )
        users_by_id = {user.id: user for user in self.users_repository.get_all()}
        return [users_by_id[tid] for tid in trainee_ids if tid in users_by_id]

    def mark_attendance(
        self,
        session_id: str,
        trainee_id: str,
        status: AttendanceStatus,
        marked_by: str,
        notes: str | None = None,
    ) -> AttendanceEntity:
        """
        Record or correct a trainee's attendance at a session.

        If a record already exists for this session and trainee, the first one
        has its status and notes replaced; markedBy and markedAt keep their
        original values. Otherwise a new record is created.

        Args:
            session_id (str): The session attended.
            trainee_id (str): The trainee being marked.
            status (AttendanceStatus): The attendance outcome.
            marked_by (str): The id of the user marking attendance.
            notes (str | None): Optional remark; None clears existing notes.

        Returns:
            AttendanceEntity: The updated or created record.
        """
        existing = next(
            (
                record
                for record in self.attendance_repository.get_by_session_id(session_id)
                if record.trainee_id == trainee_id
            ),
            None,
        )
        if existing is not None:
            updated = self.attendance_repository.update(
                existing.id, AttendancePatchDto(status=status, notes=notes)
            )
            if updated is not None:
                return updated

        return self.attendance_repository.create(
            AttendanceCreateDto(
                session_id=session_id,
                trainee_id=trainee_id,
                status=status,
                marked_by=marked_by,
                notes=notes,
            )
        )
