from dtmms.dto.base_dto import BaseDto


class AdminStatsDto(BaseDto):
    total_users: int
    total_trainees: int
    total_trainers: int
    total_mentors: int
    active_programmes: int
    completed_programmes: int
    upcoming_programmes: int
    average_attendance: int


class TrainerStatsDto(BaseDto):
    assigned_programmes: int
    total_trainees: int
    upcoming_sessions: int
    materials_uploaded: int


class MentorStatsDto(BaseDto):
    assigned_mentees: int
    active_mentorships: int
    notes_submitted: int
    # Fixed placeholder value, see AVERAGE_MENTEE_PROGRESS_PLACEHOLDER.
    average_mentee_progress: int


class TraineeStatsDto(BaseDto):
    enrolled_programmes: int
    completed_programmes: int
    attendance_rate: int
    average_performance: int
    assigned_mentor: str | None = None
