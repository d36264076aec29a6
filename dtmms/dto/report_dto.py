from dtmms.dto.base_dto import BaseDto
from dtmms.entity.evaluation_entity import EvaluationEntity


class TraineeAttendanceDto(BaseDto):
    trainee_id: str
    trainee_name: str
    present: int
    absent: int
    late: int
    attendance_rate: int


class AttendanceReportDto(BaseDto):
    programme_id: str
    programme_name: str
    total_sessions: int
    average_attendance: int
    trainee_stats: list[TraineeAttendanceDto]


class ProgrammePerformanceDto(BaseDto):
    programme_id: str
    programme_name: str
    average_score: float
    evaluations: list[EvaluationEntity]


class PerformanceReportDto(BaseDto):
    trainee_id: str
    trainee_name: str
    programmes: list[ProgrammePerformanceDto]
    overall_average: float
