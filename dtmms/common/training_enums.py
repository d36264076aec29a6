from enum import Enum


class ProgrammeStatus(str, Enum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"


class EnrollmentStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    DROPPED = "dropped"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EXCUSED = "excused"


class MentorshipStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"


class MentorshipNoteType(str, Enum):
    PROGRESS = "progress"
    FEEDBACK = "feedback"
    MEETING = "meeting"
    CONCERN = "concern"


class EvaluatorRole(str, Enum):
    TRAINER = "trainer"
    MENTOR = "mentor"


class MaterialType(str, Enum):
    PDF = "pdf"
    VIDEO = "video"
    LINK = "link"
    SLIDES = "slides"
    DOCUMENT = "document"


class NotificationType(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ALERT = "alert"
