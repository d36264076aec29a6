from enum import Enum
from dtmms.common.training_enums import AttendanceStatus

DEFAULT_STORAGE_NAMESPACE = "dtmms"

# Constants for Redis keys
STORAGE_KEY_TEMPLATE = "{namespace}:{slot}"
CURRENT_USER_SLOT = "current_user"
INITIALIZED_SLOT = "initialized"
INITIALIZED_FLAG_VALUE = "true"


class StorageCollection(str, Enum):
    USERS = "users"
    PROGRAMMES = "programmes"
    SESSIONS = "sessions"
    ENROLLMENTS = "enrollments"
    ATTENDANCE = "attendance"
    MENTORSHIPS = "mentorships"
    MENTORSHIP_NOTES = "mentorship_notes"
    EVALUATIONS = "evaluations"
    MATERIALS = "materials"
    MESSAGES = "messages"
    NOTIFICATIONS = "notifications"


# Identifier prefixes. Users are prefixed with their role value instead.
PROGRAMME_ID_PREFIX = "prog"
SESSION_ID_PREFIX = "session"
ENROLLMENT_ID_PREFIX = "enroll"
ATTENDANCE_ID_PREFIX = "att"
MENTORSHIP_ASSIGNMENT_ID_PREFIX = "mentor-assign"
MENTORSHIP_NOTE_ID_PREFIX = "note"
EVALUATION_ID_PREFIX = "eval"
MATERIAL_ID_PREFIX = "mat"
MESSAGE_ID_PREFIX = "msg"
NOTIFICATION_ID_PREFIX = "notif"

# Statuses counted as attended when computing attendance rates.
ATTENDED_STATUSES = frozenset({AttendanceStatus.PRESENT, AttendanceStatus.LATE})

# Maps the 1-5 evaluation scale onto a 0-100 percentage.
PERFORMANCE_PERCENT_SCALE = 20

# Placeholder: not derived from any stored data.
AVERAGE_MENTEE_PROGRESS_PLACEHOLDER = 75

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
REPLY_SUBJECT_TEMPLATE = "Re: {subject}"
