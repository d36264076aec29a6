import os
from dtmms.common.logger import get_logger
from dtmms.utils.retry_utils import RetryUtils
from dtmms.common.redis_client import RedisClient
from dtmms.utils.date_time_util import DateTimeUtil
from dtmms.common.entity_store import EntityStore
from dtmms.common.constants import DEFAULT_STORAGE_NAMESPACE
from dtmms.common.environment_constants import STORAGE_NAMESPACE
from dtmms.repository.users_repository import UsersRepository
from dtmms.repository.programmes_repository import ProgrammesRepository
from dtmms.repository.sessions_repository import SessionsRepository
from dtmms.repository.enrollments_repository import EnrollmentsRepository
from dtmms.repository.attendance_repository import AttendanceRepository
from dtmms.repository.mentorship_assignments_repository import (
    MentorshipAssignmentsRepository,
)
from dtmms.repository.mentorship_notes_repository import MentorshipNotesRepository
from dtmms.repository.evaluations_repository import EvaluationsRepository
from dtmms.repository.materials_repository import MaterialsRepository
from dtmms.repository.messages_repository import MessagesRepository
from dtmms.repository.notifications_repository import NotificationsRepository
from dtmms.authentication.authentication_service import AuthenticationService
from dtmms.dashboard.dashboard_stats_service import DashboardStatsService
from dtmms.dashboard.report_service import ReportService
from dtmms.attendance.attendance_service import AttendanceService
from dtmms.messaging.messaging_service import MessagingService


class AppDependencyBuilder:
    """
    A builder class responsible for constructing every store, repository and
    service used by the dashboard.

    Building connects to Redis and seeds the store if it has never been
    initialized.

    Example:
        builder = AppDependencyBuilder()
        stats = builder.dashboard_stats_service.get_admin_stats()
    """

    def __init__(self):
        namespace = os.getenv(STORAGE_NAMESPACE, DEFAULT_STORAGE_NAMESPACE)

        self.logger = get_logger()
        self.retry_utils = RetryUtils()
        self.redis_client = RedisClient(
            logger=self.logger,
            retry_utils=self.retry_utils,
        ).get_redis_client()
        self.date_time_util = DateTimeUtil(logger=self.logger)
        self.entity_store = EntityStore(
            logger=self.logger,
            redis_client=self.redis_client,
            retry_utils=self.retry_utils,
            namespace=namespace,
        )

        repository_args = dict(
            logger=self.logger,
            entity_store=self.entity_store,
            date_time_util=self.date_time_util,
        )
        self.users_repository = UsersRepository(**repository_args)
        self.programmes_repository = ProgrammesRepository(**repository_args)
        self.sessions_repository = SessionsRepository(**repository_args)
        self.enrollments_repository = EnrollmentsRepository(
            **repository_args, programmes_repository=self.programmes_repository
        )
        self.attendance_repository = AttendanceRepository(**repository_args)
        self.mentorship_assignments_repository = MentorshipAssignmentsRepository(
            **repository_args
        )
        self.mentorship_notes_repository = MentorshipNotesRepository(
            **repository_args
        )
        self.evaluations_repository = EvaluationsRepository(**repository_args)
        self.materials_repository = MaterialsRepository(**repository_args)
        self.messages_repository = MessagesRepository(**repository_args)
        self.notifications_repository = NotificationsRepository(**repository_args)

        self.authentication_service = AuthenticationService(
            logger=self.logger,
            entity_store=self.entity_store,
            users_repository=self.users_repository,
        )
        self.dashboard_stats_service = DashboardStatsService(
            logger=self.logger,
            users_repository=self.users_repository,
            programmes_repository=self.programmes_repository,
            sessions_repository=self.sessions_repository,
            enrollments_repository=self.enrollments_repository,
            attendance_repository=self.attendance_repository,
            mentorship_assignments_repository=self.mentorship_assignments_repository,
            mentorship_notes_repository=self.mentorship_notes_repository,
            evaluations_repository=self.evaluations_repository,
            materials_repository=self.materials_repository,
            date_time_util=self.date_time_util,
        )
        self.report_service = ReportService(
            logger=self.logger,
            users_repository=self.users_repository,
            programmes_repository=self.programmes_repository,
            sessions_repository=self.sessions_repository,
            enrollments_repository=self.enrollments_repository,
            attendance_repository=self.attendance_repository,
            evaluations_repository=self.evaluations_repository,
        )
        self.attendance_service = AttendanceService(
            logger=self.logger,
            users_repository=self.users_repository,
            sessions_repository=self.sessions_repository,
            enrollments_repository=self.enrollments_repository,
            attendance_repository=self.attendance_repository,
        )
        self.messaging_service = MessagingService(
            logger=self.logger,
            messages_repository=self.messages_repository,
            notifications_repository=self.notifications_repository,
        )

        self.entity_store.initialize_if_absent()
