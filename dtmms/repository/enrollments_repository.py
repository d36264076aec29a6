from dtmms.common.constants import ENROLLMENT_ID_PREFIX, StorageCollection
from dtmms.dto.enrollment_dto import EnrollmentCreateDto, EnrollmentPatchDto
from dtmms.entity.enrollment_entity import EnrollmentEntity
from dtmms.repository.base_collection_repository import BaseCollectionRepository


class EnrollmentsRepository(BaseCollectionRepository):
    """
    Repository for trainee enrollments.

    A trainee may hold several enrollments in the same programme; no
    uniqueness check is made.
    """

    collection = StorageCollection.ENROLLMENTS
    entity_class = EnrollmentEntity
    patch_class = EnrollmentPatchDto

    def __init__(self, logger, entity_store, date_time_util, programmes_repository):
        """
        Args:
            logger: The logger instance for logging messages.
            entity_store (EntityStore): The store holding the collection.
            date_time_util (DateTimeUtil): Source of creation timestamps.
            programmes_repository (ProgrammesRepository): Used to bump the
                enrolled counter of the programme on creation.
        """
        super().__init__(logger, entity_store, date_time_util)
        self.programmes_repository = programmes_repository

    def get_by_trainee_id(self, trainee_id: str) -> list[EnrollmentEntity]:
        return self._find_all(lambda enrollment: enrollment.trainee_id == trainee_id)

    def get_by_programme_id(self, programme_id: str) -> list[EnrollmentEntity]:
        return self._find_all(
            lambda enrollment: enrollment.programme_id == programme_id
        )

    def create(self, enrollment: EnrollmentCreateDto) -> EnrollmentEntity:
        """
        Create an enrollment and increment the programme's enrolled count.

        The enrollment is persisted first. If the programme does not exist the
        enrollment is still kept and no counter changes.

        Args:
            enrollment (EnrollmentCreateDto): The trainee, programme and status.

        Returns:
            EnrollmentEntity: The created enrollment.
        """
        created = self._insert(
            {
                **enrollment.model_dump(exclude_none=True),
                "id": self._new_id(ENROLLMENT_ID_PREFIX),
                "enrolled_at": self._now(),
            }
        )
        self.programmes_repository.increment_enrolled_count(created.programme_id)
        return created

    def update(
        self, enrollment_id: str, patch: EnrollmentPatchDto
    ) -> EnrollmentEntity | None:
        """Change an enrollment's status. The programme counter is not touched."""
        return self._update(enrollment_id, patch)
