from dtmms.common.constants import PROGRAMME_ID_PREFIX, StorageCollection
from dtmms.dto.programme_dto import ProgrammeCreateDto, ProgrammePatchDto
from dtmms.entity.programme_entity import ProgrammeEntity
from dtmms.repository.base_collection_repository import BaseCollectionRepository


class ProgrammesRepository(BaseCollectionRepository):
    collection = StorageCollection.PROGRAMMES
    entity_class = ProgrammeEntity
    patch_class = ProgrammePatchDto

    def get_by_trainer_id(self, trainer_id: str) -> list[ProgrammeEntity]:
        return self._find_all(lambda programme: programme.trainer_id == trainer_id)

    def create(self, programme: ProgrammeCreateDto) -> ProgrammeEntity:
        """
        Create a programme with no enrollments.

        Args:
            programme (ProgrammeCreateDto): The new programme's attributes.

        Returns:
            ProgrammeEntity: The created programme with enrolledCount set to 0.
        """
        return self._insert(
            {
                **programme.model_dump(exclude_none=True),
                "id": self._new_id(PROGRAMME_ID_PREFIX),
                "enrolled_count": 0,
                "created_at": self._now(),
            }
        )

    def update(
        self, programme_id: str, patch: ProgrammePatchDto
    ) -> ProgrammeEntity | None:
        return self._update(programme_id, patch)

    def delete(self, programme_id: str) -> bool:
        return self._delete_by_id(programme_id)

    def increment_enrolled_count(self, programme_id: str) -> ProgrammeEntity | None:
        """
        Add one to a programme's enrolled counter.

        The counter is only ever incremented, never recomputed from the
        enrollment rows.

        Args:
            programme_id (str): The programme to update.

        Returns:
            ProgrammeEntity | None: The updated programme, or None if it does
                not exist.
        """
        records = self._load_records()
        for index, record in enumerate(records):
            if record.get("id") != programme_id:
                continue
            programme = self._to_entity(record)
            programme.enrolled_count += 1
            records[index] = programme.to_record()
            self._save_records(records)
            return programme

        self.logger.warning(
            f"Programme {programme_id} not found, enrolled count not incremented."
        )
        return None
