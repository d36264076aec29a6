from dtmms.common.constants import EVALUATION_ID_PREFIX, StorageCollection
from dtmms.dto.evaluation_dto import EvaluationCreateDto, EvaluationPatchDto
from dtmms.entity.evaluation_entity import EvaluationEntity
from dtmms.repository.base_collection_repository import BaseCollectionRepository


class EvaluationsRepository(BaseCollectionRepository):
    """
    Repository for performance evaluations.

    overallScore is taken as supplied; it is never recomputed from scores.
    """

    collection = StorageCollection.EVALUATIONS
    entity_class = EvaluationEntity
    patch_class = EvaluationPatchDto

    def get_by_trainee_id(self, trainee_id: str) -> list[EvaluationEntity]:
        return self._find_all(lambda evaluation: evaluation.trainee_id == trainee_id)

    def get_by_programme_id(self, programme_id: str) -> list[EvaluationEntity]:
        return self._find_all(
            lambda evaluation: evaluation.programme_id == programme_id
        )

    def create(self, evaluation: EvaluationCreateDto) -> EvaluationEntity:
        return self._insert(
            {
                **evaluation.model_dump(exclude_none=True),
                "id": self._new_id(EVALUATION_ID_PREFIX),
                "created_at": self._now(),
            }
        )

    def update(
        self, evaluation_id: str, patch: EvaluationPatchDto
    ) -> EvaluationEntity | None:
        return self._update(evaluation_id, patch)
