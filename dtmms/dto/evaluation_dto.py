from dtmms.dto.base_dto import BaseDto
from dtmms.common.training_enums import EvaluatorRole
from dtmms.entity.evaluation_entity import EvaluationScores


class EvaluationCreateDto(BaseDto):
    trainee_id: str
    programme_id: str
    evaluator_id: str
    evaluator_role: EvaluatorRole
    scores: EvaluationScores
    overall_score: float
    comments: str


class EvaluationPatchDto(BaseDto):
    """Scores are replaced as a whole; there is no per-dimension merge."""

    scores: EvaluationScores | None = None
    overall_score: float | None = None
    comments: str | None = None
