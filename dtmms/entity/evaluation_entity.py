from pydantic import Field
from dtmms.dto.base_dto import BaseDto
from dtmms.entity.base_entity import BaseEntity
from dtmms.common.training_enums import EvaluatorRole


class EvaluationScores(BaseDto):
    participation: int = Field(ge=1, le=5)
    understanding: int = Field(ge=1, le=5)
    application: int = Field(ge=1, le=5)
    teamwork: int = Field(ge=1, le=5)
    punctuality: int = Field(ge=1, le=5)


class EvaluationEntity(BaseEntity):
    trainee_id: str
    programme_id: str
    evaluator_id: str
    evaluator_role: EvaluatorRole
    scores: EvaluationScores
    # Supplied by the caller, not derived from scores.
    overall_score: float
    comments: str
    created_at: str
