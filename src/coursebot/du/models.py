"""
Pydantic models for the intent recognizer.

DSPy uses Pydantic for output validation and type coercion.
"""

from pydantic import BaseModel, Field, field_validator

NONE_INTENT = "None"
MODULE_TYPE_ENTITY = "module_type"


class IntentResult(BaseModel):
    """Top intent and extracted entities for one utterance."""

    top_intent: str = Field(description="Best matching intent label, or 'None'")
    entities: dict[str, str | None] = Field(
        default_factory=dict, description="Extracted values keyed by entity name"
    )
    score: float = Field(default=0.0, description="Confidence of top_intent, clamped to [0, 1]")

    @field_validator("score")
    @classmethod
    def clamp_score(cls, v: float) -> float:
        """Out-of-range model scores are clamped, not rejected."""
        return min(max(v, 0.0), 1.0)

    @classmethod
    def none(cls) -> "IntentResult":
        """Result used when nothing could be recognized."""
        return cls(top_intent=NONE_INTENT, entities={}, score=0.0)


def module_entities(result: IntentResult) -> dict[str, str | None]:
    """Entities the module dialog understands, always with a ``module_type`` key."""
    return {MODULE_TYPE_ENTITY: result.entities.get(MODULE_TYPE_ENTITY) or None}
