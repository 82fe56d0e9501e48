"""
Effort-related schemas.

Pydantic models for the user-tunable effort parameters.
"""

from pydantic import BaseModel, ConfigDict, Field

from trailsplit.shared.constants import (
    DEFAULT_BACKPACK_WEIGHT_KG,
    DEFAULT_FITNESS_LEVEL,
    MAX_FITNESS_LEVEL,
    MIN_FITNESS_LEVEL,
)


class EffortSettings(BaseModel):
    """User effort settings read by every statistics computation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    fitness_level: int = Field(
        default=DEFAULT_FITNESS_LEVEL,
        ge=MIN_FITNESS_LEVEL,
        le=MAX_FITNESS_LEVEL,
        alias="fitnessLevel",
        description="1 (least fit) to 5 (fittest)"
    )
    backpack_weight_kg: float = Field(
        default=DEFAULT_BACKPACK_WEIGHT_KG,
        ge=0,
        alias="backpackWeightKg",
        description="Carried weight in kg"
    )
