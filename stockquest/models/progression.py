"""Progression data model."""

from pydantic import BaseModel, Field

EXPERIENCE_PER_LEVEL = 100


def level_for(experience: int) -> int:
    """Level reached with the given experience."""
    return experience // EXPERIENCE_PER_LEVEL + 1


class Progression(BaseModel):
    """Experience points and the level derived from them."""

    experience: int = Field(default=0, ge=0, description="Experience points")

    model_config = {"frozen": True}

    @property
    def level(self) -> int:
        return level_for(self.experience)

    @property
    def level_progress(self) -> int:
        """Experience earned towards the next level."""
        return self.experience % EXPERIENCE_PER_LEVEL
