"""Achievement data model."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class Achievement(BaseModel):
    """Runtime state of one catalog achievement."""

    id: str = Field(..., min_length=1, description="Catalog identifier")
    title: str = Field(..., description="Display title")
    description: str = Field(default="", description="What the player has to do")
    icon: str = Field(default="", description="Display icon")
    unlocked: bool = Field(default=False, description="Whether the achievement is earned")
    unlocked_at: Optional[datetime] = Field(default=None, description="When it was earned")
    progress: Optional[int] = Field(default=None, ge=0, description="Progress towards target")
    target: Optional[int] = Field(default=None, ge=0, description="Progress needed to unlock")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _progress_within_target(self) -> "Achievement":
        if self.progress is not None and self.target is not None and self.progress > self.target:
            raise ValueError("progress cannot exceed target")
        return self
