"""
Input validation schemas using Pydantic.

Field aliases keep the mini-app's camelCase names (chatId) on the wire.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator

from fitplan.utilities.constants import PROGRAM_WEEKS


class ProgressUpdateInput(BaseModel):
    """Schema for a task completion update."""
    model_config = ConfigDict(populate_by_name=True)

    chat_id: int = Field(..., alias="chatId")
    task: str = Field(..., min_length=1, max_length=100)
    week: int = Field(..., ge=1, le=PROGRAM_WEEKS)
    completed: bool

    @field_validator('task')
    @classmethod
    def strip_task(cls, v):
        """Remove leading/trailing whitespace; the key must stay non-empty."""
        v = v.strip()
        if not v:
            raise ValueError('Task key cannot be empty')
        return v


class EnrollmentInput(BaseModel):
    """Schema for generate/regenerate requests."""
    model_config = ConfigDict(populate_by_name=True)

    chat_id: int = Field(..., alias="chatId")
