from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Bucket = Literal["safety", "growth", "dream"]
Currency = Literal["USD", "EUR", "GBP", "JPY", "CAD", "AUD", "CHF", "MXN", "BRL", "UYU"]


class GoalIn(BaseModel):
    """Goal fields read by the timeline layout. Extra fields are ignored."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    amount: float = Field(..., ge=0)
    currency: Currency
    bucket: Bucket
    target_date: date
    created_at: datetime | None = None
