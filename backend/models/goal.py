from datetime import date, datetime
from typing import get_args

from sqlalchemy import CheckConstraint, Date, DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base
from schemas.goal import Bucket, Currency


def _in_values(column: str, values: tuple[str, ...]) -> str:
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{column} IN ({quoted})"


class Goal(Base):
    __tablename__ = "goal"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    bucket: Mapped[str] = mapped_column(String(16), index=True, nullable=False)
    target_date: Mapped[date] = mapped_column(Date, index=True, nullable=False)
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    # Rows must stay readable as schemas.goal.GoalIn
    __table_args__ = (
        Index("ix_goal_user_target", "user_id", "target_date"),
        CheckConstraint(_in_values("bucket", get_args(Bucket)), name="ck_goal_bucket"),
        CheckConstraint(_in_values("currency", get_args(Currency)), name="ck_goal_currency"),
        CheckConstraint("amount >= 0", name="ck_goal_amount"),
        CheckConstraint("id <> ''", name="ck_goal_id"),
    )
