"""
Read access to stored goals for the timeline. No writes.
"""
from sqlalchemy import select
from sqlalchemy.orm import Session

from models.goal import Goal
from schemas.goal import GoalIn


def list_goals(db: Session, user_id: str | None = None) -> list[GoalIn]:
    """Return goals ordered by target date, then id. All users when user_id is None."""
    stmt = select(Goal).order_by(Goal.target_date, Goal.id)
    if user_id is not None:
        stmt = stmt.where(Goal.user_id == user_id)
    rows = db.scalars(stmt).all()
    return [
        GoalIn(
            id=row.id,
            title=row.title,
            amount=row.amount,
            currency=row.currency,
            bucket=row.bucket,
            target_date=row.target_date,
            created_at=row.created_at,
        )
        for row in rows
    ]
