"""
Deterministic demo goals for demo mode.

- 6 goals across the three buckets, dated relative to the seeding day.
- Known cluster: "Emergency fund" and "New laptop" are 10 days apart, so they
  merge at the 1-year zoom (30 px apart at 3 px/day).
- Known off-timeline goal: "Retirement cabin" is ~25 years out, beyond the
  10-year zoom but inside 'all'.
"""
from datetime import date, datetime, time, timedelta, timezone

from sqlalchemy.orm import Session

from models import Goal

DEMO_USER_ID = "demo-user"

# (id, title, amount, currency, bucket, days from seeding day)
DEMO_GOALS = [
    ("g-emergency", "Emergency fund", 10000.0, "USD", "safety", 120),
    ("g-laptop", "New laptop", 2000.0, "USD", "growth", 130),
    ("g-health", "Health reserve", 5000.0, "EUR", "safety", 300),
    ("g-house", "House down payment", 60000.0, "USD", "growth", 365 * 4),
    ("g-travel", "Trip around the world", 25000.0, "GBP", "dream", 365 * 7),
    ("g-cabin", "Retirement cabin", 250000.0, "USD", "dream", 365 * 25),
]


def seed_demo_goals(db: Session, today: date | None = None) -> None:
    """Insert the demo goals for DEMO_USER_ID. Idempotent only if table empty."""
    if today is None:
        today = date.today()
    created_at = datetime.combine(today, time.min, tzinfo=timezone.utc)
    for priority, (goal_id, title, amount, currency, bucket, offset) in enumerate(
        DEMO_GOALS, start=1
    ):
        db.add(
            Goal(
                id=goal_id,
                user_id=DEMO_USER_ID,
                title=title,
                description="",
                amount=amount,
                currency=currency,
                bucket=bucket,
                target_date=today + timedelta(days=offset),
                priority=priority,
                created_at=created_at,
            )
        )
    db.commit()
