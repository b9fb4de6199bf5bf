from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import select

from core.config import DEMO_MODE, LOG_LEVEL
from core.logging_config import configure_logging
from db.base import Base
from db.session import SessionLocal, engine
from models import Goal
from routers.timeline import router as timeline_router

configure_logging(LOG_LEVEL)

app = FastAPI(title="Goal Timeline API")


@app.on_event("startup")
def startup() -> None:
    if not DEMO_MODE:
        return
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.scalar(select(Goal.id).limit(1)) is None:
            from core.mock_data import seed_demo_goals

            seed_demo_goals(db)
    finally:
        db.close()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(timeline_router, prefix="/timeline")


@app.get("/healthz")
def healthz():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
