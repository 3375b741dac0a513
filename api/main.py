import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from core import db
from graph import router as graph_router
from items import repository as item_repository
from items import router as items_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        await item_repository.ensure_schema()
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)

app.include_router(items_router.router, tags=["items"])
app.include_router(graph_router.router, tags=["graphql"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "item api"}


def run() -> None:
    import uvicorn

    port_raw = os.environ.get("PORT", "").strip()
    uvicorn.run(
        "main:app",
        host=os.environ.get("HOST", "0.0.0.0").strip() or "0.0.0.0",
        port=int(port_raw) if port_raw.isdigit() else 8010,
        log_level=os.environ.get("LOG_LEVEL", "info").strip().lower() or "info",
    )


if __name__ == "__main__":
    run()
