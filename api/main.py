from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from businesses import router as businesses_router
from categories import router as categories_router
from core import db, log, settings
from ingestion import router as ingestion_router

@asynccontextmanager
async def lifespan(_: FastAPI):
    log.configure_logging()
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Pulse Directory API", lifespan=lifespan)

# Allow the frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Ingestion first: its literal /api/businesses/* paths must win over /{business_id}.
app.include_router(ingestion_router.router, tags=["ingestion"])
app.include_router(businesses_router.router, tags=["businesses"])
app.include_router(categories_router.router, tags=["categories"])
