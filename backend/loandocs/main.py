import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from loandocs.config import settings
from loandocs.api.routes import health, schedules, disclosures, funds, documents, terms


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    yield


app = FastAPI(title="Loan Documents Engine", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(schedules.router, prefix="/api")
app.include_router(disclosures.router, prefix="/api")
app.include_router(funds.router, prefix="/api")
app.include_router(documents.router, prefix="/api")
app.include_router(terms.router, prefix="/api")
