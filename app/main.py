from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

import uvicorn

from app.core.config import settings
from app.routers import balances, health, query, transactions
from app.utils.ynab_client import YNABClient

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: one pooled YNAB client shared by all requests
    logger.info(f"Opening YNAB client for {settings.YNAB_BASE_URL} (budget {settings.YNAB_BUDGET_ID})")
    app.state.ynab_client = YNABClient.from_settings(settings)
    yield
    # Shutdown
    logger.info("Closing YNAB client...")
    app.state.ynab_client.close()


app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
    lifespan=lifespan
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    max_age=3600,
)

# Root endpoint, also used by the dashboard's "test connection"
@app.get("/")
def root():
    return {"message": f"Welcome to {settings.PROJECT_NAME} API"}


# Register routers
app.include_router(health.router, prefix=settings.API_PREFIX, tags=["Health"])
app.include_router(balances.router, prefix=settings.API_PREFIX, tags=["Balances"])
app.include_router(transactions.router, prefix=settings.API_PREFIX, tags=["Transactions"])
app.include_router(query.router, prefix=settings.API_PREFIX, tags=["Query"])


def run():
    logger.info(f"Listening on {settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
