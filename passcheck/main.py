import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(message)s"
)

logger = logging.getLogger(__name__)

SERVICE_NAME = "passcheck"
SERVICE_VERSION = "1.0.0"

app = FastAPI(
    title="Passcheck API",
    version=SERVICE_VERSION,
)

from passcheck.core.config import get_cors_origins
from passcheck.middleware.security import SecurityLoggingMiddleware

app.add_middleware(SecurityLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup():
    from passcheck.services.hasher import ensure_hash_available

    logger.info("Passcheck API starting up")
    # HashUnavailable aborts startup: no analysis can run without SHA-1.
    ensure_hash_available()
    logger.info("Startup completed")


from passcheck.routes.analyze import router as analyze_router

app.include_router(analyze_router)


@app.get("/health")
def health_check():
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


def run():
    import uvicorn

    from passcheck.core.config import Setting, get_setting

    uvicorn.run(
        "passcheck.main:app",
        host=get_setting(Setting.SERVER_HOST),
        port=get_setting(Setting.SERVER_PORT),
    )


if __name__ == "__main__":
    run()
