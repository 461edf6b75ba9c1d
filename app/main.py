import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.staticfiles import StaticFiles

from app.api import include_all_routers
from app.common.log_config import setup_logging
from app.config.settings import settings

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Server running on http://localhost:{settings.FASTAPI_PORT}")
    logger.info(f"WebSocket relay: ws://localhost:{settings.FASTAPI_PORT}/ws")
    if not settings.ELEVENLABS_API_KEY:
        logger.warning("⚠️ ELEVENLABS_API_KEY is not set")
    yield
    logger.info("Server shutting down...")


# 앱 생성
app = FastAPI(debug=settings.DEBUG_MODE, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# app/api/* 모듈을 스캔해 라우터 전부 등록
include_all_routers(app)

# 정적 파일 루트 (라우터 등록 이후에 mount 해야 /health, /audio 가 우선)
app.mount("/", StaticFiles(directory=settings.PUBLIC_DIR, html=True), name="public")

app.openapi = lambda: get_openapi(
    title="Swing Voice Coach API",
    version="1.0.0",
    description="실시간 스윙 피드백 음성 릴레이",
    routes=app.routes,
)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.FASTAPI_PORT, reload=True)
