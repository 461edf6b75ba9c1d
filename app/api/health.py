from fastapi import APIRouter
from app.config.settings import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "tts_configured": bool(settings.ELEVENLABS_API_KEY),
    }


ROUTERS = [router]
