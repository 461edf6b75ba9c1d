from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from app.common.dependencies import get_audio_store
from app.infrastructure.storage.audio_store import AudioStore

router = APIRouter(prefix="/audio", tags=["Audio"])


@router.get("/{filename}")
def get_audio(filename: str, store: AudioStore = Depends(get_audio_store)):
    """생성된 음성 파일 제공"""
    path = store.resolve(filename)
    if path is None:
        raise HTTPException(status_code=404, detail="Audio not found")
    return FileResponse(path, media_type="audio/mpeg")


ROUTERS = [router]
