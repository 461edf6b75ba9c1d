from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# helpers
from app.config.env_utils import env_bool, env_float, env_path, env_list
from app.constants import (
    COUNTDOWN_TICKS,
    COUNTDOWN_INTERVAL_S,
    FRAME_INTERVAL_MS,
    DEFAULT_VOICE_ID,
    DEFAULT_TTS_MODEL_ID,
    DEFAULT_TTS_STABILITY,
    DEFAULT_TTS_SIMILARITY_BOOST,
)


# ─────────────────────────────────────────────────────────
# Project root 탐색
#   - .git / pyproject.toml / requirements.txt 중 하나가 보이는 최상단을 루트로 간주
#   - 실패 시 BASE_DIR 환경변수 사용
# ─────────────────────────────────────────────────────────
def find_project_root() -> Path:
    cur = Path(__file__).resolve()
    for parent in cur.parents:
        if any(
            (parent / m).exists()
            for m in (".git", "pyproject.toml", "requirements.txt")
        ):
            return parent
    env_root = os.getenv("BASE_DIR")
    if env_root:
        return Path(env_root).resolve()
    raise RuntimeError(
        "프로젝트 루트를 찾을 수 없습니다. "
        "루트에 .git/pyproject.toml/requirements.txt 중 하나를 두거나, "
        "환경변수 BASE_DIR을 지정하세요."
    )


ROOT: Path = find_project_root()

# ─────────────────────────────────────────────────────────
# .env 로딩
#   - ENV_FILE 지정 시 우선
#   - 없으면 ROOT/.env.<ENV> → 없으면 ROOT/.env
# ─────────────────────────────────────────────────────────
_DEFAULT_ENV = os.getenv("ENV", "test")
_env_file_candidate = ROOT / f".env.{_DEFAULT_ENV}"
_ENV_FILE = (
    Path(os.getenv("ENV_FILE")).resolve()
    if os.getenv("ENV_FILE")
    else (_env_file_candidate if _env_file_candidate.exists() else (ROOT / ".env"))
)
load_dotenv(dotenv_path=_ENV_FILE, override=False)


class Settings:
    # ── App / Runtime ─────────────────────────────────────
    ENV: str = os.getenv("ENV", _DEFAULT_ENV)
    FASTAPI_PORT: int = int(os.getenv("FASTAPI_PORT", 3000))
    DEBUG_MODE: bool = env_bool("DEBUG_MODE", False)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS = env_list("CORS_ORIGINS", ["*"])

    # ── Base Paths ────────────────────────────────────────
    ROOT: Path = ROOT
    PUBLIC_DIR: Path = env_path("PUBLIC_DIR", ROOT / "public")
    DATA_DIR: Path = env_path("DATA_DIR", ROOT / "data")

    # 생성된 음성 파일 (요청마다 고유 파일명)
    AUDIO_DIR: Path = env_path("AUDIO_DIR", DATA_DIR / "audio")
    AUDIO_URL_PREFIX: str = "/audio"
    AUDIO_RETENTION: int = int(os.getenv("AUDIO_RETENTION", 20))

    # ── ElevenLabs TTS ────────────────────────────────────
    # 필수 시크릿: 없으면 음성 생성은 항상 실패 (로그만 남김)
    ELEVENLABS_API_KEY: Optional[str] = os.getenv("ELEVENLABS_API_KEY")
    ELEVENLABS_BASE_URL: str = os.getenv("ELEVENLABS_BASE_URL", "https://api.elevenlabs.io")
    ELEVENLABS_VOICE_ID: str = os.getenv("ELEVENLABS_VOICE_ID", DEFAULT_VOICE_ID)
    ELEVENLABS_MODEL_ID: str = os.getenv("ELEVENLABS_MODEL_ID", DEFAULT_TTS_MODEL_ID)
    TTS_STABILITY: float = env_float("TTS_STABILITY", DEFAULT_TTS_STABILITY)
    TTS_SIMILARITY_BOOST: float = env_float("TTS_SIMILARITY_BOOST", DEFAULT_TTS_SIMILARITY_BOOST)
    TTS_TIMEOUT_S: float = env_float("TTS_TIMEOUT_S", 30.0)

    # ── Capture client ────────────────────────────────────
    SERVER_URL: str = os.getenv("SERVER_URL", "http://localhost:3000")
    CAMERA_INDEX: int = int(os.getenv("CAMERA_INDEX", 0))
    FRAME_INTERVAL_MS: int = int(os.getenv("FRAME_INTERVAL_MS", FRAME_INTERVAL_MS))
    COUNTDOWN_TICKS: int = int(os.getenv("COUNTDOWN_TICKS", COUNTDOWN_TICKS))
    COUNTDOWN_INTERVAL_S: float = env_float("COUNTDOWN_INTERVAL_S", COUNTDOWN_INTERVAL_S)
    # "every_frame" | "on_transition"
    SWING_COMPLETION_MODE: str = os.getenv("SWING_COMPLETION_MODE", "every_frame")
    CLIENT_AUDIO_DIR: Path = env_path("CLIENT_AUDIO_DIR", DATA_DIR / "client_audio")
    AUDIO_PLAYER_CMD = env_list("AUDIO_PLAYER_CMD", ["ffplay", "-nodisp", "-autoexit", "-loglevel", "quiet"])

    def __init__(self) -> None:
        # 자주 쓰는 디렉토리 존재 보장
        dirs = [
            self.DATA_DIR,
            self.AUDIO_DIR,
            self.PUBLIC_DIR,
        ]
        for d in dirs:
            Path(d).mkdir(parents=True, exist_ok=True)


# 전역 싱글톤처럼 사용
settings = Settings()
