import argparse
import asyncio
import logging

from app.client.capture import CaptureClient, open_camera
from app.client.player import AudioPlayer
from app.client.relay_client import RelayClient
from app.common.log_config import setup_logging
from app.config.settings import settings
from app.domain.pose.estimator import PoseEstimator
from app.domain.swing.countdown import CountdownGate
from app.domain.swing.detector import SwingDetector

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Webcam -> pose -> swing feedback -> voice")
    ap.add_argument("--server", default=settings.SERVER_URL, help="relay server URL")
    ap.add_argument("--camera", type=int, default=settings.CAMERA_INDEX, help="camera index")
    ap.add_argument("--interval-ms", type=int, default=settings.FRAME_INTERVAL_MS)
    ap.add_argument(
        "--completion-mode",
        choices=["every_frame", "on_transition"],
        default=settings.SWING_COMPLETION_MODE,
    )
    ap.add_argument("--no-audio", action="store_true", help="skip voice playback")
    return ap


async def run_client(args: argparse.Namespace) -> None:
    player = None
    if not args.no_audio:
        player = AudioPlayer(
            server_url=args.server,
            cache_dir=settings.CLIENT_AUDIO_DIR,
            command=settings.AUDIO_PLAYER_CMD,
        )

    client = CaptureClient(
        camera=open_camera(args.camera),
        estimator=PoseEstimator(),
        detector=SwingDetector(completion_mode=args.completion_mode),
        gate=CountdownGate(
            ticks=settings.COUNTDOWN_TICKS,
            interval_s=settings.COUNTDOWN_INTERVAL_S,
        ),
        relay=RelayClient(args.server, on_feedback=player.play if player else None),
        frame_interval_ms=args.interval_ms,
    )
    logger.info("✅ Pose model loaded, webcam is ready!")
    await client.run()


def main() -> None:
    setup_logging()
    args = build_parser().parse_args()
    try:
        asyncio.run(run_client(args))
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    except OSError as e:
        logger.error(f"❌ Cannot reach feedback relay at {args.server}: {e}")


if __name__ == "__main__":
    main()
