# pong_client/config.py
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from pong_arena.constants import WIDTH, HEIGHT


@dataclass(frozen=True)
class ClientConfig:
    api_url: str = "http://localhost:5000"
    sound_dir: str = "sounds"
    log_level: str = "INFO"
    width: int = WIDTH
    height: int = HEIGHT
    dash_h: int = 56          # dashboard strip above the field
    timeout: float = 5.0


def load_config() -> ClientConfig:
    load_dotenv(find_dotenv(usecwd=True))  # .env from the working directory
    return ClientConfig(
        api_url=os.getenv("PONG_API_URL", ClientConfig.api_url),
        sound_dir=os.getenv("PONG_SOUND_DIR", ClientConfig.sound_dir),
        log_level=os.getenv("PONG_LOG_LEVEL", ClientConfig.log_level).upper(),
        width=int(os.getenv("PONG_WIDTH", str(ClientConfig.width))),
        height=int(os.getenv("PONG_HEIGHT", str(ClientConfig.height))),
        timeout=float(os.getenv("PONG_API_TIMEOUT", str(ClientConfig.timeout))),
    )
