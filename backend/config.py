# config.py
import logging, os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent
load_dotenv(dotenv_path=BASE_DIR.parent / ".env")

DEFAULT_FACTS_PATH = BASE_DIR / "facts.json"
DEFAULT_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:8501"


def _origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass
class Settings:
    facts_path: Path = DEFAULT_FACTS_PATH
    x_token: Optional[str] = None
    allowed_origins: List[str] = field(default_factory=lambda: _origins(DEFAULT_ORIGINS))
    port: int = 8000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            facts_path=Path(os.getenv("FACTS_PATH", str(DEFAULT_FACTS_PATH))),
            x_token=os.getenv("X_TOKEN") or None,
            allowed_origins=_origins(os.getenv("ALLOWED_ORIGINS", DEFAULT_ORIGINS)),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
