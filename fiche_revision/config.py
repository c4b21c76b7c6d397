from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

# UI label -> length option understood by summarize()
LENGTH_OPTIONS: Dict[str, Optional[str]] = {
    "Standard": None,
    "Courte": "short",
    "Moyenne": "medium",
    "Longue": "long",
}

@dataclass(frozen=True)
class AppConfig:
    log_level: str = "INFO"
    max_upload_mb: int = 20

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

def load_config(env: Optional[Mapping[str, str]] = None) -> AppConfig:
    env = os.environ if env is None else env
    level = env.get("FICHE_LOG_LEVEL", "INFO").upper()
    try:
        max_mb = int(env.get("FICHE_MAX_UPLOAD_MB", "20"))
    except ValueError:
        raise ValueError(f"FICHE_MAX_UPLOAD_MB must be an integer, got {env.get('FICHE_MAX_UPLOAD_MB')!r}")
    return AppConfig(log_level=level, max_upload_mb=max_mb)

def configure_logging(cfg: AppConfig) -> None:
    # basicConfig is a no-op once the root logger has handlers (Streamlit reruns)
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
