from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 3000
    public_dir: str = str(PROJECT_ROOT / "public")
    run_id_policy: Literal["counter", "length"] = "counter"
    log_level: str = "info"

settings = Settings()
