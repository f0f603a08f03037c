from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    database_url: str


def _data_dir() -> Path:
    # 1) env var
    env = os.getenv("MONEYVALUE_DATA_DIR")
    if env and env.strip():
        return Path(env).expanduser()
    # 2) default: backend/data
    # moneyvalue/settings.py -> moneyvalue/ -> backend/
    return Path(__file__).resolve().parents[1] / "data"


@lru_cache
def get_settings() -> Settings:
    data_dir = _data_dir()

    env_url = os.getenv("MONEYVALUE_DATABASE_URL")
    if env_url and env_url.strip():
        database_url = env_url.strip()
    else:
        data_dir.mkdir(parents=True, exist_ok=True)
        database_url = f"sqlite:///{(data_dir / 'moneyvalue.db').as_posix()}"

    return Settings(data_dir=data_dir, database_url=database_url)
