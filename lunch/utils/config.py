import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DB_PATH_ENV = "LUNCH_DB_PATH"
LOG_LEVEL_ENV = "LUNCH_LOG_LEVEL"


def load_env():
    # load .env from the ROOT of the repo
    env_path = Path(__file__).resolve().parents[2] / ".env"
    load_dotenv(env_path)
    return os.getenv


@dataclass(frozen=True)
class Settings:
    db_path: str = "lunch.db"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        getenv = load_env()
        return cls(
            db_path=getenv(DB_PATH_ENV) or cls.db_path,
            log_level=(getenv(LOG_LEVEL_ENV) or cls.log_level).upper(),
        )
