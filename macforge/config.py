import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    key: str
    message: str
    constant_time: bool
    log_path: Optional[str]
    log_password: Optional[str]
    log_salt: Optional[str]

    @property
    def logging_enabled(self) -> bool:
        return bool(self.log_path and self.log_password)


def _flag(value):
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        key=os.getenv("MACFORGE_KEY", "1010"),
        message=os.getenv("MACFORGE_MESSAGE", "010111"),
        constant_time=_flag(os.getenv("MACFORGE_CONSTANT_TIME")),
        log_path=os.getenv("LOG_PATH"),
        log_password=os.getenv("LOG_PASSWORD"),
        log_salt=os.getenv("LOG_SALT"),
    )
