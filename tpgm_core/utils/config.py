from dataclasses import dataclass
import os

@dataclass(frozen=True)
class Settings:
    global_selector: str = os.getenv("TPGM_GLOBAL_SELECTOR", "___global")
    log_level: str = os.getenv("TPGM_LOG_LEVEL", "WARNING")
    log_file: str = os.getenv("TPGM_LOG_FILE", "")

SETTINGS = Settings()
