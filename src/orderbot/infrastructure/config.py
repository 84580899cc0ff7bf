"""Runtime settings, read from ``ORDERBOT_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_FALSE = {"0", "false", "no", "off"}


def _flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in _FALSE


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    max_transaction_attempts: int = 5
    case_sensitive_ids: bool = True
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def store_file(self) -> Path:
        return self.data_dir / "store.json"

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            data_dir=Path(os.getenv("ORDERBOT_DATA_DIR", str(_DEFAULT_DATA_DIR))),
            max_transaction_attempts=int(
                os.getenv("ORDERBOT_MAX_TRANSACTION_ATTEMPTS", "5")
            ),
            case_sensitive_ids=_flag("ORDERBOT_CASE_SENSITIVE_IDS", True),
            log_level=os.getenv("ORDERBOT_LOG_LEVEL", "INFO").upper(),
            log_json=_flag("ORDERBOT_LOG_JSON", False),
        )
