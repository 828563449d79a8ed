"""
Bot configuration — a JSON file holding the golden key and command table.
"""

import json
from pathlib import Path
from typing import Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from funpay_chat.dispatcher import DEFAULT_POLL_INTERVAL_S
from funpay_chat.errors import ConfigError
from funpay_chat.tracker import DEFAULT_IGNORED_AUTHOR
from funpay_chat.transport.http import DEFAULT_BASE_URL

DEFAULT_CONFIG_FILE = Path("config.json")


class BotConfig(BaseModel):
    golden_key: str
    commands: dict[str, str] = Field(default_factory=dict)
    ignored_author: str = DEFAULT_IGNORED_AUTHOR
    poll_interval: float = Field(default=DEFAULT_POLL_INTERVAL_S, gt=0)
    base_url: str = DEFAULT_BASE_URL

    model_config = {"frozen": True}

    @field_validator("golden_key")
    @classmethod
    def _key_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("golden_key must not be empty")
        return v


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_FILE) -> BotConfig:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    try:
        return BotConfig.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}", details={"errors": e.errors()}) from e


def save_config(config: BotConfig, path: Union[str, Path] = DEFAULT_CONFIG_FILE) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.model_dump(), indent=2, ensure_ascii=False), encoding="utf-8")
