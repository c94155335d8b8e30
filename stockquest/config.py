"""Session configuration for StockQuest.

Settings are read from the ``[session]`` table of
``~/.config/stockquest/config.toml``. A missing file means defaults.
"""

import logging
from decimal import Decimal
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, ValidationError

from stockquest.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "stockquest"
CONFIG_PATH = CONFIG_DIR / "config.toml"


class SessionConfig(BaseModel):
    """Tunable parameters of one simulation session."""

    initial_capital: Decimal = Field(default=Decimal("10000"), gt=0, description="Starting cash")
    tick_interval: float = Field(default=5.0, gt=0, description="Seconds between market ticks")
    seed: Optional[int] = Field(default=None, description="Random seed for the price engine")
    buy_experience: int = Field(default=10, gt=0, description="Experience granted per buy")
    sell_experience: int = Field(default=15, gt=0, description="Experience granted per sell")
    history_limit: int = Field(default=10, gt=0, description="Transactions shown by the history view")

    model_config = {"frozen": True}


def load_config(path: Optional[Path] = None, **overrides) -> SessionConfig:
    """Load the session configuration.

    Args:
        path: Config file to read. Defaults to ``CONFIG_PATH``.
        **overrides: Values that take precedence over the file. ``None``
            values are ignored so CLI options can be passed straight through.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values.
    """
    config_path = path or CONFIG_PATH
    values: dict = {}

    if config_path.exists():
        try:
            data = toml.load(config_path)
        except toml.TomlDecodeError as e:
            raise ConfigError(f"Could not parse {config_path}: {e}") from e
        values.update(data.get("session", {}))
        logger.debug("Loaded configuration from %s", config_path)

    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return SessionConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
