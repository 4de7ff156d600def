"""Runtime configuration read from the environment.

| Variable              | Default  | Meaning                                   |
|-----------------------|----------|-------------------------------------------|
| SALONPOS_DATA_DIR     | ./data   | directory holding the JSON data files     |
| SALONPOS_LOCATION     | loc1     | register location until settings say else |
| SALONPOS_TAX_RATE     | 0        | tax percent until settings say otherwise  |
| SALONPOS_LOG_LEVEL    | INFO     | minimum structlog level                   |
| SALONPOS_LOG_JSON     | 0        | 1 renders log lines as JSON               |
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

from salonpos.domain.model.value_objects import parse_percentage

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AppConfig:
    data_dir: Path
    default_location: str = "loc1"
    default_tax_rate: Decimal = Decimal("0")
    log_level: str = "INFO"
    log_json: bool = False

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> AppConfig:
        env = os.environ if environ is None else environ
        return AppConfig(
            data_dir=Path(env.get("SALONPOS_DATA_DIR", "data")).expanduser().resolve(),
            default_location=env.get("SALONPOS_LOCATION", "loc1"),
            default_tax_rate=parse_percentage(env.get("SALONPOS_TAX_RATE", "0")),
            log_level=env.get("SALONPOS_LOG_LEVEL", "INFO").upper(),
            log_json=env.get("SALONPOS_LOG_JSON", "0").lower() in _TRUTHY,
        )
