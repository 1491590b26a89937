from __future__ import annotations

import os
from pathlib import Path
from typing import Optional
import yaml
from pydantic import BaseModel, ConfigDict, Field

# Upper bound on cleaned token length. Guards the checksum loop against
# oversized input; it says nothing about real RUT lengths.
DEFAULT_MAX_LENGTH = 20

# One digit plus one check character.
MIN_LENGTH = 2

CONFIG_ENV_VAR = "CHILERUT_CONFIG"


class RutConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    max_length: int = Field(default=DEFAULT_MAX_LENGTH, ge=MIN_LENGTH)
    group_digits: bool = True  # 12.345.678-5 vs 12345678-5


# ---- Loader ----
def load_config(path: Optional[Path] = None) -> RutConfig:
    if not path:
        path = os.getenv(CONFIG_ENV_VAR) or None
    if not path:
        return RutConfig()
    data = yaml.safe_load(Path(path).read_text()) or {}
    return RutConfig(**data)
