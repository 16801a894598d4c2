from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional
import logging
import os

import yaml
from pydantic import BaseModel

logger = logging.getLogger(__name__)

# Environment variable holding the path of a YAML config file.
CONFIG_ENV = "BRDOCS_CONFIG"

# What `DocumentValidator.is_valid` does with a non-digit character:
#   raise   -> propagate InvalidFormat
#   invalid -> report the number as invalid (False)
FormatErrorMode = Literal["raise", "invalid"]


# ---- Root config ----
class ValidatorConfig(BaseModel):
    # Numbers like 000.000.000-00 or 111.111.111-11 pass the checksum but are
    # never issued; opt in to rejecting them.
    reject_repeated_digits: bool = False
    format_errors: FormatErrorMode = "raise"


# ---- Loaders ----
def load_config(path: Optional[Path]) -> ValidatorConfig:
    if not path:
        return ValidatorConfig()
    data = yaml.safe_load(Path(path).read_text()) or {}
    logger.debug(f"Loaded validator config from {path}")
    return ValidatorConfig(**data)


def config_from_env() -> ValidatorConfig:
    """
    Load the config named by BRDOCS_CONFIG.
    Falls back to defaults when the variable is unset or empty.
    """
    env = os.getenv(CONFIG_ENV)
    return load_config(Path(env) if env else None)
