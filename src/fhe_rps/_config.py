# Area: Shared
"""
fhe_rps._config — Settings
==========================

Settings model, loading (JSON file + .env + environment) and backend
construction.

Precedence, lowest to highest:
    1. Model defaults
    2. JSON config file (if given and present)
    3. Environment variables (a .env file is loaded first)
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ._fhe.backend import HomomorphicBackend
from ._fhe.paillier import DEFAULT_KEY_BITS, PaillierBackend
from ._fhe.shadow import PlaintextShadowBackend

logger = logging.getLogger("fhe_rps.config")

# Environment variable → settings field
ENV_MAPPINGS = {
    "FHE_RPS_BACKEND": "backend",
    "FHE_RPS_PAILLIER_KEY_BITS": "paillier_key_bits",
    "FHE_RPS_CONTRACT_ID": "contract_id",
    "FHE_RPS_PROOF_SECRET": "proof_secret",
    "FHE_RPS_LOG_FILE": "log_file",
    "FHE_RPS_LOG_LEVEL": "log_level",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GameSettings(BaseModel):
    """Runtime settings for a game host."""

    model_config = ConfigDict(extra="forbid")

    backend: Literal["shadow", "paillier"] = "shadow"
    paillier_key_bits: int = Field(default=DEFAULT_KEY_BITS, ge=256)
    contract_id: str = Field(default="fhe-rps", min_length=1)
    proof_secret: Optional[str] = None
    log_file: Optional[str] = None
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}")
        return level

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(
    config_path: Optional[str] = None,
    env_file: Optional[str] = None,
) -> GameSettings:
    """
    Load settings from a JSON file and the environment.

    Args:
        config_path: Optional path to a JSON config file
        env_file: Optional path to a .env file (default: search upwards)

    Returns:
        Validated GameSettings

    Raises:
        ValueError: If the merged settings fail validation
    """
    config: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config = json.load(f)
        else:
            logger.warning(f"Config file not found: {config_path}")

    load_dotenv(env_file)

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    try:
        return GameSettings(**config)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def build_backend(settings: GameSettings) -> HomomorphicBackend:
    """Instantiate the homomorphic backend named by the settings."""
    secret = settings.proof_secret.encode() if settings.proof_secret else None
    if settings.backend == "paillier":
        return PaillierBackend(
            key_bits=settings.paillier_key_bits,
            contract_id=settings.contract_id,
            proof_secret=secret,
        )
    return PlaintextShadowBackend(contract_id=settings.contract_id, proof_secret=secret)
