"""
Configuration

Loads service configuration from defaults, an optional YAML file,
the process environment and an env.config file.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Set

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, Field

from assistant_accounts.security.sanitizer import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT

logger = logging.getLogger("assistant_accounts.config")

DEFAULT_CONFIG_PATH = Path.cwd() / "config" / "assistants.yaml"
DEFAULT_ENV_CONFIG_PATH = Path.cwd().parent / "env.config"


class MongoConfig(BaseModel):
    """Document database connection configuration."""
    uri: str = "mongodb://localhost:27017/topphysics"
    database: str = "topphysics"
    collection: str = "assistants"


class AuthConfig(BaseModel):
    """JWT verification configuration."""
    jwt_secret: str = "topphysics_secret"
    jwt_algorithm: str = "HS256"
    admin_roles: Set[str] = Field(default_factory=lambda: {"admin", "developer"})


class SecurityConfig(BaseModel):
    """Input hardening configuration."""
    max_payload_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1, le=MAX_DEPTH_LIMIT)
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)


class AppConfig(BaseModel):
    """Main configuration model."""
    mongo: MongoConfig = Field(default_factory=MongoConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )


# env key -> (section, field)
ENV_KEYS = {
    "MONGO_URI": ("mongo", "uri"),
    "DB_NAME": ("mongo", "database"),
    "JWT_SECRET": ("auth", "jwt_secret"),
    "JWT_ALGORITHM": ("auth", "jwt_algorithm"),
    "MAX_PAYLOAD_DEPTH": ("security", "max_payload_depth"),
    "BCRYPT_ROUNDS": ("security", "bcrypt_rounds"),
}


def load_env_config(env_path: Optional[Path] = None) -> Dict[str, str]:
    """
    Read KEY=VALUE pairs from an env.config file.

    Blank lines and # comments are skipped and surrounding quotes are
    removed. Returns an empty dict if the file cannot be read.
    """
    if env_path is None:
        env_path = DEFAULT_ENV_CONFIG_PATH

    if not env_path.is_file():
        logger.warning(f"Could not read {env_path}, using process environment as fallback")
        return {}

    try:
        values = dotenv_values(env_path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {env_path}: {e}")
        return {}

    return {k: v for k, v in values.items() if v is not None}


def _apply_env(config_data: dict, env: Dict[str, str]) -> None:
    for key, (section, field) in ENV_KEYS.items():
        value = env.get(key)
        if value:
            config_data.setdefault(section, {})[field] = value


def load_config(
    config_path: Optional[Path] = None,
    env_config_path: Optional[Path] = None,
) -> AppConfig:
    """
    Load configuration.

    Precedence, lowest first: defaults, YAML file, process environment,
    env.config file.
    """
    if config_path is None:
        config_path = Path(os.getenv("ASSISTANTS_CONFIG", DEFAULT_CONFIG_PATH))
    if env_config_path is None:
        env_config_path = Path(os.getenv("ASSISTANTS_ENV_CONFIG", DEFAULT_ENV_CONFIG_PATH))

    config_data = {}

    if config_path.exists():
        with open(config_path) as f:
            config_data = yaml.safe_load(f) or {}

    _apply_env(config_data, dict(os.environ))
    _apply_env(config_data, load_env_config(env_config_path))

    config = AppConfig(**config_data)
    logger.info(f"Using database '{config.mongo.database}' collection '{config.mongo.collection}'")
    return config
