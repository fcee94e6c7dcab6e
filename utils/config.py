"""
Deployment Configuration
Loads network, account and confirmation settings from the environment
"""

import math
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional
from dotenv import load_dotenv
from loguru import logger

load_dotenv()


DEFAULT_RPC_URL = "http://127.0.0.1:8545"
DEFAULT_ARTIFACTS_DIR = "artifacts"


@dataclass(frozen=True)
class DeployConfig:
    """
    Settings consumed by the deployment toolkit

    The deployer procedure itself reads none of these; they configure the
    connection, the signing account and confirmation bounds.
    """

    rpc_url: str = DEFAULT_RPC_URL
    private_key: Optional[str] = field(default=None, repr=False)
    artifacts_dir: str = DEFAULT_ARTIFACTS_DIR
    chain_id: Optional[int] = None
    gas_price_gwei: Optional[float] = None
    gas_limit_multiplier: float = 1.2
    confirmation_timeout: float = 120.0
    poll_interval: float = 0.1
    rpc_timeout: float = 30.0
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DeployConfig":
        """
        Build config from environment variables

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            DeployConfig instance
        """
        env = os.environ if environ is None else environ

        config = cls(
            rpc_url=env.get('RPC_URL') or DEFAULT_RPC_URL,
            private_key=env.get('DEPLOYER_PRIVATE_KEY') or None,
            artifacts_dir=env.get('ARTIFACTS_DIR') or DEFAULT_ARTIFACTS_DIR,
            chain_id=_read_number(env, 'CHAIN_ID', int),
            gas_price_gwei=_read_number(env, 'GAS_PRICE_GWEI', float),
            gas_limit_multiplier=_read_number(env, 'GAS_LIMIT_MULTIPLIER', float, 1.2),
            confirmation_timeout=_read_number(env, 'CONFIRMATION_TIMEOUT', float, 120.0),
            poll_interval=_read_number(env, 'POLL_INTERVAL', float, 0.1),
            rpc_timeout=_read_number(env, 'RPC_TIMEOUT', float, 30.0),
            log_level=_read_log_level(env),
            log_file=env.get('LOG_FILE') or None,
        )

        if config.gas_limit_multiplier < 1.0:
            raise ValueError("GAS_LIMIT_MULTIPLIER must be at least 1.0")
        if config.confirmation_timeout <= 0:
            raise ValueError("CONFIRMATION_TIMEOUT must be positive")
        if config.poll_interval <= 0:
            raise ValueError("POLL_INTERVAL must be positive")

        return config


def _read_number(env: Mapping[str, str], name: str, cast, default=None):
    """Parse a numeric variable, naming it in the error when malformed"""
    raw = env.get(name)
    if raw is None or raw.strip() == '':
        return default

    try:
        value = cast(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None

    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {raw!r}")

    return value


def _read_log_level(env: Mapping[str, str]) -> str:
    """Upper-cased LOG_LEVEL, checked against the levels loguru knows"""
    level = (env.get('LOG_LEVEL') or 'INFO').strip().upper()

    try:
        logger.level(level)
    except ValueError:
        raise ValueError(f"LOG_LEVEL must be a known log level, got {level!r}") from None

    return level
