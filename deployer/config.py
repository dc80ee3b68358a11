"""
Deployment Configuration
Network and signer settings passed explicitly to the deployer
"""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigurationError

DEFAULT_RPC_URL = "http://127.0.0.1:8545"
DEFAULT_ARTIFACTS_DIR = "artifacts"
DEFAULT_POLL_INTERVAL = 2.0


@dataclass(frozen=True)
class DeployConfig:
    """Where to deploy and who signs."""

    rpc_url: str = DEFAULT_RPC_URL
    private_key: Optional[str] = None
    chain_id: Optional[int] = None
    artifacts_dir: str = DEFAULT_ARTIFACTS_DIR
    poll_interval: float = DEFAULT_POLL_INTERVAL

    def __repr__(self) -> str:
        key = "<set>" if self.private_key else None
        return (
            f"DeployConfig(rpc_url={self.rpc_url!r}, private_key={key}, "
            f"chain_id={self.chain_id}, artifacts_dir={self.artifacts_dir!r}, "
            f"poll_interval={self.poll_interval})"
        )

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "DeployConfig":
        """
        Build configuration from environment variables (and .env)

        Args:
            env_file: Explicit .env path (None = nearest .env from the working directory up)

        Returns:
            DeployConfig

        Raises:
            ConfigurationError: If CHAIN_ID or CONFIRMATION_POLL_INTERVAL is invalid
        """
        load_dotenv(env_file or find_dotenv(usecwd=True))

        chain_id = os.getenv('CHAIN_ID')
        poll_interval = os.getenv('CONFIRMATION_POLL_INTERVAL')

        try:
            chain_id = int(chain_id) if chain_id else None
        except ValueError:
            raise ConfigurationError(f"CHAIN_ID must be an integer, got {chain_id!r}")

        try:
            poll_interval = float(poll_interval) if poll_interval else DEFAULT_POLL_INTERVAL
        except ValueError:
            raise ConfigurationError(
                f"CONFIRMATION_POLL_INTERVAL must be a number, got {poll_interval!r}"
            )

        if poll_interval <= 0:
            raise ConfigurationError("CONFIRMATION_POLL_INTERVAL must be positive")

        return cls(
            rpc_url=os.getenv('RPC_URL') or DEFAULT_RPC_URL,
            private_key=os.getenv('DEPLOYER_PRIVATE_KEY') or None,
            chain_id=chain_id,
            artifacts_dir=os.getenv('ARTIFACTS_DIR') or DEFAULT_ARTIFACTS_DIR,
            poll_interval=poll_interval,
        )
