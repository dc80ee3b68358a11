"""
Blockchain Client
Owns the network connection and signer, hands out contract factories
"""

from typing import Optional
from web3 import Web3
from eth_account import Account
from loguru import logger

from deployer.config import DeployConfig
from deployer.exceptions import ConfigurationError, DeploymentFailure
from .artifacts import load_artifact
from .contract_factory import ContractFactory


class BlockchainClient:
    """
    Network connection plus signing account for deployments
    """

    def __init__(self, w3: Web3, config: DeployConfig, signer=None):
        """
        Initialize Blockchain Client

        Args:
            w3: Web3 instance
            config: Deployment configuration
            signer: eth_account LocalAccount (None = node's unlocked accounts)
        """
        self.w3 = w3
        self.config = config
        self.signer = signer

    @classmethod
    def from_config(cls, config: DeployConfig) -> "BlockchainClient":
        """
        Connect to the configured RPC endpoint

        Raises:
            ConfigurationError: If the private key is malformed
            DeploymentFailure: If the node is unreachable
        """
        signer = _load_signer(config.private_key) if config.private_key else None

        w3 = Web3(Web3.HTTPProvider(config.rpc_url))

        if not w3.is_connected():
            raise DeploymentFailure(f"Failed to connect to network at {config.rpc_url}")

        logger.info(f"Connected to {config.rpc_url}")
        return cls(w3, config, signer=signer)

    @property
    def signer_address(self) -> Optional[str]:
        """Address deployments are sent from"""
        if self.signer is not None:
            return self.signer.address

        accounts = self.w3.eth.accounts
        return accounts[0] if accounts else None

    def get_contract_factory(self, name: str) -> ContractFactory:
        """
        Get a factory for the named compiled contract

        Args:
            name: Contract name or fully qualified name

        Returns:
            ContractFactory bound to this client's connection and signer

        Raises:
            ArtifactNotFoundError: If the artifact cannot be resolved
        """
        artifact = load_artifact(name, self.config.artifacts_dir)

        return ContractFactory(
            self.w3,
            artifact,
            signer=self.signer,
            sender=self.signer_address,
            chain_id=self.config.chain_id,
            poll_interval=self.config.poll_interval
        )


def _load_signer(private_key: str):
    """Local signing account for a hex private key"""
    try:
        return Account.from_key(private_key)
    except Exception as e:
        # the key itself must not end up in the message
        raise ConfigurationError(
            f"DEPLOYER_PRIVATE_KEY is not a valid private key ({type(e).__name__})"
        ) from None
