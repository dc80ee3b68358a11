"""
Deployer
Factory lookup -> submit -> await confirmation -> report
"""

from typing import Sequence
from loguru import logger

from .exceptions import DeploymentFailure


class Deployer:
    """
    Deploys one contract through a blockchain client

    The client only needs get_contract_factory(name) returning an object with
    an async deploy(*args) whose result has an async deployed() and an address.
    """

    def __init__(self, client):
        """
        Initialize Deployer

        Args:
            client: BlockchainClient (or anything with get_contract_factory)
        """
        self.client = client

    async def deploy(self, artifact_name: str, constructor_args: Sequence) -> str:
        """
        Deploy a contract and wait for it to be mined

        Every call submits a new transaction.

        Args:
            artifact_name: Compiled contract name
            constructor_args: Constructor arguments, in declaration order

        Returns:
            Deployed contract address

        Raises:
            DeploymentFailure: On any failure along the way
        """
        logger.info(f"Deploying {artifact_name}...")

        try:
            factory = self.client.get_contract_factory(artifact_name)

            handle = await factory.deploy(*constructor_args)
            await handle.deployed()

            return handle.address

        except DeploymentFailure:
            raise
        except Exception as e:
            raise DeploymentFailure(f"Deployment of {artifact_name} failed: {e}") from e
