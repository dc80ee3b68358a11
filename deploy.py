"""
SSB Contract Deployment
Deploys the SSB contract and prints its address
"""

import asyncio
import sys
from typing import Optional
from loguru import logger

from blockchain import BlockchainClient
from deployer import Deployer, DeployConfig, SSB_ARTIFACT_NAME, SSB_CONSTRUCTOR_ARGS
from deployer.constants import SUCCESS_LABEL


def configure_logging(log_file: Optional[str] = "data/logs/deploy.log"):
    """Send logs to stderr (INFO) and a rotating file (DEBUG)"""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level="INFO"
    )
    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG"
        )


async def main(client=None, config: Optional[DeployConfig] = None) -> str:
    """
    Deploy SSB and print its address

    Args:
        client: Blockchain client (None = connect using config)
        config: Deployment configuration (None = read from environment)

    Returns:
        Deployed contract address
    """
    if client is None:
        config = config or DeployConfig.from_env()
        logger.debug(f"Using {config!r}")
        client = BlockchainClient.from_config(config)

    deployer = Deployer(client)
    address = await deployer.deploy(SSB_ARTIFACT_NAME, SSB_CONSTRUCTOR_ARGS)

    print(SUCCESS_LABEL, address)
    return address


def run(client=None, config: Optional[DeployConfig] = None, log_file: Optional[str] = "data/logs/deploy.log") -> int:
    """
    Run the deployment and map the outcome to an exit code

    Returns:
        0 on success, 1 on any failure
    """
    configure_logging(log_file)

    try:
        asyncio.run(main(client=client, config=config))
    except Exception as error:
        logger.error(f"Deployment failed: {error}")
        print(f"{type(error).__name__}: {error}", file=sys.stderr)
        return 1

    return 0


def cli():
    """Console script entry point"""
    sys.exit(run())


if __name__ == "__main__":
    cli()
