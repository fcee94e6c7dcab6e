"""
Smart Contract Deployment Script
Deploys the YieldXNetwork contract and prints its address
"""

import sys
from loguru import logger

from blockchain.toolkit import DeploymentToolkit
from utils.config import DeployConfig
from utils.logger import setup_logging


CONTRACT_NAME = "YieldXNetwork"


def deploy_contract(toolkit) -> str:
    """
    Deploy YieldXNetwork with no constructor arguments

    Args:
        toolkit: Object exposing get_contract_factory(name)

    Returns:
        Deployed contract address
    """
    factory = toolkit.get_contract_factory(CONTRACT_NAME)
    contract = factory.deploy()

    contract.deployed()

    print(f"{CONTRACT_NAME} contract deployed to: {contract.address}")
    return contract.address


def main(toolkit=None) -> int:
    """
    Run one deployment

    Returns:
        Process exit code: 0 on success, 1 on any failure
    """
    setup_logging()

    try:
        if toolkit is None:
            config = DeployConfig.from_env()
            setup_logging(config.log_level, config.log_file)
            toolkit = DeploymentToolkit(config)

        deploy_contract(toolkit)

    except Exception as e:
        logger.opt(exception=e).error(f"Deployment failed: {e!r}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
