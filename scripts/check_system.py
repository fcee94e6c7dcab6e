"""
System Check Script
Verifies configuration, connection, account and artifact before deploying
"""

import sys
from loguru import logger

from blockchain.toolkit import DeploymentToolkit
from scripts.deploy_contract import CONTRACT_NAME
from utils.config import DeployConfig
from utils.logger import setup_logging


MIN_DEPLOYER_BALANCE_ETH = 0.01


def check_rpc_connection(toolkit: DeploymentToolkit) -> bool:
    """Check the JSON-RPC endpoint answers"""
    logger.info(f"Checking RPC connection ({toolkit.config.rpc_url})...")

    try:
        if not toolkit.w3.is_connected():
            logger.error("  ✗ Connection failed")
            return False

        chain_id = toolkit.w3.eth.chain_id
        block = toolkit.w3.eth.block_number
        logger.success(f"  ✓ Connected (chain {chain_id}, block {block})")
        return True
    except Exception as e:
        logger.error(f"  ✗ {e}")
        return False


def check_deployer_account(toolkit: DeploymentToolkit) -> bool:
    """Check a deployer account is available and funded"""
    logger.info("Checking deployer account...")

    try:
        signer = toolkit.signer
        balance = toolkit.w3.eth.get_balance(signer.address)
        balance_eth = toolkit.w3.from_wei(balance, 'ether')
    except Exception as e:
        logger.error(f"  ✗ {e}")
        return False

    kind = "local key" if signer.is_local else "node-managed"
    logger.info(f"  Deployer: {signer.address} ({kind})")
    logger.info(f"  Balance: {balance_eth:.4f} ETH")

    if balance_eth < MIN_DEPLOYER_BALANCE_ETH:
        logger.warning(f"  ⚠ Balance low (need at least {MIN_DEPLOYER_BALANCE_ETH} ETH)")
        return False

    logger.success("  ✓ Deployer balance sufficient")
    return True


def check_artifact(toolkit: DeploymentToolkit) -> bool:
    """Check the contract artifact resolves to a deployable factory"""
    logger.info(f"Checking {CONTRACT_NAME} artifact...")

    try:
        factory = toolkit.get_contract_factory(CONTRACT_NAME)
    except Exception as e:
        logger.error(f"  ✗ {e}")
        return False

    logger.success(f"  ✓ {factory.artifact.fully_qualified_name}")
    return True


def run_checks(toolkit: DeploymentToolkit) -> int:
    """
    Run every check and summarise

    Returns:
        0 when all checks pass, 1 otherwise
    """
    checks = [
        ("Contract Artifact", check_artifact),
        ("RPC Connection", check_rpc_connection),
        ("Deployer Account", check_deployer_account)
    ]

    results = []

    for name, check_func in checks:
        logger.info("")
        results.append((name, check_func(toolkit)))

    logger.info("")
    logger.info("=" * 70)
    logger.info("Summary")
    logger.info("=" * 70)

    passed = sum(1 for _, result in results if result)
    total = len(results)

    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        logger.info(f"  {status}: {name}")

    logger.info("")
    logger.info(f"Total: {passed}/{total} checks passed")

    if passed == total:
        logger.success("✅ Ready to deploy: python deploy.py")
        return 0

    logger.error("❌ Not ready to deploy - fix issues above")
    return 1


def main() -> int:
    """Run all system checks"""
    setup_logging()

    try:
        config = DeployConfig.from_env()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    setup_logging(config.log_level, config.log_file)

    logger.info("=" * 70)
    logger.info("Deployment System Check")
    logger.info("=" * 70)

    return run_checks(DeploymentToolkit(config))


if __name__ == "__main__":
    sys.exit(main())
