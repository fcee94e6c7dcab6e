"""
Deployment Signer
Selects the account that pays for and signs the deployment
"""

from typing import Dict
from web3 import Web3
from eth_account import Account
from loguru import logger

from .errors import DeploymentError


class Signer:
    """
    Deployment account, one of:
    - Local: private key held in process, transactions signed with eth-account
    - Node-managed: first unlocked account of the connected node
    """

    def __init__(self, address: str, account=None):
        """
        Initialize Signer

        Args:
            address: Account address
            account: eth-account LocalAccount (None for node-managed)
        """
        self.address = Web3.to_checksum_address(address)
        self.account = account

    @classmethod
    def from_private_key(cls, private_key: str) -> "Signer":
        try:
            account = Account.from_key(private_key)
        except Exception as e:
            raise DeploymentError(f"Invalid DEPLOYER_PRIVATE_KEY: {e}") from e

        logger.info(f"Deployer account (local key): {account.address}")
        return cls(account.address, account)

    @classmethod
    def from_node(cls, w3: Web3) -> "Signer":
        try:
            accounts = w3.eth.accounts
        except Exception as e:
            raise DeploymentError(f"Could not list node accounts: {e}") from e

        if not accounts:
            raise DeploymentError(
                "Node exposes no unlocked accounts; set DEPLOYER_PRIVATE_KEY"
            )

        logger.info(f"Deployer account (node-managed): {accounts[0]}")
        return cls(accounts[0])

    @classmethod
    def from_config(cls, w3: Web3, config) -> "Signer":
        if config.private_key:
            return cls.from_private_key(config.private_key)
        return cls.from_node(w3)

    @property
    def is_local(self) -> bool:
        return self.account is not None

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the local key

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        if not self.is_local:
            raise DeploymentError("Node-managed accounts are signed by the node")

        return self.account.sign_transaction(transaction)
