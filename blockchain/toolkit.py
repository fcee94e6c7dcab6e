"""
Deployment Toolkit
Entry point for resolving contract factories against a configured network
"""

from typing import Optional
from web3 import Web3
from loguru import logger

from utils.config import DeployConfig
from .artifacts import ArtifactStore
from .contract_factory import ContractFactory
from .signer import Signer


class DeploymentToolkit:
    """
    Owns the Web3 connection, the deployer account and the artifact store

    Collaborators not passed in are created on first use, so resolving an
    artifact never opens a connection.
    """

    def __init__(
        self,
        config: Optional[DeployConfig] = None,
        w3: Optional[Web3] = None,
        signer: Optional[Signer] = None,
        artifacts: Optional[ArtifactStore] = None
    ):
        """
        Initialize Deployment Toolkit

        Args:
            config: Deployment settings (defaults to DeployConfig())
            w3: Web3 instance
            signer: Deployer account
            artifacts: Artifact store
        """
        self.config = config or DeployConfig()
        self._w3 = w3
        self._signer = signer
        self.artifacts = artifacts or ArtifactStore(self.config.artifacts_dir)

    @classmethod
    def from_env(cls) -> "DeploymentToolkit":
        return cls(DeployConfig.from_env())

    @property
    def w3(self) -> Web3:
        if self._w3 is None:
            logger.debug(f"Connecting to {self.config.rpc_url}")
            self._w3 = Web3(Web3.HTTPProvider(
                self.config.rpc_url,
                request_kwargs={'timeout': self.config.rpc_timeout}
            ))
        return self._w3

    @property
    def signer(self) -> Signer:
        if self._signer is None:
            self._signer = Signer.from_config(self.w3, self.config)
        return self._signer

    def get_contract_factory(self, name: str) -> ContractFactory:
        """
        Resolve a contract artifact into a deployable factory

        Args:
            name: Contract name or fully qualified name

        Returns:
            ContractFactory
        """
        artifact = self.artifacts.read_artifact(name)
        return ContractFactory(artifact, self)
