"""
Contract Factory
Deploys a compiled artifact and tracks the deployment until it is mined
"""

from typing import Dict, Optional
from web3 import Web3
from web3.exceptions import TimeExhausted
from loguru import logger

from .artifacts import ContractArtifact
from .errors import ArtifactResolutionError, ConfirmationError, DeploymentError, DeployerError


class ContractFactory:
    """
    Deployable contract bound to a connection and a signing account

    Built by DeploymentToolkit.get_contract_factory(); the toolkit supplies
    the Web3 instance, the signer and the config lazily, so resolving a
    factory never touches the network.
    """

    def __init__(self, artifact: ContractArtifact, toolkit):
        """
        Initialize Contract Factory

        Args:
            artifact: Resolved contract artifact
            toolkit: DeploymentToolkit providing w3, signer and config
        """
        if not artifact.is_deployable:
            raise ArtifactResolutionError(
                f"Contract {artifact.fully_qualified_name} is abstract and can't be deployed"
            )

        if artifact.needs_linking:
            libraries = sorted(
                f"{source}:{library}"
                for source, names in artifact.link_references.items()
                for library in names
            )
            raise ArtifactResolutionError(
                f"Contract {artifact.fully_qualified_name} must be linked to "
                f"libraries before deployment: {', '.join(libraries)}"
            )

        self.artifact = artifact
        self.toolkit = toolkit

    @property
    def contract_name(self) -> str:
        return self.artifact.contract_name

    def deploy(self, *args) -> "DeployedContract":
        """
        Submit one deployment transaction

        Args:
            *args: Constructor arguments

        Returns:
            DeployedContract handle (unconfirmed)
        """
        logger.info(f"Deploying {self.contract_name}...")

        try:
            w3 = self.toolkit.w3
            signer = self.toolkit.signer
            contract = w3.eth.contract(abi=self.artifact.abi, bytecode=self.artifact.bytecode)
            constructor = contract.constructor(*args)

            if signer.is_local:
                tx_hash = self._send_signed(w3, signer, constructor)
            else:
                tx_hash = constructor.transact(self._node_tx_params(w3, signer))
        except DeployerError:
            raise
        except Exception as e:
            raise DeploymentError(f"Failed to submit {self.contract_name} deployment: {e}") from e

        logger.info(f"Transaction sent: {Web3.to_hex(tx_hash)}")
        return DeployedContract(self, tx_hash)

    def _send_signed(self, w3: Web3, signer, constructor):
        """Build, sign and broadcast the creation transaction locally"""
        config = self.toolkit.config

        nonce = w3.eth.get_transaction_count(signer.address, 'pending')

        gas_estimate = constructor.estimate_gas({'from': signer.address})
        gas_limit = int(gas_estimate * config.gas_limit_multiplier)

        gas_price = self._gas_price(w3)
        chain_id = config.chain_id if config.chain_id is not None else w3.eth.chain_id

        logger.info(f"Gas limit: {gas_limit}")
        logger.info(f"Gas price: {w3.from_wei(gas_price, 'gwei')} gwei")

        transaction = constructor.build_transaction({
            'from': signer.address,
            'nonce': nonce,
            'gas': gas_limit,
            'gasPrice': gas_price,
            'chainId': chain_id
        })

        signed_tx = signer.sign_transaction(transaction)
        return w3.eth.send_raw_transaction(signed_tx.raw_transaction)

    def _node_tx_params(self, w3: Web3, signer) -> Dict:
        params = {'from': signer.address}
        if self.toolkit.config.gas_price_gwei is not None:
            params['gasPrice'] = self._gas_price(w3)
        return params

    def _gas_price(self, w3: Web3) -> int:
        gas_price_gwei = self.toolkit.config.gas_price_gwei
        if gas_price_gwei is not None:
            return w3.to_wei(gas_price_gwei, 'gwei')
        return w3.eth.gas_price


class DeployedContract:
    """
    Handle for a submitted deployment

    The address is known once wait_for_deployment() has seen the receipt.
    """

    def __init__(self, factory: ContractFactory, transaction_hash):
        self.factory = factory
        self.transaction_hash = transaction_hash
        self.receipt = None
        self.address: Optional[str] = None

    def wait_for_deployment(self) -> "DeployedContract":
        """
        Block until the deployment transaction is mined

        Returns:
            self, with receipt and address populated
        """
        if self.receipt is not None:
            return self

        w3 = self.factory.toolkit.w3
        config = self.factory.toolkit.config
        tx_hex = Web3.to_hex(self.transaction_hash)

        logger.info("Waiting for confirmation...")

        try:
            receipt = w3.eth.wait_for_transaction_receipt(
                self.transaction_hash,
                timeout=config.confirmation_timeout,
                poll_latency=config.poll_interval
            )
        except TimeExhausted as e:
            raise ConfirmationError(
                f"Deployment {tx_hex} not confirmed within {config.confirmation_timeout}s"
            ) from e
        except Exception as e:
            raise ConfirmationError(f"Error waiting for deployment {tx_hex}: {e}") from e

        if receipt['status'] != 1:
            raise ConfirmationError(f"Deployment transaction {tx_hex} reverted")

        contract_address = receipt.get('contractAddress')
        if not contract_address:
            raise ConfirmationError(f"Receipt for {tx_hex} has no contract address")

        contract_address = Web3.to_checksum_address(contract_address)

        try:
            code = w3.eth.get_code(contract_address)
        except Exception as e:
            raise ConfirmationError(f"Could not read code at {contract_address}: {e}") from e

        if not code:
            raise ConfirmationError(f"No contract code at {contract_address} after deployment")

        self.receipt = receipt
        self.address = contract_address

        logger.success(f"Contract address: {contract_address}")
        logger.debug(f"Gas used: {receipt.get('gasUsed')}")
        return self

    deployed = wait_for_deployment

    def instance(self):
        """Web3 contract bound to the deployed address"""
        if self.address is None:
            raise ConfirmationError("Deployment has not been confirmed yet")

        return self.factory.toolkit.w3.eth.contract(
            address=self.address,
            abi=self.factory.artifact.abi
        )
