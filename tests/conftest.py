"""
Shared fixtures for deployment tests
"""

import json
import sys
import pytest
from unittest.mock import Mock
from loguru import logger
from web3 import Web3

from blockchain.artifacts import ContractArtifact
from utils.config import DeployConfig


DEPLOYER_ADDRESS = '0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266'
CONTRACT_ADDRESS = '0x5fbdb2315678afecb367f032d93f642f64180aa3'
TX_HASH = b'\xab' * 32

YIELDX_ABI = [
    {
        "inputs": [],
        "stateMutability": "nonpayable",
        "type": "constructor"
    },
    {
        "inputs": [],
        "name": "owner",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    }
]


@pytest.fixture(autouse=True)
def reset_logging():
    """Point loguru at the current stderr so no sink outlives its test"""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")
    yield
    logger.remove()


def write_artifact(root, source_name, contract_name, bytecode='0x6080604052', link_references=None):
    """Write a Hardhat-style artifact (plus its debug file) under root"""
    directory = root / source_name
    directory.mkdir(parents=True, exist_ok=True)

    artifact = {
        "_format": "hh-sol-artifact-1",
        "contractName": contract_name,
        "sourceName": source_name,
        "abi": YIELDX_ABI,
        "bytecode": bytecode,
        "deployedBytecode": bytecode,
        "linkReferences": link_references or {},
        "deployedLinkReferences": {}
    }
    path = directory / f"{contract_name}.json"
    path.write_text(json.dumps(artifact))

    (directory / f"{contract_name}.dbg.json").write_text(
        json.dumps({"_format": "hh-sol-dbg-1", "buildInfo": "../../build-info/abc.json"})
    )
    return path


@pytest.fixture
def artifacts_dir(tmp_path):
    """Artifacts root holding a compiled YieldXNetwork"""
    root = tmp_path / 'artifacts'
    write_artifact(root, 'contracts/YieldXNetwork.sol', 'YieldXNetwork')

    build_info = root / 'build-info'
    build_info.mkdir()
    (build_info / 'abc.json').write_text(json.dumps({"id": "abc", "input": {}, "output": {}}))

    return root


@pytest.fixture
def artifact():
    return ContractArtifact(
        contract_name='YieldXNetwork',
        source_name='contracts/YieldXNetwork.sol',
        abi=YIELDX_ABI,
        bytecode='0x6080604052'
    )


@pytest.fixture
def config():
    return DeployConfig(confirmation_timeout=30.0, poll_interval=0.5)


@pytest.fixture
def w3():
    """Mock Web3 answering like a local development node"""
    w3 = Mock()

    contract_class = Mock()
    w3.eth.contract.return_value = contract_class

    constructor = contract_class.constructor.return_value
    constructor.estimate_gas.return_value = 100000
    constructor.build_transaction.side_effect = lambda params: dict(params, data='0x6080604052', value=0)
    constructor.transact.return_value = TX_HASH

    w3.eth.get_transaction_count.return_value = 7
    w3.eth.gas_price = 2000000000
    w3.eth.chain_id = 31337
    w3.eth.accounts = [DEPLOYER_ADDRESS]
    w3.eth.send_raw_transaction.return_value = TX_HASH
    w3.eth.wait_for_transaction_receipt.return_value = {
        'status': 1,
        'contractAddress': CONTRACT_ADDRESS,
        'gasUsed': 90000
    }
    w3.eth.get_code.return_value = b'\x60\x80\x60\x40'
    w3.eth.get_balance.return_value = 10**18

    w3.from_wei.side_effect = Web3.from_wei
    w3.to_wei.side_effect = Web3.to_wei

    return w3


@pytest.fixture
def local_signer():
    """Signer holding a key in process"""
    signer = Mock()
    signer.address = DEPLOYER_ADDRESS
    signer.is_local = True
    signer.sign_transaction.return_value = Mock(raw_transaction=b'\x02\xf8signed')
    return signer


@pytest.fixture
def node_signer():
    """Signer backed by an unlocked node account"""
    signer = Mock()
    signer.address = DEPLOYER_ADDRESS
    signer.is_local = False
    return signer
