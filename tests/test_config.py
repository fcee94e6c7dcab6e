"""
Unit Tests for Deployment Configuration
"""

import pytest

from utils.config import DEFAULT_ARTIFACTS_DIR, DEFAULT_RPC_URL, DeployConfig


class TestDeployConfig:
    """Environment parsing"""

    def test_defaults(self):
        config = DeployConfig.from_env({})

        assert config.rpc_url == DEFAULT_RPC_URL
        assert config.artifacts_dir == DEFAULT_ARTIFACTS_DIR
        assert config.private_key is None
        assert config.chain_id is None
        assert config.gas_price_gwei is None
        assert config.gas_limit_multiplier == 1.2
        assert config.confirmation_timeout == 120.0
        assert config.log_level == 'INFO'
        assert config.log_file is None

    def test_values(self):
        config = DeployConfig.from_env({
            'RPC_URL': 'https://polygon-rpc.com',
            'DEPLOYER_PRIVATE_KEY': '0xabc',
            'ARTIFACTS_DIR': 'build/artifacts',
            'CHAIN_ID': '137',
            'GAS_PRICE_GWEI': '35.5',
            'GAS_LIMIT_MULTIPLIER': '1.5',
            'CONFIRMATION_TIMEOUT': '300',
            'POLL_INTERVAL': '2',
            'LOG_LEVEL': 'debug',
            'LOG_FILE': 'data/logs/deploy.log'
        })

        assert config.rpc_url == 'https://polygon-rpc.com'
        assert config.private_key == '0xabc'
        assert config.artifacts_dir == 'build/artifacts'
        assert config.chain_id == 137
        assert config.gas_price_gwei == 35.5
        assert config.gas_limit_multiplier == 1.5
        assert config.confirmation_timeout == 300.0
        assert config.poll_interval == 2.0
        assert config.log_level == 'DEBUG'
        assert config.log_file == 'data/logs/deploy.log'

    def test_blank_values_use_defaults(self):
        config = DeployConfig.from_env({'RPC_URL': '', 'CHAIN_ID': '  '})

        assert config.rpc_url == DEFAULT_RPC_URL
        assert config.chain_id is None

    @pytest.mark.parametrize('name', ['CHAIN_ID', 'GAS_PRICE_GWEI', 'CONFIRMATION_TIMEOUT'])
    def test_malformed_number(self, name):
        with pytest.raises(ValueError, match=name):
            DeployConfig.from_env({name: 'lots'})

    def test_chain_id_must_be_integer(self):
        with pytest.raises(ValueError, match='CHAIN_ID'):
            DeployConfig.from_env({'CHAIN_ID': '1.5'})

    @pytest.mark.parametrize('env', [
        {'GAS_LIMIT_MULTIPLIER': '0.9'},
        {'CONFIRMATION_TIMEOUT': '0'},
        {'POLL_INTERVAL': '-1'}
    ])
    def test_out_of_range(self, env):
        with pytest.raises(ValueError):
            DeployConfig.from_env(env)

    @pytest.mark.parametrize('name', ['CONFIRMATION_TIMEOUT', 'POLL_INTERVAL', 'GAS_LIMIT_MULTIPLIER'])
    @pytest.mark.parametrize('raw', ['nan', 'inf', '-inf'])
    def test_non_finite_number(self, name, raw):
        with pytest.raises(ValueError, match=name):
            DeployConfig.from_env({name: raw})

    def test_log_level_case_insensitive(self):
        assert DeployConfig.from_env({'LOG_LEVEL': 'success'}).log_level == 'SUCCESS'

    def test_unknown_log_level(self):
        with pytest.raises(ValueError, match='LOG_LEVEL'):
            DeployConfig.from_env({'LOG_LEVEL': 'verbose'})

    def test_repr_hides_private_key(self):
        config = DeployConfig.from_env({'DEPLOYER_PRIVATE_KEY': '0xdeadbeefcafe'})

        assert config.private_key == '0xdeadbeefcafe'
        assert '0xdeadbeefcafe' not in repr(config)
