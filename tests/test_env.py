"""Unit tests for environment variable overrides."""

import pytest

from eksconfig.add_on_secrets_remote import AddOnSecretsRemote
from eksconfig.config import Config
from eksconfig.env import (
    ENV_PREFIX,
    ENV_PREFIX_ADD_ON_SECRETS_REMOTE,
    AddOnSecretsRemoteEnv,
    env_var_names,
    update_from_envs,
)
from eksconfig.fields import user_fields


class TestEnvVarNames:
    """Tests for environment variable naming."""

    def test_prefixes(self):
        assert ENV_PREFIX == "AWS_K8S_TESTER_EKS_"
        assert ENV_PREFIX_ADD_ON_SECRETS_REMOTE == "AWS_K8S_TESTER_EKS_ADD_ON_SECRETS_REMOTE_"

    def test_add_on_names(self):
        names = env_var_names()

        assert "AWS_K8S_TESTER_EKS_ADD_ON_SECRETS_REMOTE_NAMESPACE" in names
        assert "AWS_K8S_TESTER_EKS_ADD_ON_SECRETS_REMOTE_REPOSITORY_ACCOUNT_ID" in names
        assert "AWS_K8S_TESTER_EKS_S3_BUCKET_NAME" in names

    def test_read_only_fields_unbound(self):
        """Test every user field and no read-only field has a variable."""
        assert list(AddOnSecretsRemoteEnv.model_fields) == user_fields(AddOnSecretsRemote)
        assert "AWS_K8S_TESTER_EKS_ADD_ON_SECRETS_REMOTE_STATUS" not in env_var_names()


class TestUpdateFromEnvs:
    """Tests for applying overrides."""

    def test_no_env(self, config):
        """Test the config is returned unchanged without variables."""
        assert update_from_envs(config) is config

    def test_top_level(self, config, monkeypatch):
        monkeypatch.setenv("AWS_K8S_TESTER_EKS_S3_BUCKET_NAME", "other-bucket")
        monkeypatch.setenv("AWS_K8S_TESTER_EKS_PARAMETERS_VERSION", "1.18")

        cfg = update_from_envs(config)

        assert cfg.s3_bucket_name == "other-bucket"
        assert cfg.parameters.version == "1.18"
        assert cfg.name == "test1"

    def test_add_on_fields(self, config, monkeypatch):
        monkeypatch.setenv("AWS_K8S_TESTER_EKS_ADD_ON_SECRETS_REMOTE_NAMESPACE", "load")
        monkeypatch.setenv("AWS_K8S_TESTER_EKS_ADD_ON_SECRETS_REMOTE_OBJECTS", "1000")

        cfg = update_from_envs(config)

        addon = cfg.add_on_secrets_remote
        assert addon.namespace == "load"
        assert addon.objects == 1000
        assert addon.repository_name == "aws/aws-k8s-tester"

    def test_creates_add_on(self, monkeypatch):
        """Test variables create an absent add-on."""
        monkeypatch.setenv("AWS_K8S_TESTER_EKS_ADD_ON_SECRETS_REMOTE_ENABLE", "true")
        monkeypatch.setenv("AWS_K8S_TESTER_EKS_ADD_ON_MANAGED_NODE_GROUPS_ENABLE", "true")
        cfg = Config(name="test1", config_path="/tmp/test1.yaml")

        cfg = update_from_envs(cfg)

        assert cfg.is_enabled_add_on_secrets_remote() is True
        assert cfg.is_enabled_add_on_managed_node_groups() is True

    def test_created_add_on_dropped_when_not_enabled(self, monkeypatch):
        """Test an add-on created from variables without enable is dropped."""
        monkeypatch.setenv("AWS_K8S_TESTER_EKS_ADD_ON_SECRETS_REMOTE_NAMESPACE", "load")
        cfg = update_from_envs(Config(name="test1", config_path="/tmp/test1.yaml"))

        assert cfg.add_on_secrets_remote is not None
        assert cfg.is_enabled_add_on_secrets_remote() is False
        assert cfg.add_on_secrets_remote is None

    def test_invalid_value(self, config, monkeypatch):
        monkeypatch.setenv("AWS_K8S_TESTER_EKS_ADD_ON_SECRETS_REMOTE_OBJECT_SIZE", "big")

        with pytest.raises(ValueError):
            update_from_envs(config)
