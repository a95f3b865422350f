"""Pytest configuration and shared fixtures."""

import os
from typing import Callable

import pytest

from eksconfig.add_on_secrets_remote import AddOnSecretsRemote
from eksconfig.config import AddOnManagedNodeGroups, Config


def fixed_name_gen(length: int) -> str:
    """Deterministic stand-in for the random name suffix generator."""
    return "x" * length


@pytest.fixture
def name_gen() -> Callable[[int], str]:
    return fixed_name_gen


@pytest.fixture
def sample_config_dict() -> dict:
    """Sample config with the add-on enabled and nothing defaulted."""
    return {
        "name": "test1",
        "config_path": "/tmp/test1.yaml",
        "s3_bucket_name": "my-bucket",
        "parameters": {"version": "1.17"},
        "add_on_managed_node_groups": {"enable": True},
        "add_on_secrets_remote": {
            "enable": True,
            "repository_account_id": "123456789012",
            "repository_name": "aws/aws-k8s-tester",
            "repository_image_tag": "latest",
        },
    }


@pytest.fixture
def config(sample_config_dict: dict) -> Config:
    return Config.model_validate(sample_config_dict)


@pytest.fixture
def bare_config() -> Config:
    """Config with a managed node group and an empty, enabled add-on."""
    return Config(
        name="test1",
        config_path="/tmp/test1.yaml",
        s3_bucket_name="my-bucket",
        add_on_managed_node_groups=AddOnManagedNodeGroups(enable=True),
        add_on_secrets_remote=AddOnSecretsRemote(enable=True),
    )


@pytest.fixture(autouse=True)
def clear_tester_env(monkeypatch):
    """Keep tester environment variables from leaking into tests."""
    for key in list(os.environ):
        if key.startswith("AWS_K8S_TESTER_"):
            monkeypatch.delenv(key)
