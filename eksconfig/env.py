"""Environment variable overrides for the tester configuration.

Every user field is addressable as ``AWS_K8S_TESTER_EKS_`` + an add-on segment
+ the upper-snake field name, e.g.
``AWS_K8S_TESTER_EKS_ADD_ON_SECRETS_REMOTE_NAMESPACE``. Read-only fields have
no variable.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from common.utils import deep_merge
from eksconfig.config import Config

logger = logging.getLogger(__name__)

ENV_PREFIX = "AWS_K8S_TESTER_EKS_"
ENV_PREFIX_ADD_ON_SECRETS_REMOTE = ENV_PREFIX + "ADD_ON_SECRETS_REMOTE_"


class ConfigEnv(BaseSettings):
    """Top-level fields read from the environment."""
    name: Optional[str] = None
    region: Optional[str] = None
    s3_bucket_name: Optional[str] = None
    parameters_version: Optional[str] = None
    add_on_node_groups_enable: Optional[bool] = None
    add_on_managed_node_groups_enable: Optional[bool] = None

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)

    def overrides(self) -> dict:
        values = self.model_dump(exclude_none=True)
        result: dict = {}
        for key in ("name", "region", "s3_bucket_name"):
            if key in values:
                result[key] = values[key]
        if "parameters_version" in values:
            result["parameters"] = {"version": values["parameters_version"]}
        if "add_on_node_groups_enable" in values:
            result["add_on_node_groups"] = {"enable": values["add_on_node_groups_enable"]}
        if "add_on_managed_node_groups_enable" in values:
            result["add_on_managed_node_groups"] = {"enable": values["add_on_managed_node_groups_enable"]}
        return result


class AddOnSecretsRemoteEnv(BaseSettings):
    """User fields of the "Secrets" remote add-on read from the environment."""
    enable: Optional[bool] = None
    namespace: Optional[str] = None
    repository_account_id: Optional[str] = None
    repository_name: Optional[str] = None
    repository_image_tag: Optional[str] = None
    deployment_replicas: Optional[int] = None
    objects: Optional[int] = None
    object_size: Optional[int] = None
    name_prefix: Optional[str] = None
    s3_dir: Optional[str] = None
    requests_writes_summary_s3_dir: Optional[str] = None
    requests_reads_summary_s3_dir: Optional[str] = None
    requests_writes_summary_output_name_prefix: Optional[str] = None
    requests_reads_summary_output_name_prefix: Optional[str] = None

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX_ADD_ON_SECRETS_REMOTE)

    def overrides(self) -> dict:
        values = self.model_dump(exclude_none=True)
        if not values:
            return {}
        return {"add_on_secrets_remote": values}


_ENV_CLASSES: list[tuple[str, type[BaseSettings]]] = [
    (ENV_PREFIX, ConfigEnv),
    (ENV_PREFIX_ADD_ON_SECRETS_REMOTE, AddOnSecretsRemoteEnv),
]


def env_var_names() -> list[str]:
    """All environment variable names the tester reads."""
    return [
        prefix + field.upper()
        for prefix, env_cls in _ENV_CLASSES
        for field in env_cls.model_fields
    ]


def update_from_envs(cfg: Config) -> Config:
    """Return a copy of ``cfg`` with environment overrides applied.

    An add-on that is absent from ``cfg`` is created when any of its
    variables is set; it is dropped again by its enable check if not enabled.
    """
    overrides: dict = {}
    for _, env_cls in _ENV_CLASSES:
        overrides = deep_merge(overrides, env_cls().overrides())

    if not overrides:
        return cfg

    logger.info(f"Applying environment overrides: {', '.join(sorted(overrides))}")
    return Config.model_validate(deep_merge(cfg.model_dump(), overrides))
