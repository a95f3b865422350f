"""Top-level tester configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from common.utils import NameGenerator, load_yaml, save_yaml
from eksconfig.add_on_secrets_remote import AddOnSecretsRemote, validate_add_on_secrets_remote
from eksconfig.errors import ConfigError, MissingRequiredFieldError
from eksconfig.fields import read_only

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-west-2"
DEFAULT_VERSION = "1.17"


class Parameters(BaseModel):
    """Parameters shared by the cluster and its add-ons."""
    version: str = Field(
        default=DEFAULT_VERSION,
        description="Kubernetes version, also keys historical result comparisons",
    )


class AddOnNodeGroups(BaseModel):
    """Self-managed node groups."""
    enable: bool = Field(default=False)
    created: bool = read_only(default=False)


class AddOnManagedNodeGroups(BaseModel):
    """EKS managed node groups."""
    enable: bool = Field(default=False)
    created: bool = read_only(default=False)


class Config(BaseModel):
    """Cluster test configuration, persisted to ``config_path`` as YAML."""
    name: str = Field(..., description="Cluster name")
    config_path: str = Field(..., description="Path of this configuration file")
    region: str = Field(default=DEFAULT_REGION)

    # Bucket for all test results, never derived
    s3_bucket_name: str = Field(default="")

    parameters: Parameters = Field(default_factory=Parameters)

    add_on_node_groups: Optional[AddOnNodeGroups] = Field(default=None)
    add_on_managed_node_groups: Optional[AddOnManagedNodeGroups] = Field(default=None)
    add_on_secrets_remote: Optional[AddOnSecretsRemote] = Field(default=None)

    def _is_enabled(self, field: str) -> bool:
        # A disabled add-on is dropped so it serializes as absent
        addon = getattr(self, field)
        if addon is None:
            return False
        if addon.enable:
            return True
        setattr(self, field, None)
        return False

    def is_enabled_add_on_node_groups(self) -> bool:
        return self._is_enabled("add_on_node_groups")

    def is_enabled_add_on_managed_node_groups(self) -> bool:
        return self._is_enabled("add_on_managed_node_groups")

    def is_enabled_add_on_secrets_remote(self) -> bool:
        """Return True if the add-on is enabled. Otherwise clear it."""
        return self._is_enabled("add_on_secrets_remote")

    def validate_and_set_defaults(self, name_gen: Optional[NameGenerator] = None) -> None:
        """Validate the whole config and default every unset add-on field."""
        if self.name == "":
            raise MissingRequiredFieldError("name empty", field="name")
        if self.config_path == "":
            raise MissingRequiredFieldError("config_path empty", field="config_path")

        # Drop disabled node groups so they are saved as absent
        self.is_enabled_add_on_node_groups()
        self.is_enabled_add_on_managed_node_groups()

        validate_add_on_secrets_remote(self, name_gen=name_gen)

    @classmethod
    def load(cls, path: str | Path) -> Config:
        """Load a config from YAML. ``config_path`` defaults to ``path``."""
        data = load_yaml(path)
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: expected a mapping at the top level, got {type(data).__name__}")
        data.setdefault("config_path", str(path))
        cfg = cls.model_validate(data)
        logger.debug(f"Loaded config {cfg.name} from {path}")
        return cfg

    def sync(self) -> None:
        """Write the config back to ``config_path``."""
        save_yaml(self.config_path, self.model_dump(mode="json", exclude_none=True))
        logger.info(f"Synced config {self.name} to {self.config_path}")
