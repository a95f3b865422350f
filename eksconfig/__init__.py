"""Tester configuration: add-on validation, defaults and derived result paths."""

from eksconfig.add_on_secrets_remote import AddOnSecretsRemote, validate_add_on_secrets_remote
from eksconfig.config import AddOnManagedNodeGroups, AddOnNodeGroups, Config, Parameters
from eksconfig.errors import ConfigError, MissingPrerequisiteError, MissingRequiredFieldError

__all__ = [
    "AddOnSecretsRemote",
    "validate_add_on_secrets_remote",
    "AddOnManagedNodeGroups",
    "AddOnNodeGroups",
    "Config",
    "Parameters",
    "ConfigError",
    "MissingPrerequisiteError",
    "MissingRequiredFieldError",
]
