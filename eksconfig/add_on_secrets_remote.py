"""Add-on "Secrets" remote.

Generates load from remote workers (Pods) in the cluster. Each worker writes
Secret objects serially with no concurrency, so ``deployment_replicas`` sets
the concurrency. The main use case is to write a large number of objects to
fill up the etcd database and measure latencies for secret encryption.
"""

from __future__ import annotations

import logging
import posixpath
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, Field

from common.models.metrics import RequestsSummary, RequestsSummaryCompare
from common.models.timeframe import TimeFrame
from common.utils import NameGenerator, random_string, s3_key, strip_ext
from eksconfig.defaults import DefaultRule, apply_defaults, effective_value
from eksconfig.errors import MissingPrerequisiteError, MissingRequiredFieldError
from eksconfig.fields import read_only

if TYPE_CHECKING:
    from eksconfig.config import Config

logger = logging.getLogger(__name__)

ADD_ON_ID = "add-on-secrets-remote"

DEFAULT_DEPLOYMENT_REPLICAS = 5
DEFAULT_OBJECTS = 10
DEFAULT_OBJECT_SIZE = 10 * 1024  # 10 KB

OPERATIONS = ("writes", "reads")


class RequestsArtifacts(BaseModel):
    """Result files of one operation (writes or reads), local and in S3."""
    raw_json_path: str = read_only(default="")
    raw_json_s3_key: str = read_only(default="")

    summary: RequestsSummary = read_only(default_factory=RequestsSummary)
    summary_json_path: str = read_only(default="")
    summary_json_s3_key: str = read_only(default="")
    summary_table_path: str = read_only(default="")
    summary_table_s3_key: str = read_only(default="")

    summary_compare: RequestsSummaryCompare = read_only(default_factory=RequestsSummaryCompare)
    summary_compare_json_path: str = read_only(default="")
    summary_compare_json_s3_key: str = read_only(default="")
    summary_compare_table_path: str = read_only(default="")
    summary_compare_table_s3_key: str = read_only(default="")

    def paired_paths(self) -> list[tuple[str, str]]:
        """(local path, S3 key) pairs."""
        return [
            (self.raw_json_path, self.raw_json_s3_key),
            (self.summary_json_path, self.summary_json_s3_key),
            (self.summary_table_path, self.summary_table_s3_key),
            (self.summary_compare_json_path, self.summary_compare_json_s3_key),
            (self.summary_compare_table_path, self.summary_compare_table_s3_key),
        ]


class AddOnSecretsRemoteStatus(BaseModel):
    """State written by the tester, never by users."""
    # Set once the resources have been created, used for delete operations
    created: bool = read_only(default=False)
    time_frame_create: TimeFrame = read_only(default_factory=TimeFrame)
    time_frame_delete: TimeFrame = read_only(default_factory=TimeFrame)

    writes: RequestsArtifacts = read_only(default_factory=RequestsArtifacts)
    reads: RequestsArtifacts = read_only(default_factory=RequestsArtifacts)


class AddOnSecretsRemote(BaseModel):
    """Parameters for the "Secrets" remote add-on."""
    enable: bool = Field(default=False, description="Create this add-on")

    namespace: str = Field(default="", description="Namespace to create objects in")

    # Tester ECR image, e.g. "[ACCOUNT_ID].dkr.ecr.[REGION].amazonaws.com/aws/aws-k8s-tester:latest"
    repository_account_id: str = Field(default="", description="Account ID of the tester image")
    repository_name: str = Field(default="", description="Repository name, e.g. aws/aws-k8s-tester")
    repository_image_tag: str = Field(default="", description="Image tag, e.g. latest")

    # Total number of objects written is deployment_replicas * objects
    deployment_replicas: int = Field(default=0, ge=0, description="Number of worker replicas")
    objects: int = Field(default=0, ge=0, description="Number of Secret objects to write/read")
    object_size: int = Field(default=0, ge=0, description="Secret value size in bytes")

    name_prefix: str = Field(
        default="",
        description="Prefix of Secret names, unique per loader to avoid name conflicts",
    )

    s3_dir: str = Field(
        default="",
        description="S3 directory for all test results, under the config S3 bucket",
    )

    # Previous/latest summaries for regression tests. Not bound to the cluster
    # directory: runs from different clusters read and write here.
    requests_writes_summary_s3_dir: str = Field(default="")
    requests_reads_summary_s3_dir: str = Field(default="")

    # Output name in the "/var/log" directory of the remote worker
    requests_writes_summary_output_name_prefix: str = Field(default="")
    requests_reads_summary_output_name_prefix: str = Field(default="")

    status: AddOnSecretsRemoteStatus = read_only(default_factory=AddOnSecretsRemoteStatus)

    @property
    def total_objects(self) -> int:
        return self.deployment_replicas * self.objects

    def image_uri(self, region: str) -> str:
        """ECR image URI of the remote worker."""
        return (
            f"{self.repository_account_id}.dkr.ecr.{region}.amazonaws.com/"
            f"{self.repository_name}:{self.repository_image_tag}"
        )

    def artifacts(self, operation: str) -> RequestsArtifacts:
        if operation not in OPERATIONS:
            raise ValueError(f"Unknown operation: {operation}")
        return getattr(self.status, operation)


_S3_DIR = DefaultRule("s3_dir", lambda cfg, addon: posixpath.join(cfg.name, ADD_ON_ID))


def _local_path(suffix: str):
    def derive(cfg: Config, addon: AddOnSecretsRemote) -> str:
        return strip_ext(cfg.config_path) + suffix
    return derive


def _remote_key(category: str, path_rule: DefaultRule):
    def derive(cfg: Config, addon: AddOnSecretsRemote) -> str:
        return s3_key(
            effective_value(cfg, addon, _S3_DIR),
            category,
            effective_value(cfg, addon, path_rule),
        )
    return derive


def _compare_dir(operation: str):
    def derive(cfg: Config, addon: AddOnSecretsRemote) -> str:
        return posixpath.join(ADD_ON_ID, f"{operation}-summary", cfg.parameters.version)
    return derive


def _artifact_rules(operation: str) -> list[DefaultRule]:
    rules = []
    for name, kind, ext, category in (
        ("raw_json", "raw", ".json", "raw"),
        ("summary_json", "summary", ".json", "summary"),
        ("summary_table", "summary", ".txt", "summary"),
        ("summary_compare_json", "summary-compare", ".json", "compare"),
        ("summary_compare_table", "summary-compare", ".txt", "compare"),
    ):
        path_rule = DefaultRule(
            f"status.{operation}.{name}_path",
            _local_path(f"-secrets-remote-requests-{operation}-{kind}{ext}"),
        )
        rules.append(path_rule)
        rules.append(DefaultRule(
            f"status.{operation}.{name}_s3_key",
            _remote_key(f"{operation}-{category}", path_rule),
        ))
    rules.append(DefaultRule(f"requests_{operation}_summary_s3_dir", _compare_dir(operation)))
    return rules


def default_rules(name_gen: NameGenerator = random_string) -> list[DefaultRule]:
    """Default rules of the add-on, grouped by field family."""
    rules = [
        DefaultRule("namespace", lambda cfg, addon: cfg.name + "-secrets-remote"),
        DefaultRule("deployment_replicas", lambda cfg, addon: DEFAULT_DEPLOYMENT_REPLICAS),
        DefaultRule("objects", lambda cfg, addon: DEFAULT_OBJECTS),
        DefaultRule("object_size", lambda cfg, addon: DEFAULT_OBJECT_SIZE),
        DefaultRule("name_prefix", lambda cfg, addon: "secret" + name_gen(5)),
        _S3_DIR,
    ]
    for operation in OPERATIONS:
        rules.extend(_artifact_rules(operation))
    rules.append(DefaultRule(
        "requests_writes_summary_output_name_prefix",
        lambda cfg, addon: "secrets-writes-" + name_gen(10),
    ))
    rules.append(DefaultRule(
        "requests_reads_summary_output_name_prefix",
        lambda cfg, addon: "secrets-reads-" + name_gen(10),
    ))
    return rules


def check_add_on_secrets_remote(cfg: Config) -> None:
    """Raise if the add-on cannot run. Never modifies the config."""
    if cfg.s3_bucket_name == "":
        raise MissingPrerequisiteError(
            "AddOnSecretsRemote requires S3 bucket for collecting results but s3_bucket_name empty",
            prerequisite="s3_bucket_name",
        )
    if not cfg.is_enabled_add_on_node_groups() and not cfg.is_enabled_add_on_managed_node_groups():
        raise MissingPrerequisiteError(
            "AddOnSecretsRemote.enable true but no node group is enabled",
            prerequisite="node_groups",
        )

    addon = cfg.add_on_secrets_remote
    for field in ("repository_account_id", "repository_name", "repository_image_tag"):
        if getattr(addon, field) == "":
            raise MissingRequiredFieldError(f"AddOnSecretsRemote.{field} empty", field=field)


def validate_add_on_secrets_remote(
    cfg: Config,
    name_gen: Optional[NameGenerator] = None,
) -> None:
    """Validate the add-on and fill in every unset field in place.

    Does nothing when the add-on is disabled. Raises on the first failed check,
    before any field is defaulted.
    """
    if not cfg.is_enabled_add_on_secrets_remote():
        return

    check_add_on_secrets_remote(cfg)

    applied = apply_defaults(cfg, cfg.add_on_secrets_remote, default_rules(name_gen or random_string))
    if applied:
        logger.info(f"AddOnSecretsRemote: defaulted {len(applied)} fields")
