"""Kubernetes node information models and version parsing."""

from __future__ import annotations

import re
from pydantic import BaseModel, ConfigDict, Field

# Everything that is not a digit or a dot
_NON_VERSION_CHARS = re.compile(r"[^.0-9]+")


class NodeSystemInfo(BaseModel):
    """System info reported by a Kubernetes node.

    Accepts the camelCase keys the Kubernetes API emits as well as field names.
    """
    model_config = ConfigDict(populate_by_name=True)

    machine_id: str = Field(default="", alias="machineID")
    system_uuid: str = Field(default="", alias="systemUUID")
    boot_id: str = Field(default="", alias="bootID")
    kernel_version: str = Field(default="", alias="kernelVersion")
    os_image: str = Field(default="", alias="osImage")
    container_runtime_version: str = Field(default="", alias="containerRuntimeVersion")
    kubelet_version: str = Field(default="", alias="kubeletVersion")
    kube_proxy_version: str = Field(default="", alias="kubeProxyVersion")
    operating_system: str = Field(default="", alias="operatingSystem")
    architecture: str = Field(default="", alias="architecture")


class NodeInfo(NodeSystemInfo):
    """Node system info with numeric minor versions for sorting and comparison."""
    model_config = ConfigDict(frozen=True)

    kubelet_minor_version_value: float = Field(default=0)
    kube_proxy_minor_version_value: float = Field(default=0)


def parse_minor_version(raw: str) -> float:
    """Parse the "major.minor" part of a version string as a float.

    "v1.16.8-eks-e16311" becomes 1.16. Strings with fewer than three
    dot-separated components, or that do not parse, yield 0.
    """
    parts = _NON_VERSION_CHARS.sub("", raw or "").split(".")
    if len(parts) <= 2:
        return 0.0
    try:
        return float(".".join(parts[:2]))
    except ValueError:
        return 0.0


def parse_version(raw_kubelet_version: str, raw_kube_proxy_version: str) -> tuple[float, float]:
    """Parse kubelet and kube-proxy minor versions, each independently."""
    return (
        parse_minor_version(raw_kubelet_version),
        parse_minor_version(raw_kube_proxy_version),
    )


def parse_node_info(info: NodeSystemInfo | dict) -> NodeInfo:
    """Build a NodeInfo from a node system info record.

    e.g. {"kernelVersion": "4.14.173-137.229.amzn2.x86_64", "osImage": "Amazon Linux 2",
    "kubeletVersion": "v1.16.8-eks-e16311", "kubeProxyVersion": "v1.16.8-eks-e16311", ...}
    """
    if not isinstance(info, NodeSystemInfo):
        info = NodeSystemInfo.model_validate(info)

    kubelet, kube_proxy = parse_version(info.kubelet_version, info.kube_proxy_version)
    return NodeInfo(
        **info.model_dump(include=set(NodeSystemInfo.model_fields)),
        kubelet_minor_version_value=kubelet,
        kube_proxy_minor_version_value=kube_proxy,
    )
