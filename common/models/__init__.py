"""Common data models for the cluster load tester."""

from common.models.metrics import HistogramBucket, RequestsSummary, RequestsSummaryCompare
from common.models.node import NodeInfo, NodeSystemInfo, parse_node_info, parse_version
from common.models.timeframe import TimeFrame

__all__ = [
    "HistogramBucket",
    "RequestsSummary",
    "RequestsSummaryCompare",
    "NodeInfo",
    "NodeSystemInfo",
    "parse_node_info",
    "parse_version",
    "TimeFrame",
]
