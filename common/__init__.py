"""Common utilities and models shared across the tester."""

from common.models.metrics import RequestsSummary, RequestsSummaryCompare
from common.models.node import NodeInfo, parse_node_info, parse_version
from common.models.timeframe import TimeFrame

__all__ = [
    "RequestsSummary",
    "RequestsSummaryCompare",
    "NodeInfo",
    "parse_node_info",
    "parse_version",
    "TimeFrame",
]
