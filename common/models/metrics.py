"""Request latency summary models.

These records are produced by the metrics pipeline after a load run and are
stored on the add-on status. Nothing in this package computes them.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field


class HistogramBucket(BaseModel):
    """Single latency histogram bucket, bounds in milliseconds."""
    scale: str = Field(default="milliseconds")
    lower_bound: float = Field(default=0)
    upper_bound: float = Field(default=0)
    count: int = Field(default=0)


class RequestsSummary(BaseModel):
    """Summary of the requests issued by one load run."""
    test_id: str = Field(default="", description="Test run identifier")
    success_total: float = Field(default=0, description="Number of successful requests")
    failure_total: float = Field(default=0, description="Number of failed requests")
    latency_histogram: list[HistogramBucket] = Field(default_factory=list)

    # Latency percentiles in milliseconds
    latency_p50: float = Field(default=0)
    latency_p90: float = Field(default=0)
    latency_p99: float = Field(default=0)
    latency_p999: float = Field(default=0)
    latency_p9999: float = Field(default=0)

    @property
    def total(self) -> float:
        return self.success_total + self.failure_total


class RequestsSummaryCompare(BaseModel):
    """Comparison of the current run against a previous baseline."""
    previous: Optional[RequestsSummary] = Field(default=None)
    current: Optional[RequestsSummary] = Field(default=None)
    latency_histogram_delta: list[HistogramBucket] = Field(default_factory=list)

    # Percentile deltas as percentages of the previous value
    latency_p50_delta_percent: float = Field(default=0)
    latency_p90_delta_percent: float = Field(default=0)
    latency_p99_delta_percent: float = Field(default=0)
    latency_p999_delta_percent: float = Field(default=0)
    latency_p9999_delta_percent: float = Field(default=0)
