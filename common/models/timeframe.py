"""Time frame of a lifecycle operation."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class TimeFrame(BaseModel):
    """Start and end of an operation, recorded by the provisioner."""
    start_utc: Optional[datetime] = Field(default=None)
    end_utc: Optional[datetime] = Field(default=None)

    @property
    def took_seconds(self) -> float:
        if self.start_utc is None or self.end_utc is None:
            return 0
        return (self.end_utc - self.start_utc).total_seconds()
