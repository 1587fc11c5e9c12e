from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class AccountBalance(BaseModel):
    name: str
    amount: str  # pre-formatted, e.g. "$12.34"


class QueryTarget(BaseModel):
    target: str = ""


class QueryRange(BaseModel):
    start: Optional[datetime] = Field(default=None, alias="from")
    end: Optional[datetime] = Field(default=None, alias="to")


class QueryRequest(BaseModel):
    targets: List[QueryTarget] = Field(default_factory=list)
    range: Optional[QueryRange] = None


class TimeSeries(BaseModel):
    target: str
    datapoints: List[List[float]]  # [value, epoch millis]
