"""
Query Router
Placeholder time series for the dashboard's JSON data source.
Every target gets the same two points until a real feed is wired in.
"""
import logging
import time
from typing import List

from fastapi import APIRouter, Request

from app.models.dashboard import QueryRequest, TimeSeries

router = APIRouter()
logger = logging.getLogger(__name__)


def placeholder_series(target: str, now: int) -> TimeSeries:
    """Value 100 one hour ago and 200 now; `now` is in epoch seconds."""
    return TimeSeries(
        target=target,
        datapoints=[
            [100.0, float((now - 3600) * 1000)],
            [200.0, float(now * 1000)],
        ],
    )


@router.post("/query", response_model=List[TimeSeries])
def query(body: QueryRequest, request: Request) -> List[TimeSeries]:
    logger.debug(f"Query {request.url.path}: {body.model_dump_json(by_alias=True)}")

    now = int(time.time())
    return [placeholder_series(target.target, now) for target in body.targets]
