from fastapi import APIRouter, HTTPException

from numstats.errors import StatsError
from numstats.services.frequency import frequency_summary
from numstats.services.numeric import numeric_summary
from numstats.api.schemas import FrequencyIn, FrequencySummary, NumbersIn, StatsErrorOut, StatsSummary

router = APIRouter()

# StatsError raised below is turned into a 400 by the handler registered in create_app
ERROR_RESPONSES = {400: {"model": StatsErrorOut}}

@router.post("/stats", response_model=StatsSummary, responses=ERROR_RESPONSES)
async def analyze(body: NumbersIn):
    """
    Accepts a JSON payload with 'numbers'.
    Returns count, sum, mean, variance, std_dev, min, max and range.
    Responds with 400 Bad Request for malformed input, an empty list or results
    that overflow a float.
    """
    try:
        return StatsSummary(**numeric_summary(body.numbers))
    except StatsError:
        raise
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

@router.post("/frequency", response_model=FrequencySummary, responses=ERROR_RESPONSES)
async def analyze_frequency(body: FrequencyIn):
    """
    Accepts a JSON payload with 'buckets', a list of [value, count] pairs.
    Returns the statistics of the sequence the table stands for, plus total_count.
    Responds with 400 Bad Request for malformed input, a table without items or
    results that overflow a float.
    """
    try:
        return FrequencySummary(**frequency_summary(body.buckets))
    except StatsError:
        raise
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
