from typing import List, Tuple, Union
from pydantic import BaseModel, FiniteFloat, NonNegativeInt

# Input schema for /stats endpoint
class NumbersIn(BaseModel):
    numbers: List[Union[int, FiniteFloat]]  # Values to aggregate; ints stay ints, NaN and inf are rejected

    model_config = {"extra": "forbid"}  # Forbid extra fields in input

# Input schema for /frequency endpoint
class FrequencyIn(BaseModel):
    buckets: List[Tuple[Union[int, FiniteFloat], NonNegativeInt]]  # (value, count) pairs, finite values only

    model_config = {"extra": "forbid"}

# Output schema for /stats
class StatsSummary(BaseModel):
    count: int        # Number of values
    sum: float        # Total of all values
    mean: float       # Arithmetic mean
    variance: float   # Population variance
    std_dev: float    # Population standard deviation
    min: float        # Minimum value
    max: float        # Maximum value
    range: float      # max - min

# Output schema for /frequency
class FrequencySummary(StatsSummary):
    total_count: int  # Number of items the buckets stand for (count is the bucket count)

# Body of a 400 caused by a statistics failure
class StatsErrorOut(BaseModel):
    detail: str  # Human-readable message
    kind: str    # EmptyCollection or CouldNotConvert
