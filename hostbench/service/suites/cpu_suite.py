import math
from typing import List

from hostbench.consts.labels import SQRT
from hostbench.service.harness.operation import Operation

DEFAULT_SQRT_ITERATIONS = 1_000_000


def sqrt_loop(iterations: int = DEFAULT_SQRT_ITERATIONS) -> None:
    """Square root of every integer below iterations, results discarded."""
    for i in range(iterations):
        math.sqrt(i)


def cpu_operations(iterations: int = DEFAULT_SQRT_ITERATIONS) -> List[Operation]:
    return [Operation(SQRT, lambda: sqrt_loop(iterations))]
