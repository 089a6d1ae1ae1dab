'''Various utility functions for other modules of Weightvote.

There should normally be no need to use these functions directly.
'''

import math
import concurrent.futures
from numbers import Real
from typing import Any, Callable, List, Optional, Sequence, Tuple

IntMatrix = List[List[int]]


def new_matrix(n: int) -> IntMatrix:
    '''Return a new ``n x n`` matrix of zeros.'''
    return [[0] * n for _ in range(n)]


def add_matrix_to_matrix(matrix1: IntMatrix, matrix2: IntMatrix) -> None:
    for row1, row2 in zip(matrix1, matrix2):
        for j, addition in enumerate(row2):
            row1[j] += addition


def sum_matrices(matrices: Sequence[IntMatrix], n: int) -> IntMatrix:
    '''Sum square matrices elementwise, in the order given.'''
    summed = new_matrix(n)
    for matrix in matrices:
        add_matrix_to_matrix(summed, matrix)
    return summed


def votes_required(weight_sum: int, percent_required: Real) -> int:
    '''Return the weight a majority must strictly exceed.

    The product is floored, never rounded: with 11 votes and a simple
    majority, 5 is returned, so 6 votes are needed to win.
    '''
    return math.floor(weight_sum * percent_required)


def check_percent_required(percent_required: Real) -> Real:
    if not 0 < percent_required < 1:
        raise ValueError(
            f'percent required must be between 0 and 1 (exclusive),'
            f' got {percent_required}'
        )
    return percent_required


def split_evenly(items: Sequence[Any], n_parts: int) -> List[Sequence[Any]]:
    '''Split a sequence into at most n_parts contiguous non-empty chunks.'''
    n_parts = max(1, min(n_parts, len(items)))
    size, rest = divmod(len(items), n_parts)
    chunks = []
    start = 0
    for i in range(n_parts):
        end = start + size + (1 if i < rest else 0)
        chunks.append(items[start:end])
        start = end
    return chunks


def is_parallel(n_workers: Optional[int]) -> bool:
    return n_workers is not None and n_workers > 1


def run_tasks(func: Callable[..., Any],
              arg_tuples: Sequence[Tuple[Any, ...]],
              n_workers: Optional[int] = None,
              ) -> List[Any]:
    '''Call func with each of the argument tuples and collect the results.

    With more than one worker, the calls run in a thread pool; the call
    returns when all of them have finished (a join barrier). Results are
    always returned in the order of the argument tuples, and the first
    exception raised by any call propagates.

    :param func: The task function.
    :param arg_tuples: Positional arguments for each task.
    :param n_workers: Maximum number of threads. None, 0 or 1 runs all tasks
        sequentially in the calling thread.
    '''
    if not is_parallel(n_workers) or len(arg_tuples) <= 1:
        return [func(*args) for args in arg_tuples]
    with concurrent.futures.ThreadPoolExecutor(max_workers=n_workers) as pool:
        futures = [pool.submit(func, *args) for args in arg_tuples]
        return [future.result() for future in futures]
