'''Strongest (widest) paths between options for the Schulze method.

Options form a directed graph in which an edge leads from ``i`` to ``j``
whenever more weight prefers ``i`` to ``j`` than the other way round; the
edge strength is the weight preferring ``i``. The strength of a path is the
strength of its weakest edge, and ``p[i][j]`` holds the strength of the
strongest path from ``i`` to ``j`` (zero if there is none).
'''

import logging
from typing import List, Optional

import weightvote.util
from weightvote.util import IntMatrix

logger = logging.getLogger(__name__)


def seed_row(d: IntMatrix, i: int) -> List[int]:
    '''Return the direct edge strengths from option i.'''
    row = d[i]
    return [
        row[j] if j != i and row[j] > d[j][i] else 0
        for j in range(len(row))
    ]


def widen(p: IntMatrix) -> None:
    '''Close the direct path strengths to strongest path strengths in place.

    This is the max-min variant of the Floyd-Warshall algorithm. Every pass
    over an intermediate option reads the cells written by the previous
    passes, so it must run sequentially.
    '''
    n = len(p)
    for i in range(n):
        row_i = p[i]
        for j in range(n):
            if j == i:
                continue
            row_j = p[j]
            through_i = row_j[i]
            if not through_i:
                continue
            for k in range(n):
                if k == i or k == j:
                    continue
                candidate = min(through_i, row_i[k])
                if candidate > row_j[k]:
                    row_j[k] = candidate


def strongest_paths(d: IntMatrix,
                    n: int,
                    n_workers: Optional[int] = None,
                    ) -> IntMatrix:
    '''Compute the strongest path matrix from the pairwise victory matrix.

    The direct edge strengths are computed one row per task, the rows being
    independent; all rows are finished before widening starts.

    :param d: Pairwise victory matrix; it is not modified.
    :param n: Number of options.
    :param n_workers: Number of threads for computing the direct strengths.
    '''
    p = weightvote.util.run_tasks(
        seed_row, [(d, i) for i in range(n)], n_workers
    )
    widen(p)
    logger.debug('computed strongest paths among %d options', n)
    return p
