'''Ordering options into rank groups by their strongest path wins.'''

from typing import List, Optional

import weightvote.util
from weightvote.util import IntMatrix


def win_count(p: IntMatrix, i: int) -> int:
    '''Count the options that option i beats on strongest paths.'''
    row = p[i]
    return sum(
        1 for j in range(len(row)) if j != i and row[j] > p[j][i]
    )


def rank_groups(p: IntMatrix,
                n: int,
                n_workers: Optional[int] = None,
                ) -> List[List[int]]:
    '''Group options by their win counts, best group first.

    Options with the same number of strongest path wins share a group.
    The order of options within a group carries no meaning.

    :param p: Strongest path matrix.
    :param n: Number of options.
    :param n_workers: Number of threads for counting the wins.
    '''
    wins = weightvote.util.run_tasks(
        win_count, [(p, i) for i in range(n)], n_workers
    )
    # win counts range from 0 to n - 1
    buckets = [[] for _ in range(n)]
    for option, n_wins in enumerate(wins):
        buckets[n_wins].append(option)
    return [bucket for bucket in reversed(buckets) if bucket]
