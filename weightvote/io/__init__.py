"""Input/output of voter lists, voting collections and ballot files.

This subpackage is structured into modules by file format. Its root namespace
contains a general-purpose function to transform rankings of named options
into the numeric rankings used by Schulze ballots.
"""

import collections.abc
from typing import Any, List, Sequence, Tuple, Union, FrozenSet

from weightvote.vote import VoteValueError

RankedOrdering = Sequence[Union[Any, FrozenSet[Any]]]


def ranking_from_ranked(ordering: RankedOrdering,
                        options: List[Any],
                        ) -> Tuple[int, ...]:
    '''Transform an ordering of options into their numeric ranking.

    :param ordering: Options from the most preferred one, options sharing
        a rank grouped into a frozen set; e.g. ``('B', frozenset('AC'))``.
    :param options: All options of the voting, in their index order.
    :returns: A tuple with the rank of every option at its index, usable as
        a :class:`weightvote.vote.SchulzeBallot` ranking. Options missing from
        the ordering share the rank after the last one given.
    :raises VoteValueError: If the ordering contains an unknown option or
        ranks one twice.
    '''
    ranks = {}
    for rank, positioned in enumerate(ordering):
        if isinstance(positioned, collections.abc.Set):
            group = positioned
        else:
            group = [positioned]
        for option in group:
            if option not in options:
                raise VoteValueError(option, allowed=options)
            if option in ranks:
                raise VoteValueError(ordering)
            ranks[option] = rank
    unranked = len(ordering)
    return tuple(ranks.get(option, unranked) for option in options)
