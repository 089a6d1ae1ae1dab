'''Evaluate the results of votings.

Two procedures are supported:

*Median votings* decide on a quantity, such as an amount of money. Every
voter names the largest value they are willing to accept and the result is
the largest value that more than the required share of the total weight
supports (everyone voting for a larger value also supports a smaller one).
Use :class:`median.MedianEvaluator`.

*Schulze votings* decide between a number of options ranked by each voter.
The last option is conventionally the "no" (status quo) option. The result
orders all options into rank groups by the Schulze method and additionally
reports how much weight preferred each option to the "no" option.
Use :class:`schulze.SchulzeEvaluator`.

Both return immutable result objects described in :mod:`core`. None of the
evaluators validate weights or values; use the tools in the
:mod:`weightvote.vote` module for that.
'''

from weightvote.evaluate.core import *    # noqa
from weightvote.evaluate.median import MedianEvaluator, evaluate_median    # noqa
from weightvote.evaluate.schulze import SchulzeEvaluator, evaluate_schulze    # noqa
