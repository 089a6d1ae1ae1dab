'''Building blocks of the Schulze evaluation.

The modules here each compute one intermediate stage of the Schulze method
from plain integer matrices indexed by option number: the pairwise victory
matrix and support fractions (:mod:`pairwise`), the strongest path matrix
(:mod:`paths`) and the rank groups (:mod:`rank`). The evaluator in
:mod:`weightvote.evaluate.schulze` chains them together.
'''
