"""Weightvote - a library for tallying weighted committee votings.

Weightvote evaluates votings in bodies where voters carry different weights
(such as delegations of different sizes), under two procedures:

-   **Median votings** decide on a quantity such as an amount of money:
    the largest value that a required majority of the weight supports wins.
-   **Schulze votings** rank a number of options by the Schulze method,
    with the last option serving as the "no" option that the others are
    measured against.

Ballot types and validators live in the ``vote`` module, the evaluators in
the ``evaluate`` subpackage and the building blocks of the Schulze method in
the ``component`` subpackage. The ``io`` subpackage reads voter lists,
voting collections and ballot files, and ``persist`` turns evaluators and
results into JSON-ready dictionaries.
"""
