"""A commandline tool for evaluating a single weighted voting.

Reads a JSON ballot file (see :mod:`weightvote.io.ballots`) describing a
median or Schulze voting and prints its result.
"""

import argparse
import io
import json
import logging
import sys
import warnings
from numbers import Real
from typing import List, Optional, Sequence

import weightvote.evaluate
import weightvote.io.ballots
import weightvote.persist
import weightvote.vote
from weightvote.io.core import ElectionData, ParseError

DEFAULT_PERCENT_REQUIRED = 0.5

argparser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    '-i', '--input-file',
    type=argparse.FileType('r', encoding='utf8'),
    help='JSON ballot file to load the voting from',
)
argparser.add_argument(
    '-I', '--use-stdin',
    action='store_true',
    help='load the ballot file from standard input',
)
argparser.add_argument(
    '-p', '--percent-required',
    type=float,
    help=(
        'share of the total weight that must be exceeded for a majority'
        ' (overrides the ballot file; falls back to a simple majority'
        ' if neither gives it)'
    ),
)
argparser.add_argument(
    '-w', '--workers',
    type=int,
    help='number of threads for the Schulze evaluation',
)
argparser.add_argument(
    '-j', '--json',
    action='store_true',
    dest='json_output',
    help='print the full result as JSON instead of the summary',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all evaluator log messages',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any evaluator log messages',
)


def main(input_file: io.TextIOBase,
         use_stdin: bool = False,
         percent_required: Optional[Real] = None,
         workers: Optional[int] = None,
         json_output: bool = False,
         verbose: bool = False,
         quiet: bool = False,
         ) -> None:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    if use_stdin:
        input_file = sys.stdin
    data = weightvote.io.ballots.load(input_file)
    if not data.ballots:
        warnings.warn('empty ballots: cannot evaluate voting, terminating')
        return
    if percent_required is None:
        percent_required = data.percent_required
    if percent_required is None:
        percent_required = DEFAULT_PERCENT_REQUIRED
    if data.procedure == 'median':
        result = run_median(data, percent_required, show=not json_output)
    else:
        result = run_schulze(
            data, percent_required, workers, show=not json_output
        )
    if json_output:
        print(json.dumps(weightvote.persist.to_dict(result), indent=2))


def run_median(data: ElectionData,
               percent_required: Real,
               show: bool = True,
               ) -> weightvote.evaluate.MedianResult:
    weightvote.vote.MedianBallotValidator(data.max_value).validate_all(
        data.ballots
    )
    evaluator = weightvote.evaluate.MedianEvaluator(percent_required)
    result = evaluator.evaluate(data.ballots)
    if show:
        show_header(data, 'median')
        print(f'Votes required: more than {result.votes_required}')
        print(f'Accepted value: {result.value}')
    return result


def run_schulze(data: ElectionData,
                percent_required: Real,
                workers: Optional[int] = None,
                show: bool = True,
                ) -> weightvote.evaluate.SchulzeResult:
    if data.options:
        options = data.options
    else:
        options = [str(i + 1) for i in range(len(data.ballots[0].ranking))]
    weightvote.vote.SchulzeBallotValidator(len(options)).validate_all(
        data.ballots
    )
    evaluator = weightvote.evaluate.SchulzeEvaluator(percent_required, workers)
    result = evaluator.evaluate(data.ballots, len(options))
    if show:
        show_header(data, 'Schulze')
        print(f'Votes required: more than {result.votes_required}')
        show_ranking(result.ranked_groups, options)
        show_percentages(result, options)
    return result


def show_header(data: ElectionData, procedure_name: str) -> None:
    print()
    title = f'Evaluating a {procedure_name} voting'
    if data.name:
        title += f' "{data.name}"'
    print(title)
    print(f'Received {len(data.ballots)} ballots with total weight '
          f'{weightvote.vote.total_weight(data.ballots)}')
    print()


def show_ranking(ranked_groups: Sequence[Sequence[int]],
                 options: List[str],
                 ) -> None:
    """Show the rank groups, marking ties."""
    print('Ranking:')
    n_just_chars = len(str(len(ranked_groups)))
    for place, group in enumerate(ranked_groups, start=1):
        names = ', '.join(options[i] for i in group)
        tied = ' (tied)' if len(group) > 1 else ''
        print(str(place).rjust(n_just_chars), ' ', names + tied)


def show_percentages(result: weightvote.evaluate.SchulzeResult,
                     options: List[str],
                     ) -> None:
    if len(options) < 2:
        return
    print()
    print(f'Preferred to "{options[-1]}":')
    n_just_chars = len(max(options[:-1], key=len))
    for i, percentage in enumerate(result.percentages):
        accepted = 'accepted' if result.accepted(i) else 'rejected'
        print(options[i].ljust(n_just_chars), ' ',
              f'{percentage:7.2%}', ' ', accepted)


def command(argv: Optional[List[str]] = None) -> None:
    """Run the tool with commandline arguments, reporting invalid input."""
    args = argparser.parse_args(argv)
    if not args.input_file and not args.use_stdin:
        argparser.print_usage()
        return
    try:
        main(**vars(args))
    except (ParseError, weightvote.vote.VoteError) as err:
        argparser.exit(1, f'{argparser.prog}: error: {err}\n')


if __name__ == '__main__':
    command()
