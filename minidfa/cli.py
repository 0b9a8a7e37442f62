from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from minidfa.minimize import minimization
from minidfa.textio import FormatError, dump, load, pretty
from minidfa.vis import write_dot


__all__ = ['main']


DEFAULT_INPUT = 'input.txt'
DEFAULT_OUTPUT = 'output.txt'
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

logger = logging.getLogger(__name__)


def parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='minidfa',
        description='Minimize a complete DFA read from a text file.',
    )
    parser.add_argument(
        'input', nargs='?', default=DEFAULT_INPUT,
        help=f'Input automaton (default: {DEFAULT_INPUT})',
    )
    parser.add_argument(
        'output', nargs='?', default=DEFAULT_OUTPUT,
        help=f'Output report (default: {DEFAULT_OUTPUT})',
    )
    parser.add_argument(
        '--dot', metavar='PATH',
        help='Also write the minimized DFA as Graphviz source.',
    )
    parser.add_argument(
        '--quiet', action='store_true',
        help='Do not print the minimized DFA to the console.',
    )
    parser.add_argument(
        '--log-level', default='INFO', choices=LOG_LEVELS,
        help='Logging level (default: INFO)',
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(levelname)s: %(message)s',
    )

    try:
        lang = load(args.input)
    except OSError as e:
        logger.error('Error reading the input file: %s', e)
        return 1
    except FormatError as e:
        logger.error('Malformed automaton in %s: %s', args.input, e)
        return 1

    result = minimization(lang)
    logger.info(
        'Reduced %d states to %d in %d rounds.',
        len(lang), len(result.minimized), result.rounds,
    )

    try:
        dump(result.minimized, args.output)
    except OSError as e:
        logger.error('Error writing the output file: %s', e)
        return 1
    logger.info('Minimized DFA has been written to %s', args.output)

    if args.dot is not None:
        try:
            write_dot(result.minimized, args.dot)
        except OSError as e:
            logger.error('Error writing the dot file %s: %s', args.dot, e)
            return 1

    if not args.quiet:
        print(pretty(result.minimized))
    return 0
