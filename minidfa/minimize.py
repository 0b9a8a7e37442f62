from __future__ import annotations

import logging

import attr

from minidfa import State
from minidfa.automaton import Automaton
from minidfa.partition import Partition, refinements
from minidfa.reachability import prune
from minidfa.rebuild import rebuild


__all__ = ['Minimization', 'minimization', 'minimize']


logger = logging.getLogger(__name__)


@attr.frozen
class Minimization:
    pruned: Automaton
    partition: Partition
    rounds: int
    minimized: Automaton

    @property
    def mapping(self) -> dict[State, State]:
        """Maps each reachable state to its state in the minimized DFA."""
        return dict(self.partition.index)

    @property
    def removed(self) -> int:
        return len(self.pruned) - len(self.minimized)


def minimization(lang: Automaton) -> Minimization:
    """Runs reachability pruning, refinement and reconstruction."""
    pruned = prune(lang)
    logger.debug(
        'Pruned %d unreachable states; %d remain.',
        len(lang) - len(pruned), len(pruned),
    )

    rounds = 0
    for rounds, partition in enumerate(refinements(pruned)):
        logger.debug('Round %d: %d blocks.', rounds, len(partition))

    minimized = rebuild(pruned, partition)
    logger.debug('Minimized DFA has %d states.', len(minimized))
    return Minimization(pruned, partition, rounds, minimized)


def minimize(lang: Automaton) -> Automaton:
    """Returns the minimal DFA accepting the same language as lang."""
    return minimization(lang).minimized
