from __future__ import annotations

from minidfa import Block, State
from minidfa.automaton import Automaton
from minidfa.partition import Partition


__all__ = ['rebuild', 'representative']


def representative(block: Block) -> State:
    return min(block)


def rebuild(lang: Automaton, partition: Partition) -> Automaton:
    """Collapses each block of a stable partition into a single state.

    Block i becomes state i. Outgoing transitions are read off the
    block's representative; stability makes the choice irrelevant.
    """
    reps = [representative(b) for b in partition]
    delta = {}
    for i, rep in enumerate(reps):
        kids = lang.delta[rep]
        delta[i] = {c: partition.block_of(kids[c]) for c in lang.alphabet}

    return Automaton(
        states=range(len(reps)),
        alphabet=lang.alphabet,
        start=partition.block_of(lang.start),
        accepting=[i for i, rep in enumerate(reps) if rep in lang.accepting],
        delta=delta,
    )
