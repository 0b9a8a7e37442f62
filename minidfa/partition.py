"""Moore style partition refinement of the states of an automaton."""
from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

import attr
import funcy as fn

from minidfa import Block, Letter, Signature, State
from minidfa.automaton import Automaton


__all__ = [
    'Partition',
    'coarsest_partition',
    'initial_partition',
    'refinements',
]


def index_blocks(blocks: tuple[Block, ...]) -> dict[State, int]:
    return {state: i for i, block in enumerate(blocks) for state in block}


@attr.frozen
class Partition:
    """Set partition of states into disjoint, non-empty blocks.

    Blocks are kept sorted by their smallest member, so two partitions
    with the same blocks are equal and block indices only depend on
    membership.
    """
    blocks: tuple[Block, ...]
    index: dict[State, int] = attr.ib(eq=False, repr=False)

    @staticmethod
    def from_blocks(blocks: Iterable[Iterable[State]]) -> Partition:
        frozen = (frozenset(b) for b in blocks)
        ordered = tuple(sorted(filter(None, frozen), key=min))
        index = index_blocks(ordered)
        if len(index) != sum(map(len, ordered)):
            raise ValueError('Blocks of a partition must be disjoint.')
        return Partition(blocks=ordered, index=index)

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def block_of(self, state: State) -> int:
        """Returns the index of the block containing state."""
        return self.index[state]

    def signature(
            self,
            lang: Automaton,
            state: State,
            letters: Optional[Sequence[Letter]] = None,
        ) -> Signature:
        if letters is None:
            letters = lang.letters
        kids = lang.delta[state]
        return tuple(self.block_of(kids[c]) for c in letters)

    def split(
            self,
            lang: Automaton,
            block: Block,
            letters: Optional[Sequence[Letter]] = None,
        ) -> list[Block]:
        """Splits block into sub-blocks of states with equal signatures."""
        if letters is None:
            letters = lang.letters
        signature = fn.partial(self.signature, lang, letters=letters)
        groups = fn.group_by(signature, block)
        return [frozenset(g) for g in groups.values()]

    def refine(self, lang: Automaton) -> Partition:
        """Performs one refinement round against this partition."""
        split = fn.partial(self.split, lang, letters=lang.letters)
        blocks = fn.mapcat(split, self.blocks)
        return Partition.from_blocks(blocks)


def initial_partition(lang: Automaton) -> Partition:
    rejecting = lang.states - lang.accepting
    return Partition.from_blocks([lang.accepting, rejecting])


def refinements(lang: Automaton) -> Iterator[Partition]:
    """Yields the initial partition followed by each proper refinement.

    Stops after the first round in which no block splits. Since the
    number of blocks grows every round and is bounded by the number of
    states, at most len(lang) partitions are yielded.
    """
    partition = initial_partition(lang)
    while True:
        yield partition
        refined = partition.refine(lang)
        if len(refined) == len(partition):
            return
        partition = refined


def coarsest_partition(lang: Automaton) -> Partition:
    """Coarsest partition respecting acceptance and transitions."""
    return fn.last(refinements(lang))
