from typing import Any, Hashable, Sequence

State = Any  # Must be hashable and orderable.
Letter = Hashable  # Mixed types are ordered by type name first.
Word = Sequence[Letter]
Block = frozenset  # Block of a partition, i.e., a set of states.
Signature = tuple[int, ...]

from minidfa.automaton import *
from minidfa.partition import *
from minidfa.reachability import *
from minidfa.rebuild import *
from minidfa.minimize import *
from minidfa.textio import *

__all__ = [
    'Automaton',
    'Block',
    'FormatError',
    'Letter',
    'Minimization',
    'Partition',
    'Signature',
    'State',
    'Word',
    'coarsest_partition',
    'dump',
    'dumps',
    'initial_partition',
    'isomorphic',
    'load',
    'loads',
    'minimization',
    'minimize',
    'pretty',
    'prune',
    'reachable',
    'rebuild',
    'refinements',
    'representative',
]
