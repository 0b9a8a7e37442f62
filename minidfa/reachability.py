from __future__ import annotations

import networkx as nx

from minidfa import State
from minidfa.automaton import Automaton


__all__ = ['prune', 'reachable']


def reachable(lang: Automaton) -> frozenset[State]:
    """Returns the states reachable from start, including start."""
    graph = lang.graph()
    return frozenset(nx.descendants(graph, lang.start)) | {lang.start}


def prune(lang: Automaton) -> Automaton:
    """Removes unreachable states along with their transitions."""
    states = reachable(lang)
    if states == lang.states:
        return lang
    return lang.restrict(states)
