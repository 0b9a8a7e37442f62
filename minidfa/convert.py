"""Conversion to and from the dfa library's DFA objects."""
from __future__ import annotations

from typing import Optional

import dfa
from dfa.utils import find_equiv_counterexample

from minidfa import Word
from minidfa.automaton import Automaton


__all__ = ['find_counterexample', 'from_dfa', 'to_dfa']


def to_dfa(lang: Automaton) -> dfa.DFA:
    return dfa.DFA(
        start=lang.start,
        inputs=lang.alphabet,
        label=lambda s: s in lang.accepting,
        transition=lang.transition,
    )


def from_dfa(lang: dfa.DFA) -> Automaton:
    """Explicit Automaton over the states of lang reachable from its start."""
    assert lang.outputs <= {True, False}

    graph, start = dfa.dfa2dict(lang)
    return Automaton(
        states=graph.keys(),
        alphabet=lang.inputs,
        start=start,
        accepting=[s for s, (label, _) in graph.items() if label],
        delta={s: kids for s, (_, kids) in graph.items()},
    )


def find_counterexample(lang1: Automaton, lang2: Automaton) -> Optional[Word]:
    """Returns a word exactly one of the automata accepts, if one exists."""
    return find_equiv_counterexample(to_dfa(lang1), to_dfa(lang2))
