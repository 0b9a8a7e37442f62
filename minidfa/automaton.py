from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping

import attr
import funcy as fn
import networkx as nx

from minidfa import Letter, State, Word


__all__ = ['Automaton', 'isomorphic', 'ordered']


Delta = Mapping[State, Mapping[Letter, State]]


def freeze_delta(delta: Delta) -> Delta:
    return MappingProxyType({
        state: MappingProxyType(dict(kids)) for state, kids in delta.items()
    })


def ordered(values: Iterable[Any]) -> list[Any]:
    """Sorts values, grouping by type so mixed letters stay comparable."""
    return sorted(values, key=lambda x: (type(x).__name__, x))


def check_total(lang: Automaton) -> None:
    for state in lang.states:
        kids = lang.delta.get(state)
        if kids is None:
            raise ValueError(f'{state=} has no transitions.')
        for letter in lang.alphabet:
            if letter not in kids:
                raise ValueError(f'{state=} has no transition on {letter=}.')
            if kids[letter] not in lang.states:
                raise ValueError(f'{state=} on {letter=} leaves the states.')


@attr.frozen
class Automaton:
    """Complete deterministic finite automaton.

    The transition function `delta` maps each state to a read-only mapping
    from letters to successor states and must be total over states x
    alphabet.
    """
    states: frozenset[State] = attr.ib(converter=frozenset)
    alphabet: frozenset[Letter] = attr.ib(converter=frozenset)
    start: State
    accepting: frozenset[State] = attr.ib(converter=frozenset)
    delta: Delta = attr.ib(converter=freeze_delta, repr=False, hash=False)

    def __attrs_post_init__(self) -> None:
        if self.start not in self.states:
            raise ValueError(f'start={self.start} is not a state.')
        if not self.accepting <= self.states:
            extra = set(self.accepting - self.states)
            raise ValueError(f'Accepting states {extra} are not states.')
        check_total(self)

    @property
    def letters(self) -> list[Letter]:
        return ordered(self.alphabet)

    def transition(self, state: State, letter: Letter) -> State:
        return self.delta[state][letter]

    def run(self, word: Word) -> State:
        """Returns the state reached after reading word from start."""
        state = self.start
        for letter in word:
            state = self.transition(state, letter)
        return state

    def accepts(self, word: Word) -> bool:
        return self.run(word) in self.accepting

    def __contains__(self, word: Word) -> bool:
        return self.accepts(word)

    def __len__(self) -> int:
        return len(self.states)

    def graph(self) -> nx.DiGraph:
        """Labeled transition graph.

        Nodes carry an `accepting` flag and each edge carries the
        frozenset of `letters` that move between its endpoints.
        """
        graph = nx.DiGraph()
        for state in self.states:
            graph.add_node(state, accepting=state in self.accepting)

        for state in self.states:
            kids = fn.group_by(self.delta[state].get, self.alphabet)
            for kid, letters in kids.items():
                graph.add_edge(state, kid, letters=frozenset(letters))
        return graph

    def restrict(self, states: Iterable[State]) -> Automaton:
        """Sub-automaton on states; states must be closed under delta."""
        states = frozenset(states)
        return Automaton(
            states=states,
            alphabet=self.alphabet,
            start=self.start,
            accepting=self.accepting & states,
            delta={s: self.delta[s] for s in states},
        )


def isomorphic(lang1: Automaton, lang2: Automaton) -> bool:
    """Checks if the automata only differ by a renaming of states."""
    if lang1.alphabet != lang2.alphabet or len(lang1) != len(lang2):
        return False

    def marked(lang: Automaton) -> nx.DiGraph:
        graph = lang.graph()
        for node, data in graph.nodes(data=True):
            data['start'] = node == lang.start
        return graph

    def same(data1: dict[str, Any], data2: dict[str, Any]) -> bool:
        return data1 == data2

    return nx.is_isomorphic(
        marked(lang1), marked(lang2), node_match=same, edge_match=same,
    )
