from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from typing import Union

import pydot

from minidfa.automaton import Automaton


__all__ = ['get_dot', 'write_dot']


FG_COLOR = 'white'
BG_COLOR = '#002b36'


def get_dot(lang: Automaton, bgcolor: str = BG_COLOR) -> pydot.Dot:
    g = pydot.Dot(rankdir="LR")

    nodes = {}
    for state in sorted(lang.states):
        shape = "doublecircle" if state in lang.accepting else "circle"
        nodes[state] = pydot.Node(
            f"q{state}", label=f"{state}", shape=shape,
            color=FG_COLOR, fontcolor=FG_COLOR,
        )
        g.add_node(nodes[state])

    # Merge parallel edges into a single labeled edge.
    edges = defaultdict(list)
    for start in sorted(lang.states):
        for letter in lang.letters:
            edges[start, lang.transition(start, letter)].append(str(letter))

    init_node = pydot.Node("init", shape="point", label="", color=FG_COLOR)
    g.add_node(init_node)
    g.add_edge(pydot.Edge(init_node, nodes[lang.start], color=FG_COLOR))

    for (start, end), letters in edges.items():
        g.add_edge(pydot.Edge(
            nodes[start], nodes[end], label=','.join(letters),
            color=FG_COLOR, fontcolor=FG_COLOR,
        ))
    g.set_bgcolor(bgcolor)
    return g


def write_dot(lang: Automaton, path: Union[str, Path]) -> None:
    Path(path).write_text(get_dot(lang).to_string())
