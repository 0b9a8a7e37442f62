"""Plain text reader, writer and console report for automata.

Input layout, one record per line:

    3               <- number of states, states are 0..N-1
    a b             <- single character letters
    0               <- start state
    2               <- accepting states (may be blank)
    0 a 1           <- transitions: from letter to
    ...
"""
from __future__ import annotations

from itertools import product
from pathlib import Path
from typing import Optional, Union

import attr

from minidfa import State
from minidfa.automaton import Automaton, ordered


__all__ = ['FormatError', 'dump', 'dumps', 'load', 'loads', 'pretty']


PathLike = Union[str, Path]
HEADER = ('state count', 'alphabet', 'start state', 'accepting states')


class FormatError(ValueError):
    def __init__(self, msg: str, lineno: Optional[int] = None):
        if lineno is not None:
            msg = f'line {lineno}: {msg}'
        super().__init__(msg)
        self.lineno = lineno


@attr.define
class Reader:
    lines: list[str]
    n_states: int = 0

    def header(self, lineno: int) -> list[str]:
        if lineno > len(self.lines):
            raise FormatError(f'missing {HEADER[lineno - 1]}.', lineno)
        return self.lines[lineno - 1].split()

    def state(self, token: str, lineno: int) -> int:
        try:
            state = int(token)
        except ValueError:
            raise FormatError(f'{token!r} is not a state.', lineno) from None
        if not 0 <= state < self.n_states:
            raise FormatError(f'state {state} out of range.', lineno)
        return state

    def read(self) -> Automaton:
        count = self.header(1)
        try:
            self.n_states, = map(int, count)
        except ValueError:
            raise FormatError('state count must be an integer.', 1) from None
        if self.n_states < 1:
            raise FormatError('need at least one state.', 1)

        alphabet = self.header(2)
        for letter in alphabet:
            if len(letter) != 1:
                raise FormatError(f'letter {letter!r} is not one char.', 2)

        tokens = self.header(3)
        if len(tokens) != 1:
            raise FormatError('expected exactly one start state.', 3)
        start = self.state(tokens[0], 3)
        accepting = [self.state(s, 4) for s in self.header(4)]

        delta: dict[State, dict[str, State]] = {}
        for lineno, line in enumerate(self.lines[4:], start=5):
            parts = line.split()
            if not parts:
                continue
            if len(parts) != 3:
                raise FormatError(f'invalid transition {line.strip()!r}', lineno)
            src, letter, dst = parts
            if letter not in alphabet:
                raise FormatError(f'unknown letter {letter!r}.', lineno)
            src, dst = self.state(src, lineno), self.state(dst, lineno)
            kids = delta.setdefault(src, {})
            if kids.get(letter, dst) != dst:
                raise FormatError(f'conflicting {src} {letter} edges.', lineno)
            kids[letter] = dst

        for src, letter in product(range(self.n_states), alphabet):
            if letter not in delta.get(src, {}):
                raise FormatError(f'no transition from {src} on {letter!r}.')

        return Automaton(
            states=range(self.n_states),
            alphabet=alphabet,
            start=start,
            accepting=accepting,
            delta={s: delta.get(s, {}) for s in range(self.n_states)},
        )


def loads(text: str) -> Automaton:
    return Reader(text.splitlines()).read()


def load(path: PathLike) -> Automaton:
    try:
        text = Path(path).read_text()
    except UnicodeDecodeError as e:
        raise FormatError(f'{path} is not a text file ({e.reason}).') from e
    return loads(text)


def _rows(lang: Automaton) -> list[tuple[State, str, State]]:
    return [
        (s, c, lang.transition(s, c))
        for s, c in product(sorted(lang.states), lang.letters)
    ]


def _join(values, sep: str = ',') -> str:
    return sep.join(map(str, ordered(values)))


def dumps(lang: Automaton) -> str:
    lines = [
        f'States: {_join(lang.states)}',
        f'Alphabet: {_join(lang.alphabet)}',
        f'StartState: {lang.start}',
        f'FinalStates: {_join(lang.accepting)}',
        'Transitions:',
    ]
    lines.extend(f'{s} {c} {t}' for s, c, t in _rows(lang))
    return '\n'.join(lines) + '\n'


def dump(lang: Automaton, path: PathLike) -> None:
    Path(path).write_text(dumps(lang))


def pretty(lang: Automaton, title: str = 'Minimized DFA') -> str:
    """Human readable report for printing to a console."""
    lines = [
        f'--- {title} ---',
        '',
        f'States: {_join(lang.states, ", ")}',
        f'Alphabet: {_join(lang.alphabet, ", ")}',
        f'Start State: {lang.start}',
        f'Final States: {_join(lang.accepting, ", ")}',
        'Transitions:',
    ]
    lines.extend(f'  {s} --{c}--> {t}' for s, c, t in _rows(lang))
    lines += ['', f'--- End of {title} ---']
    return '\n'.join(lines)
