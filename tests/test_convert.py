import dfa

from minidfa import Automaton, isomorphic, minimize
from minidfa.convert import find_counterexample, from_dfa, to_dfa

from conftest import random_automaton, words


def test_to_dfa(worked_example):
    lang = to_dfa(worked_example)
    assert lang.inputs == {'a', 'b'}
    for word in words('ab', 4):
        assert lang.label(word) == (word in worked_example)


def test_from_dfa(worked_example):
    lang = from_dfa(to_dfa(worked_example))
    assert isomorphic(lang, worked_example)


def test_from_dfa_minimize():
    # Accepts words containing yellow but no red.
    def transition(s, c):
        if c == 'red':
            return s | 0b01
        elif c == 'yellow':
            return s | 0b10
        return s

    partial = dfa.DFA(
        start=0b00,
        inputs={'red', 'yellow', 'blue'},
        label=lambda s: s == 0b10,
        transition=transition,
    )
    lang = from_dfa(partial)
    assert lang.states == {0b00, 0b01, 0b10, 0b11}

    minimized = minimize(lang)
    assert len(minimized) == 3  # 0b01 and 0b11 are both sinks.
    assert ('blue', 'yellow') in minimized
    assert ('yellow', 'red') not in minimized
    assert find_counterexample(lang, minimized) is None


def test_find_counterexample(worked_example):
    minimized = minimize(worked_example)
    assert find_counterexample(worked_example, minimized) is None

    complement = Automaton(
        states=minimized.states,
        alphabet=minimized.alphabet,
        start=minimized.start,
        accepting=minimized.states - minimized.accepting,
        delta=minimized.delta,
    )
    word = find_counterexample(worked_example, complement)
    assert word is not None
    assert (tuple(word) in worked_example) != (tuple(word) in complement)


def test_random_equivalence():
    for seed in range(10):
        lang = random_automaton(seed, n_states=10)
        assert find_counterexample(lang, minimize(lang)) is None
