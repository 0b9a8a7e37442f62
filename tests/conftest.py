import random
from itertools import product

import pytest

from minidfa import Automaton


WORKED_EXAMPLE = """\
5
a b
0
4
0 a 1
0 b 3
1 a 2
1 b 4
2 a 1
2 b 4
3 a 2
3 b 4
4 a 4
4 b 4
"""

EXPECTED_REPORT = """\
States: 0,1,2
Alphabet: a,b
StartState: 0
FinalStates: 2
Transitions:
0 a 1
0 b 1
1 a 1
1 b 2
2 a 2
2 b 2
"""


@pytest.fixture
def worked_example() -> Automaton:
    return Automaton(
        states=range(5),
        alphabet='ab',
        start=0,
        accepting={4},
        delta={
            0: {'a': 1, 'b': 3},
            1: {'a': 2, 'b': 4},
            2: {'a': 1, 'b': 4},
            3: {'a': 2, 'b': 4},
            4: {'a': 4, 'b': 4},
        },
    )


def random_automaton(seed: int, n_states: int = 8, alphabet='ab') -> Automaton:
    rng = random.Random(seed)
    states = range(n_states)
    return Automaton(
        states=states,
        alphabet=alphabet,
        start=rng.choice(states),
        accepting=[s for s in states if rng.random() < 0.3],
        delta={s: {c: rng.choice(states) for c in alphabet} for s in states},
    )


def words(alphabet, max_len: int):
    for n in range(max_len + 1):
        yield from product(sorted(alphabet), repeat=n)
