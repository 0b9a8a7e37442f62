from minidfa import minimize
from minidfa.vis import get_dot, write_dot


def test_get_dot(worked_example):
    lang = minimize(worked_example)
    g = get_dot(lang)

    # 3 states + marker for the start state.
    assert len(g.get_nodes()) == 4
    # Parallel edges are merged: 0->1, 1->1, 1->2, 2->2 + start edge.
    assert len(g.get_edges()) == 5

    source = g.to_string()
    assert 'doublecircle' in source
    assert 'a,b' in source
    assert 'rankdir=LR' in source


def test_write_dot(tmp_path, worked_example):
    path = tmp_path / 'min.dot'
    write_dot(minimize(worked_example), path)
    assert path.read_text().lstrip().startswith('digraph')
