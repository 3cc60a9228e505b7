import pytest

from advent23.long_walk import (
    Junction,
    find_junctions,
    junction_dot,
    longest_downhill,
    longest_hike,
    longest_path,
)

EXAMPLE = """\
#.#####################
#.......#########...###
#######.#########.#.###
###.....#.>.>.###.#.###
###v#####.#v#.###.#.###
###.>...#.#.#.....#...#
###v###.#.#.#########.#
###...#.#.#.......#...#
#####.#.#.#######.#.###
#.....#.#.#.......#...#
#.#####.#.#.#########v#
#.#...#...#...###...>.#
#.#.#v#######v###.###v#
#...#.>.#...>.>.#.###.#
#####v#.#.###v#.#.###.#
#.....#...#...#.#.#...#
#.#########.###.#.#.###
#...###...#...#...#.###
###.###.#.###v#####v###
#...#...#.#.>.>.#.>.###
#.###.###.#.###.#.#v###
#.....###...###...#...#
#####################.#
"""

CORRIDOR = "#.###\n#...#\n###.#\n"


def _grid(text):
    return text.rstrip().splitlines()


def test_example_downhill():
    assert longest_path(EXAMPLE, slippery=True) == 94


def test_example_hike():
    assert longest_path(EXAMPLE, slippery=False) == 154


def test_hike_is_never_shorter_than_downhill():
    assert longest_path(EXAMPLE, slippery=False) >= longest_path(EXAMPLE, slippery=True)


def test_entrance_and_exit_positions():
    grid = _grid(EXAMPLE)
    nodes = find_junctions(grid)
    assert (nodes[0].i, nodes[0].j) == (0, 1)
    assert (nodes[1].i, nodes[1].j) == (len(grid) - 1, len(grid[0]) - 2)
    assert [n.index for n in nodes] == list(range(len(nodes)))


def test_undirected_edges_are_symmetric():
    nodes = find_junctions(_grid(EXAMPLE), slippery=False)
    edges = {(n.index, to, d) for n in nodes for to, d in n.dest}
    assert edges
    assert all((b, a, d) in edges for a, b, d in edges)


def test_directed_edges_are_among_undirected_ones():
    directed = find_junctions(_grid(EXAMPLE), slippery=True)
    undirected = find_junctions(_grid(EXAMPLE), slippery=False)
    d_edges = {(n.index, to, d) for n in directed for to, d in n.dest}
    u_edges = {(n.index, to, d) for n in undirected for to, d in n.dest}
    assert d_edges <= u_edges
    assert len(d_edges) < len(u_edges)


def test_longest_hike_on_hand_built_graph():
    nodes = [
        Junction(0, 0, 0, [(2, 5), (1, 3)]),
        Junction(1, 0, 0, [(2, 5), (0, 3)]),
        Junction(2, 0, 0, [(0, 5), (1, 5)]),
    ]
    assert longest_hike(nodes) == 10


def test_longest_downhill_agrees_on_acyclic_graph():
    nodes = [
        Junction(0, 0, 0, [(2, 5), (1, 3)]),
        Junction(1, 0, 0, []),
        Junction(2, 0, 0, [(1, 5)]),
    ]
    assert longest_downhill(nodes) == longest_hike(nodes)


def test_unreachable_exit_gives_zero():
    nodes = [Junction(0, 0, 0), Junction(1, 0, 0)]
    assert longest_downhill(nodes) == 0
    assert longest_hike(nodes) == 0


def test_downhill_cycle_is_an_error():
    nodes = [
        Junction(0, 0, 0, [(2, 1)]),
        Junction(1, 0, 0, []),
        Junction(2, 0, 0, [(0, 1), (1, 1)]),
    ]
    with pytest.raises(ValueError):
        longest_downhill(nodes)


def test_empty_map_is_an_error():
    with pytest.raises(ValueError):
        longest_path("")


def test_ragged_map_is_an_error():
    with pytest.raises(ValueError):
        longest_path("#.###\n#..#\n###.#\n")


def test_directed_dot():
    nodes = find_junctions(_grid(CORRIDOR))
    dot = junction_dot(nodes, directed=True)
    assert dot.startswith("digraph {\n  overlap=false\n")
    assert 'n0 [label="0:(0,1)",shape="box",style="filled",fillcolor="green"]' in dot
    assert 'n1 [label="1:(2,3)",shape="box",style="filled",fillcolor="red"]' in dot
    assert f'  n0 -> n1 [label="{CORRIDOR.count(".") - 1}"]' in dot
    assert dot.endswith("}\n")


def test_undirected_dot_lists_each_edge_once():
    nodes = find_junctions(_grid(CORRIDOR), slippery=False)
    dot = junction_dot(nodes, directed=False)
    assert dot.startswith("graph {")
    assert dot.count(" -- ") == 1
    assert " -> " not in dot