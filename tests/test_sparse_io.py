import numpy as np
import pytest
from conftest import assert_shells_consistent

from cayleynet.algorithms.cayley import cayley_color_graph
from cayleynet.core._helpers import MalformedSparseFileWarning
from cayleynet.io.sparse_io import (
    VertexCollection,
    read_color_group_graph,
    read_sparse_graph,
    read_vertex_collection,
    write_indexed_elements,
    write_sparse_color_graph,
    write_sparse_graph,
    write_vertex_collection,
)

STAR_LINES = "1 2 1\n1 3 1\n2 1 1\n2 4 1\n3 1 1\n4 2 1\n"
STAR_COLOR_LINES = "1 2 1\n1 3 2\n2 4 1\n2 1 3\n3 1 4\n4 2 3\n"


class TestWrite:
    def test_unlabeled(self, star_graph, tmpdir_fixture):
        path = tmpdir_fixture / "star.txt"
        write_sparse_graph(star_graph, path)
        assert path.read_text() == STAR_LINES

    def test_colored(self, color_graph, tmpdir_fixture):
        path = tmpdir_fixture / "star_colors.txt"
        write_sparse_color_graph(color_graph, path)
        assert path.read_text() == STAR_COLOR_LINES

    def test_indexed_elements(self, star_graph, tmpdir_fixture):
        path = tmpdir_fixture / "elements.txt"
        write_indexed_elements(star_graph, path, header="# star")
        assert path.read_text() == "# star\nr\na\nb\nc\n"
        write_indexed_elements(star_graph, path, to_str=str.upper)
        assert path.read_text() == "R\nA\nB\nC\n"


class TestReadSparseGraph:
    def test_round_trip_star(self, star_graph, tmpdir_fixture):
        path = tmpdir_fixture / "star.txt"
        write_sparse_graph(star_graph, path)
        g = read_sparse_graph(path)
        assert g.is_finished
        assert g.vertex_count() == 4
        np.testing.assert_array_equal(g.shell_sizes(), star_graph.shell_sizes())
        # the single-vertex last shell is kept
        assert g.shell(2) == [4]
        assert g.neighbors_of(1) == (2, 3)
        assert g.has_edge(2, 4) and g.has_edge(4, 2)
        assert (g.adjacency_matrix() != star_graph.adjacency_matrix()).nnz == 0

    def test_unsorted_lines_and_blank_lines(self, tmpdir_fixture):
        path = tmpdir_fixture / "messy.txt"
        path.write_text("2 1 1\n\n1 3 1\n1 2 1\n3 1 1\n")
        g = read_sparse_graph(path)
        assert g.vertex_count() == 3
        assert g.neighbors_of(1) == (2, 3)
        np.testing.assert_array_equal(g.shell_sizes(), [1, 2])

    def test_malformed_line_gives_empty_graph(self, tmpdir_fixture):
        path = tmpdir_fixture / "bad.txt"
        path.write_text("1 2 1\n2 1 x\n")
        with pytest.warns(MalformedSparseFileWarning):
            g = read_sparse_graph(path)
        assert g.vertex_count() == 0
        assert g.root is None
        assert g.shell(0) == []

    def test_malformed_line_strict(self, tmpdir_fixture):
        path = tmpdir_fixture / "bad.txt"
        path.write_text("1 2 1\n2 1\n")
        with pytest.raises(ValueError):
            read_sparse_graph(path, strict=True)

    def test_zero_index_is_malformed(self, tmpdir_fixture):
        path = tmpdir_fixture / "zero.txt"
        path.write_text("0 1 1\n1 0 1\n")
        with pytest.raises(ValueError):
            read_sparse_graph(path, strict=True)


class TestReadColorGroupGraph:
    def test_star(self, color_graph, tmpdir_fixture):
        path = tmpdir_fixture / "star_colors.txt"
        write_sparse_color_graph(color_graph, path)
        group = read_color_group_graph(path)
        assert group.order == 4
        assert group.shell_start_indices() == (1, 2, 4)
        assert dict(group.color_involution()) == {1: 3, 2: 4, 3: 1, 4: 2}
        c = group.element(4)
        assert group.navigator.shortest_path_to(c) == [1, 1]
        assert group.neighbor(c, 3) == group.element(2)

    def test_s4_round_trip(self, s4_generators, tmpdir_fixture):
        G = cayley_color_graph(s4_generators)
        path = tmpdir_fixture / "s4.txt"
        write_sparse_color_graph(G, path)
        group = read_color_group_graph(path)
        assert group.order == 24
        assert group.is_regular and group.degree == 3
        np.testing.assert_array_equal(group.shell_sizes(), G.shell_sizes())
        assert_shells_consistent(group)
        perm = G.element_at
        for i in range(1, 25):
            for j in (3, 11, 20):
                prod = group.element(i) * group.element(j)
                assert perm(prod.index) == perm(i) * perm(j)

    def test_missing_reverse_edge(self, tmpdir_fixture):
        path = tmpdir_fixture / "oneway.txt"
        path.write_text("1 2 1\n")
        with pytest.warns(MalformedSparseFileWarning):
            group = read_color_group_graph(path)
        assert group.order == 0
        with pytest.raises(ValueError):
            read_color_group_graph(path, strict=True)

    def test_repeated_label_at_vertex(self, tmpdir_fixture):
        path = tmpdir_fixture / "twice.txt"
        path.write_text("1 2 1\n1 3 1\n2 1 1\n3 1 1\n")
        with pytest.warns(MalformedSparseFileWarning):
            group = read_color_group_graph(path)
        assert group.order == 0
        with pytest.raises(ValueError, match="twice"):
            read_color_group_graph(path, strict=True)


class TestVertexCollection:
    def test_round_trip(self, s4_generators, tmpdir_fixture):
        from cayleynet.core._ColorGroup import ColorGroupGraph

        group = ColorGroupGraph.from_color_graph(cayley_color_graph(s4_generators))
        path = tmpdir_fixture / "subset.txt"
        write_vertex_collection(path, [group.element(3), 5, group.root], group.order, "S4")
        lines = path.read_text().splitlines()
        assert lines[:2] == ["ORIGIN: S4", "ORDER: 24"]
        assert read_vertex_collection(path) == VertexCollection("S4", 24, [3, 5, 1])

    def test_missing_header(self, tmpdir_fixture):
        path = tmpdir_fixture / "noheader.txt"
        path.write_text("1\n2\n")
        with pytest.raises(ValueError):
            read_vertex_collection(path)
