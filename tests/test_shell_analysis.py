import numpy as np
import polars as pl
import pytest

from cayleynet.algorithms.cayley import cayley_color_graph, cayley_graph
from cayleynet.algorithms.shell_analysis import ShellExpansionAnalyzer
from cayleynet.core._helpers import MalformedSparseFileWarning
from cayleynet.groups.permutation import Permutation
from cayleynet.io.sparse_io import read_sparse_graph


@pytest.fixture
def s3_analyzer(s3_generators):
    an = ShellExpansionAnalyzer(cayley_color_graph(s3_generators))
    an.generate_data()
    return an


class TestShellExpansionAnalyzer:
    def test_radial_arrays(self, s3_analyzer):
        np.testing.assert_array_equal(s3_analyzer.s_n, [1, 3, 2])
        np.testing.assert_array_equal(s3_analyzer.e_n, [0, 3, 4])
        np.testing.assert_array_equal(s3_analyzer.t_n, [0, 1, 1])
        # every edge is counted once
        total = s3_analyzer.e_n.sum() + s3_analyzer.t_n.sum()
        assert total == s3_analyzer.num_edges == 9

    def test_summary(self, s3_analyzer):
        assert s3_analyzer.num_vertices == 6
        assert s3_analyzer.diameter == 2
        assert s3_analyzer.girth == 3
        assert not s3_analyzer.bipartite
        assert s3_analyzer.root_degree == 3
        assert s3_analyzer.avg_dist == pytest.approx(7 / 6)

    def test_even_cycle(self):
        # Cayley graph of Z/6 with one generator: the 6-cycle
        an = ShellExpansionAnalyzer(cayley_graph([Permutation.cycle(6, 0, 1, 2, 3, 4, 5)]))
        an.generate_data()
        np.testing.assert_array_equal(an.s_n, [1, 2, 2, 1])
        assert an.bipartite
        assert an.girth == 6

    def test_tree_has_no_girth(self, star_graph):
        an = ShellExpansionAnalyzer(star_graph)
        an.generate_data()
        assert an.girth == 0
        assert an.bipartite

    def test_tables(self, s3_analyzer):
        basic = s3_analyzer.basic_table()
        assert basic.columns == ["vertices", "edges", "bipartite", "avg_dist", "diameter", "girth"]
        assert basic.row(0)[:3] == (6, 9, False)

        vs = s3_analyzer.vertex_shell_table()
        assert vs["size"].to_list() == [1, 3, 2]
        assert vs["growth"].to_list() == [None, 3.0, pytest.approx(2 / 3)]

        et = s3_analyzer.edge_table()
        assert et["n"].to_list() == [1, 2]
        assert et["edges"].to_list() == [3, 4]
        assert et["tangential"].to_list() == [1, 1]
        assert et["growth"][0] is None
        assert et["edges_per_vertex"].to_list() == [1.0, 2.0]
        assert isinstance(et, pl.DataFrame)

    def test_files(self, s3_analyzer, tmpdir_fixture):
        basic = tmpdir_fixture / "basic.txt"
        radial = tmpdir_fixture / "radial.txt"
        s3_analyzer.write_basic_data(basic)
        s3_analyzer.write_radial_data(radial)
        assert basic.read_text() == "6 3 2 3 0"
        assert radial.read_text() == "1 0 0\n3 3 1\n2 4 1\n"

    def test_requires_generate(self, star_graph):
        with pytest.raises(RuntimeError):
            ShellExpansionAnalyzer(star_graph).basic_table()

    def test_empty_graph_from_malformed_read(self, tmpdir_fixture):
        src = tmpdir_fixture / "bad.txt"
        src.write_text("1 2 x\n")
        with pytest.warns(MalformedSparseFileWarning):
            g = read_sparse_graph(src)
        an = ShellExpansionAnalyzer(g)
        an.generate_data()
        assert an.num_vertices == 0
        assert an.root_degree == 0
        assert an.girth == 0
        assert an.edge_table().height == 0
        basic = tmpdir_fixture / "basic.txt"
        an.write_basic_data(basic)
        assert basic.read_text() == "0 0 0 0 1"
