"""Unit tests for the distance matrix and its HTML rendering."""

from src.domain.distance import estimate
from src.domain.links import LinkGraph
from src.domain.matrix import DistanceMatrix, MatrixRenderer
from src.domain.registry import PointRegistry
from tests.conftest import P0, P1, P2


def _registry(*coords) -> PointRegistry:
    registry = PointRegistry()
    for lat, lng in coords:
        registry.add(lat, lng)
    return registry


class TestMatrixRenderer:
    def setup_method(self):
        self.renderer = MatrixRenderer()

    def test_empty_registry(self):
        matrix = self.renderer.render(PointRegistry(), LinkGraph())
        assert matrix.ids == []
        assert matrix.rows == []

    def test_single_link_among_three_points(self):
        registry = _registry(P0, P1, P2)
        graph = LinkGraph()
        graph.begin_selection(0)
        graph.begin_selection(1)

        matrix = self.renderer.render(registry, graph)
        expected = f"{estimate(*P0, *P1)} meter"

        assert matrix.ids == [0, 1, 2]
        assert matrix.cell(0, 1) == expected
        assert matrix.cell(1, 0) == expected
        for i in range(3):
            for j in range(3):
                if {i, j} != {0, 1}:
                    assert matrix.cell(i, j) == "undefined"

    def test_diagonal_is_undefined(self):
        registry = _registry(P0, P1)
        graph = LinkGraph()
        graph.begin_selection(0)
        graph.begin_selection(1)
        matrix = self.renderer.render(registry, graph)
        assert matrix.cell(0, 0) == "undefined"
        assert matrix.cell(1, 1) == "undefined"

    def test_custom_markers(self):
        renderer = MatrixRenderer(unit=" m", undefined="-")
        registry = _registry(P0, P1)
        graph = LinkGraph()
        graph.begin_selection(1)
        graph.begin_selection(0)
        matrix = renderer.render(registry, graph)
        assert matrix.cell(0, 1).endswith(" m")
        assert matrix.cell(0, 0) == "-"

    def test_rebuild_reflects_new_links(self):
        registry = _registry(P0, P1, P2)
        graph = LinkGraph()
        before = self.renderer.render(registry, graph)
        graph.begin_selection(2)
        graph.begin_selection(0)
        after = self.renderer.render(registry, graph)
        assert before.cell(2, 0) == "undefined"
        assert after.cell(2, 0) != "undefined"


class TestHtml:
    def test_table_layout(self):
        matrix = DistanceMatrix(
            ids=[0, 1],
            rows=[["undefined", "5 meter"], ["5 meter", "undefined"]],
        )
        assert MatrixRenderer.to_html(matrix) == (
            '<table class="table table-bordered"><tbody>'
            "<tr><td>from / to</td><td>0</td><td>1</td></tr>"
            "<tr><td>0</td><td>undefined</td><td>5 meter</td></tr>"
            "<tr><td>1</td><td>5 meter</td><td>undefined</td></tr>"
            "</tbody></table>"
        )

    def test_empty_table_has_header_only(self):
        html = MatrixRenderer.to_html(DistanceMatrix())
        assert html == (
            '<table class="table table-bordered"><tbody>'
            "<tr><td>from / to</td></tr></tbody></table>"
        )

    def test_id_list_text(self):
        assert MatrixRenderer.id_list_text(_registry(P0, P1, P2)) == " 0 1 2"
        assert MatrixRenderer.id_list_text(PointRegistry()) == ""
