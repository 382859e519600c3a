"""Unit tests for the deck plan layout."""

import pytest

from decking.domain import DeckConfig, EdgeSelection, Side
from decking.domain.services import PanelRect, TrimSegment, compute_layout


class TestPanels:
    """Tests for panel placement."""

    def test_rectangular_single_panel_at_origin(
        self, rectangular_config: DeckConfig
    ) -> None:
        layout = compute_layout(rectangular_config)
        assert layout.panels == (PanelRect("main", 0.0, 0.0, 4.0, 3.0),)

    def test_l_wing_on_the_right(self, l_config: DeckConfig) -> None:
        """The L wing hangs from the top edge against the right side."""
        layout = compute_layout(l_config)
        names = [panel.name for panel in layout.panels]
        assert names == ["main", "extension"]
        extension = layout.panels[1]
        assert (extension.x, extension.y) == (4.0, 0.0)
        assert (extension.width, extension.height) == (2.0, 2.0)

    def test_u_wings_on_both_sides(self, u_config: DeckConfig) -> None:
        layout = compute_layout(u_config)
        left, right = layout.panels[1], layout.panels[2]
        assert left.name == "extension_left"
        assert left.x == -2.0
        assert left.right == 0.0
        assert right.name == "extension_right"
        assert right.x == 4.0

    def test_panel_areas_sum_to_deck_area(self, u_config: DeckConfig) -> None:
        layout = compute_layout(u_config)
        assert sum(panel.area for panel in layout.panels) == pytest.approx(20.0)

    def test_bounds(self, u_config: DeckConfig) -> None:
        assert compute_layout(u_config).bounds == (-2.0, 0.0, 6.0, 3.0)


class TestJoistLines:
    """Tests for joist line placement."""

    def test_lines_every_half_meter(self, rectangular_config: DeckConfig) -> None:
        lines = compute_layout(rectangular_config).lines_for("main")
        assert [line.y for line in lines] == pytest.approx(
            [0.0, 0.5, 1.0, 1.5, 2.0, 2.5]
        )

    def test_lines_span_panel_width(self, l_config: DeckConfig) -> None:
        layout = compute_layout(l_config)
        for line in layout.lines_for("extension"):
            assert line.x_start == 4.0
            assert line.x_end == 6.0
            assert line.length == pytest.approx(2.0)

    def test_line_total_matches_joist_count(self, u_config: DeckConfig) -> None:
        layout = compute_layout(u_config)
        assert len(layout.joist_lines) == 14
        assert len(layout.lines_for("extension_left")) == 4


class TestTrimSegments:
    """Tests for trim segments along the main panel."""

    def test_all_sides_by_default(self, rectangular_config: DeckConfig) -> None:
        segments = compute_layout(rectangular_config).trim_segments
        assert [segment.side for segment in segments] == [
            Side.TOP,
            Side.BOTTOM,
            Side.LEFT,
            Side.RIGHT,
        ]
        assert sum(segment.length for segment in segments) == pytest.approx(14.0)

    def test_follows_selection(self, rectangular_config: DeckConfig) -> None:
        config = rectangular_config.with_updates(
            edge_selection=EdgeSelection(top=False, bottom=True, left=False, right=False)
        )
        segments = compute_layout(config).trim_segments
        assert segments == (TrimSegment(Side.BOTTOM, (0.0, 3.0), (4.0, 3.0)),)

    def test_none_when_edges_disabled(self, rectangular_config: DeckConfig) -> None:
        config = rectangular_config.with_updates(include_edges=False)
        assert compute_layout(config).trim_segments == ()
