"""Unit tests for joist line layout."""

import pytest

from decking.domain import DeckConfig, DeckShape, Dimensions
from decking.domain.services import (
    JOIST_SPACING,
    JoistLayout,
    compute_joist_lines,
    joist_line_count,
)


class TestJoistLineCount:
    """Tests for joist_line_count."""

    @pytest.mark.parametrize(
        ("height", "expected"),
        [
            (3.0, 6),
            (3.2, 7),
            (0.5, 1),
            (0.1, 1),
            (2.0, 4),
        ],
    )
    def test_rounds_up(self, height: float, expected: int) -> None:
        """One line every 50 cm, rounded up."""
        assert joist_line_count(height) == expected

    def test_custom_spacing(self) -> None:
        assert joist_line_count(3.0, spacing=0.4) == 8


class TestComputeJoistLines:
    """Tests for compute_joist_lines."""

    def test_rectangular_has_one_section(self, rectangular_config: DeckConfig) -> None:
        layout = compute_joist_lines(rectangular_config)
        assert layout.section_counts == (6,)
        assert layout.line_count == 6
        assert layout.spacing == JOIST_SPACING

    def test_l_shape_adds_extension_section(self, l_config: DeckConfig) -> None:
        layout = compute_joist_lines(l_config)
        assert layout.section_counts == (6, 4)
        assert layout.line_count == 10

    def test_u_shape_has_two_identical_wings(self, u_config: DeckConfig) -> None:
        layout = compute_joist_lines(u_config)
        assert layout.section_counts == (6, 4, 4)
        assert layout.line_count == 14

    def test_total_length_is_area_based(self, l_config: DeckConfig) -> None:
        """Purchasing length is area x 3, independent of the line count."""
        assert compute_joist_lines(l_config).total_length == pytest.approx(48.0)

    def test_total_length_rectangular(self, rectangular_config: DeckConfig) -> None:
        assert compute_joist_lines(rectangular_config).total_length == pytest.approx(36.0)

    def test_wing_height_drives_wing_count(self) -> None:
        config = DeckConfig(
            shape=DeckShape.L_SHAPED,
            dimensions=Dimensions(
                width=4.0, height=3.0, extension_width=2.0, extension_height=2.6
            ),
        )
        assert compute_joist_lines(config).section_counts == (6, 6)


class TestJoistLayout:
    """Tests for JoistLayout value object."""

    def test_line_count_sums_sections(self) -> None:
        layout = JoistLayout(section_counts=(3, 2, 2), total_length=10.0)
        assert layout.line_count == 7


class TestMonotonicity:
    """Line counts never decrease as sections get longer."""

    def test_non_decreasing_in_height(self) -> None:
        heights = [1.0 + 0.1 * i for i in range(60)]
        counts = [joist_line_count(h) for h in heights]
        assert counts == sorted(counts)

    def test_non_decreasing_in_extension_height(self, l_config: DeckConfig) -> None:
        heights = [2.0 + 0.25 * i for i in range(12)]
        counts = [
            compute_joist_lines(l_config.with_dimensions(extension_height=h)).line_count
            for h in heights
        ]
        assert counts == sorted(counts)
