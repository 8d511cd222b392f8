"""
Rect 幾何運算測試
"""

import pytest

from src.common.geometry import Rect


class TestRectBasics:
    """尺寸與單位格走訪"""

    @pytest.mark.unit
    def test_from_origin(self) -> None:
        rect = Rect.from_origin(3, 2, 5, 4)
        assert rect == Rect(left=3, top=2, right=8, bottom=6)
        assert rect.width() == 5
        assert rect.height() == 4
        assert rect.area() == 20

    @pytest.mark.unit
    def test_cells_cover_exact_area(self) -> None:
        rect = Rect.from_origin(1, 3, 4, 4)
        cells = list(rect.cells())
        assert len(cells) == 16
        assert len(set(cells)) == 16
        assert (1, 3) in cells
        assert (4, 6) in cells
        assert (5, 3) not in cells
        assert (1, 7) not in cells

    @pytest.mark.unit
    @pytest.mark.parametrize(("width", "height"), [(0, 3), (3, 0), (0, 0)])
    def test_degenerate_rect_has_no_cells(self, width: int, height: int) -> None:
        rect = Rect.from_origin(2, 2, width, height)
        assert rect.area() == 0
        assert list(rect.cells()) == []
