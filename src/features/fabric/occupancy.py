"""
布料佔用圖模組

將宣告逐格累加為稀疏佔用圖：單位格 -> 依輸入順序排列的宣告編號
佔用圖僅在建構期間可變，完成後即為唯讀，可安全共用
"""

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor

from src.common.geometry import Cell, Rect
from src.data_model import Claim


logger = logging.getLogger(__name__)


class OccupancyMap(Mapping[Cell, tuple[int, ...]]):
    """
    唯讀稀疏佔用圖

    只有被至少一個宣告涵蓋的單位格才會出現在鍵中，
    每個單位格的編號序列依宣告輸入順序排列
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Mapping[Cell, Sequence[int]] | None = None) -> None:
        """
        初始化佔用圖

        Args:
            cells: 單位格到宣告編號的對應，空序列的單位格會被略過
        """
        self._cells: dict[Cell, tuple[int, ...]] = {}
        if cells:
            for cell, ids in cells.items():
                if ids:
                    self._cells[cell] = tuple(ids)

    def __getitem__(self, cell: Cell) -> tuple[int, ...]:
        return self._cells[cell]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"OccupancyMap(cells={len(self._cells)})"

    def ids_at(self, cell: Cell) -> tuple[int, ...]:
        """取得涵蓋單位格的宣告編號，未涵蓋時返回空序列"""
        return self._cells.get(cell, ())

    def coverage(self, cell: Cell) -> int:
        """涵蓋單位格的宣告數量"""
        return len(self.ids_at(cell))

    @property
    def bounds(self) -> Rect | None:
        """
        所有已涵蓋單位格的外接矩形

        Returns:
            外接矩形，若佔用圖為空則返回 None
        """
        if not self._cells:
            return None
        xs = [x for x, _ in self._cells]
        ys = [y for _, y in self._cells]
        return Rect(left=min(xs), top=min(ys), right=max(xs) + 1, bottom=max(ys) + 1)


def build_occupancy(claims: Iterable[Claim]) -> OccupancyMap:
    """
    建立佔用圖

    Args:
        claims: 依輸入順序排列的宣告

    Returns:
        唯讀佔用圖
    """
    cells: dict[Cell, list[int]] = {}
    for claim in claims:
        for cell in claim.cells():
            cells.setdefault(cell, []).append(claim.id)
    return OccupancyMap(cells)


def merge_occupancy(partials: Iterable[OccupancyMap]) -> OccupancyMap:
    """
    依給定順序合併多個佔用圖

    每個單位格的編號序列依分區順序串接

    Args:
        partials: 各分區的佔用圖

    Returns:
        合併後的佔用圖
    """
    cells: dict[Cell, list[int]] = {}
    for partial in partials:
        for cell, ids in partial.items():
            cells.setdefault(cell, []).extend(ids)
    return OccupancyMap(cells)


def build_occupancy_partitioned(
    claims: Sequence[Claim],
    *,
    partition_size: int,
    max_workers: int = 1,
) -> OccupancyMap:
    """
    分區並行建立佔用圖

    將宣告切成連續分區分別累加後依分區順序合併，
    結果與 build_occupancy 完全相同（含單位格內的編號順序）

    Args:
        claims: 依輸入順序排列的宣告
        partition_size: 每個分區的宣告數量
        max_workers: 並行工作執行緒數

    Returns:
        唯讀佔用圖
    """
    if partition_size < 1:
        raise ValueError(f"partition_size must be positive, got {partition_size}")

    partitions = [
        claims[start : start + partition_size]
        for start in range(0, len(claims), partition_size)
    ]
    if len(partitions) <= 1 or max_workers <= 1:
        return build_occupancy(claims)

    logger.info(
        "Partitioned build: %d claims in %d partitions with %d workers",
        len(claims),
        len(partitions),
        max_workers,
    )

    # executor.map 保留分區順序
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        partials = list(executor.map(build_occupancy, partitions))

    return merge_occupancy(partials)
