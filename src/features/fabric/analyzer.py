"""
重疊分析模組

從佔用圖計算重疊單位格數量、獨立宣告與衝突群組
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Final

from src.data_model import Claim, OverlapReport

from .occupancy import OccupancyMap, build_occupancy
from .union_find import KeyedUnionFind


logger = logging.getLogger(__name__)

# 常數定義
MIN_OVERLAP_COVERAGE: Final[int] = 2


def count_overlaps(occupancy: OccupancyMap) -> int:
    """
    計算被兩個以上宣告涵蓋的單位格數量

    Args:
        occupancy: 佔用圖

    Returns:
        重疊單位格數量
    """
    return sum(1 for ids in occupancy.values() if len(ids) >= MIN_OVERLAP_COVERAGE)


def is_isolated(claim: Claim, occupancy: OccupancyMap) -> bool:
    """
    檢查宣告涵蓋的每個單位格是否都只屬於它自己

    面積為 0 的宣告不涵蓋任何單位格，視為獨立
    """
    return all(occupancy.coverage(cell) == 1 for cell in claim.cells())


def find_isolated(claims: Iterable[Claim], occupancy: OccupancyMap) -> frozenset[int]:
    """
    找出未與任何其他宣告共用單位格的宣告

    逐一檢查每個宣告的單位格，結果可能為空或包含多個編號

    Args:
        claims: 宣告
        occupancy: 由同一批宣告建立的佔用圖

    Returns:
        獨立宣告編號集合
    """
    return frozenset(claim.id for claim in claims if is_isolated(claim, occupancy))


def find_conflict_groups(
    claims: Sequence[Claim],
    occupancy: OccupancyMap,
) -> tuple[frozenset[int], ...]:
    """
    將透過共用單位格相連的宣告分組

    Args:
        claims: 宣告
        occupancy: 由同一批宣告建立的佔用圖

    Returns:
        至少包含兩個宣告的群組，依群組中最先輸入的宣告排序
    """
    uf: KeyedUnionFind[int] = KeyedUnionFind(claim.id for claim in claims)

    for ids in occupancy.values():
        linked = [claim_id for claim_id in ids if claim_id in uf]
        if len(linked) < MIN_OVERLAP_COVERAGE:
            continue
        first = linked[0]
        for other in linked[1:]:
            uf.union(first, other)

    return tuple(
        frozenset(group) for group in uf.groups() if len(group) >= MIN_OVERLAP_COVERAGE
    )


def analyze(
    claims: Sequence[Claim],
    occupancy: OccupancyMap | None = None,
) -> OverlapReport:
    """
    分析宣告重疊情況

    Args:
        claims: 依輸入順序排列的宣告
        occupancy: 預先建立的佔用圖，若為 None 則自動建立

    Returns:
        重疊分析結果
    """
    if occupancy is None:
        occupancy = build_occupancy(claims)

    bounds = occupancy.bounds
    report = OverlapReport(
        overlap_count=count_overlaps(occupancy),
        isolated_claim_ids=find_isolated(claims, occupancy),
        claim_count=len(claims),
        claimed_area=sum(claim.area for claim in claims),
        covered_cells=len(occupancy),
        surface_width=bounds.width() if bounds is not None else 0,
        surface_height=bounds.height() if bounds is not None else 0,
        conflict_groups=find_conflict_groups(claims, occupancy),
    )

    if not report.has_overlaps:
        logger.info("No overlapping claims among %d claims", report.claim_count)
    logger.debug(
        "Analyzed %d claims: %d covered cells, %d overlapping, %d isolated",
        report.claim_count,
        report.covered_cells,
        report.overlap_count,
        len(report.isolated_claim_ids),
    )
    return report
