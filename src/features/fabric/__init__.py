"""
布料宣告分析功能

- occupancy: 將宣告累加為稀疏佔用圖
- analyzer: 計算重疊單位格與獨立宣告
- parser / validation: 文字解析與輸入驗證
"""

from .analyzer import (
    analyze,
    count_overlaps,
    find_conflict_groups,
    find_isolated,
    is_isolated,
)
from .errors import ClaimError, ClaimParseError, ClaimValidationError
from .occupancy import (
    OccupancyMap,
    build_occupancy,
    build_occupancy_partitioned,
    merge_occupancy,
)
from .parser import parse_claim, parse_claims, read_claims
from .validation import validate_claims


__all__ = [
    "ClaimError",
    "ClaimParseError",
    "ClaimValidationError",
    "OccupancyMap",
    "analyze",
    "build_occupancy",
    "build_occupancy_partitioned",
    "count_overlaps",
    "find_conflict_groups",
    "find_isolated",
    "is_isolated",
    "merge_occupancy",
    "parse_claim",
    "parse_claims",
    "read_claims",
    "validate_claims",
]
