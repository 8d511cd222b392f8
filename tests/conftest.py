"""
Pytest 配置和共用 fixtures
"""

from pathlib import Path

import pytest

from src.data_model import Claim


SAMPLE_LINES: tuple[str, ...] = (
    "#1 @ 1,3: 4x4",
    "#2 @ 3,1: 4x4",
    "#3 @ 5,5: 2x2",
)


@pytest.fixture
def sample_claims() -> list[Claim]:
    """三個宣告：#1 與 #2 重疊 4 格，#3 獨立"""
    return [
        Claim(id=1, x=1, y=3, width=4, height=4),
        Claim(id=2, x=3, y=1, width=4, height=4),
        Claim(id=3, x=5, y=5, width=2, height=2),
    ]


@pytest.fixture
def disjoint_claims() -> list[Claim]:
    """互不重疊的宣告（包含相鄰但不共用單位格者）"""
    return [
        Claim(id=10, x=0, y=0, width=3, height=3),
        Claim(id=11, x=3, y=0, width=2, height=3),
        Claim(id=12, x=0, y=3, width=5, height=1),
        Claim(id=13, x=100, y=200, width=1, height=1),
    ]


@pytest.fixture
def claims_file(tmp_path: Path) -> Path:
    """寫入範例宣告的文字檔"""
    path = tmp_path / "claims.txt"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path
