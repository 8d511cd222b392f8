"""
FabricProcessor 測試
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from src.core.processor import FabricProcessor
from src.data_model import Claim
from src.features.fabric import (
    ClaimParseError,
    ClaimValidationError,
    build_occupancy_partitioned,
)


class TestFabricProcessor:
    """處理流程測試"""

    @pytest.mark.unit
    def test_process_file(self, claims_file: Path) -> None:
        report = FabricProcessor().process_file(claims_file)
        assert report.overlap_count == 4
        assert report.isolated_claim_ids == frozenset({3})

    @pytest.mark.unit
    def test_analyze_empty(self) -> None:
        report = FabricProcessor().analyze_claims([])
        assert report.overlap_count == 0
        assert report.isolated_claim_ids == frozenset()

    @pytest.mark.unit
    def test_duplicate_ids_rejected(self) -> None:
        claims = [Claim(id=1, x=0, y=0, width=1, height=1)] * 2
        with pytest.raises(ClaimValidationError):
            FabricProcessor().analyze_claims(claims)

    @pytest.mark.unit
    def test_malformed_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("#1 @ 1,3: 4x4\nnot a claim\n", encoding="utf-8")
        with pytest.raises(ClaimParseError):
            FabricProcessor().process_file(path)

    @pytest.mark.unit
    def test_sequential_mode_by_default(self, sample_claims: list[Claim]) -> None:
        with patch("src.core.processor.build_occupancy_partitioned") as mock_partitioned:
            FabricProcessor().analyze_claims(sample_claims)
            mock_partitioned.assert_not_called()

    @pytest.mark.unit
    def test_partitioned_mode(self, sample_claims: list[Claim]) -> None:
        processor = FabricProcessor(max_workers=2, partition_size=1)
        with patch(
            "src.core.processor.build_occupancy_partitioned",
            wraps=build_occupancy_partitioned,
        ) as mock_partitioned:
            report = processor.analyze_claims(sample_claims)
            mock_partitioned.assert_called_once()
        assert report.overlap_count == 4
        assert report.isolated_claim_ids == frozenset({3})

    @pytest.mark.unit
    def test_invalid_partition_size(self) -> None:
        with pytest.raises(ValueError, match="partition_size"):
            FabricProcessor(partition_size=0)
