"""
宣告驗證模組
"""

from collections.abc import Iterable

from src.data_model import Claim

from .errors import ClaimValidationError


def validate_claims(claims: Iterable[Claim]) -> list[Claim]:
    """
    檢查宣告編號是否唯一

    Args:
        claims: 宣告

    Returns:
        依輸入順序排列的宣告列表

    Raises:
        ClaimValidationError: 發現重複編號
    """
    seen: set[int] = set()
    validated: list[Claim] = []
    for claim in claims:
        if claim.id in seen:
            raise ClaimValidationError(f"duplicate claim id #{claim.id}")
        seen.add(claim.id)
        validated.append(claim)
    return validated
