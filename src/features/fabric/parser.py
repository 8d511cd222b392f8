"""
宣告文字解析模組

解析 `#<id> @ <x>,<y>: <width>x<height>` 格式的宣告文字
"""

import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Final

from pydantic import ValidationError

from src.data_model import Claim

from .errors import ClaimParseError, ClaimValidationError


logger = logging.getLogger(__name__)

CLAIM_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^#(?P<id>\d+)\s*@\s*(?P<x>\d+)\s*,\s*(?P<y>\d+)\s*:\s*(?P<width>\d+)\s*x\s*(?P<height>\d+)$"
)


def parse_claim(line: str, *, line_number: int = 1) -> Claim:
    """
    解析單行宣告

    Args:
        line: 宣告文字，例如 "#123 @ 3,2: 5x4"
        line_number: 行號，用於錯誤訊息

    Returns:
        宣告

    Raises:
        ClaimParseError: 文字格式不符
        ClaimValidationError: 數值違反宣告約束（例如編號為 0）
    """
    text = line.strip()
    match = CLAIM_PATTERN.match(text)
    if match is None:
        raise ClaimParseError("malformed claim", line_number=line_number, line=line)

    values = {key: int(value) for key, value in match.groupdict().items()}
    try:
        return Claim(**values)
    except ValidationError as exc:
        msg = f"line {line_number}: invalid claim {text!r}: {exc.error_count()} error(s)"
        raise ClaimValidationError(msg) from exc


def parse_claims(lines: Iterable[str]) -> list[Claim]:
    """
    解析多行宣告

    空白行會被略過，行號從 1 開始計算

    Args:
        lines: 宣告文字行

    Returns:
        依輸入順序排列的宣告列表
    """
    claims: list[Claim] = []
    for line_number, line in enumerate(lines, 1):
        if not line.strip():
            continue
        claims.append(parse_claim(line, line_number=line_number))
    return claims


def read_claims(path: Path) -> list[Claim]:
    """
    從檔案讀取宣告

    Args:
        path: 宣告檔案路徑 (UTF-8)

    Returns:
        依檔案順序排列的宣告列表
    """
    text = path.read_text(encoding="utf-8")
    claims = parse_claims(text.splitlines())
    logger.info("Read %d claims from %s", len(claims), path)
    return claims
