"""
布料宣告錯誤定義
"""


class ClaimError(Exception):
    """宣告處理錯誤的基底類別"""


class ClaimParseError(ClaimError):
    """
    宣告文字格式錯誤

    Attributes:
        line_number: 發生錯誤的行號 (1-based)
        line: 原始文字
    """

    def __init__(self, message: str, *, line_number: int, line: str) -> None:
        super().__init__(f"line {line_number}: {message}: {line!r}")
        self.line_number = line_number
        self.line = line


class ClaimValidationError(ClaimError):
    """宣告違反資料約束（編號重複、數值超出範圍等）"""
