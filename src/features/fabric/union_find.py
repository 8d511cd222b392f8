"""
Union-Find (並查集) 資料結構

用於將透過共用單位格相連的宣告歸為同一衝突群組
"""

from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar


K = TypeVar("K", bound=Hashable)


class KeyedUnionFind(Generic[K]):
    """
    以任意鍵值為元素的 Union-Find

    元素在建構時固定，保留加入順序；支援路徑壓縮和按秩合併優化
    """

    def __init__(self, keys: Iterable[K]) -> None:
        """
        初始化 Union-Find

        Args:
            keys: 元素鍵值（重複者忽略）
        """
        self._parent: dict[K, K] = {}
        self._rank: dict[K, int] = {}
        for key in keys:
            if key not in self._parent:
                self._parent[key] = key
                self._rank[key] = 0

    def __contains__(self, key: object) -> bool:
        return key in self._parent

    def find(self, key: K) -> K:
        """
        尋找元素的根節點 (帶路徑壓縮)

        Args:
            key: 元素鍵值

        Returns:
            根節點鍵值

        Raises:
            KeyError: 元素不存在
        """
        parent = self._parent
        while parent[key] != key:
            parent[key] = parent[parent[key]]  # 路徑壓縮
            key = parent[key]
        return key

    def union(self, a: K, b: K) -> None:
        """
        合併兩個元素所在的集合

        Args:
            a: 第一個元素
            b: 第二個元素
        """
        pa = self.find(a)
        pb = self.find(b)
        if pa == pb:
            return

        rank = self._rank
        parent = self._parent

        # 按秩合併：將較小的樹連接到較大的樹
        if rank[pa] < rank[pb]:
            parent[pa] = pb
            return
        if rank[pa] > rank[pb]:
            parent[pb] = pa
            return

        parent[pb] = pa
        rank[pa] += 1

    def groups(self) -> list[list[K]]:
        """
        依加入順序分組

        Returns:
            各集合的元素列表，群組依其第一個元素的加入順序排列
        """
        grouped: dict[K, list[K]] = {}
        for key in self._parent:
            grouped.setdefault(self.find(key), []).append(key)
        return list(grouped.values())
