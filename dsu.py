"""Union-Find / Disjoint Set Union implementation with path compression and union-by-rank."""
from typing import Dict, List


class DSU:
    def __init__(self, count: int):
        # makeset for every element 0..count-1 at once
        if count < 0:
            raise ValueError("a negative element count makes no sense")
        self.parent: List[int] = list(range(count))
        self.rank: List[int] = [0] * count

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        # locate the root
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # path compression
        while x != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        xroot = self.find(x)
        yroot = self.find(y)
        if xroot == yroot:
            return False
        # union by rank
        if self.rank[xroot] < self.rank[yroot]:
            self.parent[xroot] = yroot
        else:
            if self.rank[xroot] == self.rank[yroot]:
                self.rank[xroot] += 1
            self.parent[yroot] = xroot
        return True

    def components(self) -> Dict[int, list]:
        """Return mapping root -> [members] for every element."""
        comp: Dict[int, list] = {}
        for v in range(len(self.parent)):
            r = self.find(v)
            comp.setdefault(r, []).append(v)
        return comp

    def num_components(self) -> int:
        return len(self.components())
