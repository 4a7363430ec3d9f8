from typing import Dict, List


class DisjointSet:
    """
    A Union-Find (Disjoint Set) structure over the labels ``1..size`` with
    union-by-size and path compression.

    Two explicit one-based arrays are kept: ``parent`` (a root points at
    itself) and ``size_of`` (only meaningful at roots). Slot zero is unused so
    that labels can be used as indices directly.
    """

    def __init__(self, size: int):
        """
        Initialize ``size`` singleton sets labeled ``1..size``.

        Parameters
        ----------
        size : int
            Number of elements. Must be at least 1.

        Raises
        ------
        ValueError
            If ``size`` is smaller than 1.
        """

        if size < 1:
            raise ValueError("size must be ≥ 1")
        self._n = size
        self.parent = list(range(size + 1))
        self.size_of = [0] + [1] * size
        self._num_sets = size

    @property
    def size(self) -> int:
        """Number of elements tracked by the structure."""
        return self._n

    def _check(self, x: int) -> None:
        if not 1 <= x <= self._n:
            raise IndexError(f"element {x} outside [1, {self._n}]")

    def is_root(self, x: int) -> bool:
        """Return True if ``x`` is the representative of its set."""
        self._check(x)
        return self.parent[x] == x

    def find(self, x: int) -> int:
        """
        Find the root of the set containing ``x``, compressing the path.

        The chain is walked twice: once to locate the root and once more to
        point every visited slot directly at it.

        Parameters
        ----------
        x : int
            Element label in ``[1, size]``.

        Returns
        -------
        int
            The root of the set containing ``x``.

        Raises
        ------
        IndexError
            If ``x`` is out of range.
        """

        self._check(x)
        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        while x != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def join(self, r: int, s: int) -> int:
        """
        Join the trees rooted at ``r`` and ``s`` using union-by-size.

        The smaller tree is attached under the larger one. On equal sizes
        ``s`` is attached under ``r``. Both arguments must be roots; members
        are not resolved.

        Parameters
        ----------
        r : int
            Root of the first set.
        s : int
            Root of the second set.

        Returns
        -------
        int
            The root of the merged set.

        Raises
        ------
        IndexError
            If either label is out of range.
        ValueError
            If ``r == s`` or either label is not a root.
        """

        self._check(r)
        self._check(s)
        if r == s:
            raise ValueError(f"cannot join set {r} with itself")
        if self.parent[r] != r or self.parent[s] != s:
            raise ValueError(f"join requires two roots, got {r} and {s}")

        if self.size_of[s] > self.size_of[r]:
            r, s = s, r
        self.parent[s] = r
        self.size_of[r] += self.size_of[s]
        self._num_sets -= 1
        return r

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets containing ``x`` and ``y``.

        Parameters
        ----------
        x : int
            First element.
        y : int
            Second element.

        Returns
        -------
        bool
            True if two distinct sets were merged, False if ``x`` and ``y``
            were already in the same set.
        """

        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        self.join(root_x, root_y)
        return True

    def is_connected(self, x: int, y: int) -> bool:
        """Check whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def set_size(self, x: int) -> int:
        """Return the number of elements in the set containing ``x``."""
        return self.size_of[self.find(x)]

    def path_length(self, x: int) -> int:
        """
        Count the parent hops from ``x`` to its root without compressing.

        Parameters
        ----------
        x : int
            Element label.

        Returns
        -------
        int
            0 for a root, otherwise the length of the parent chain.
        """

        self._check(x)
        hops = 0
        while self.parent[x] != x:
            x = self.parent[x]
            hops += 1
        return hops

    def components(self) -> Dict[int, List[int]]:
        """
        Group every element by its root.

        Returns
        -------
        Dict[int, List[int]]
            Mapping of root to the sorted members of its set.
        """

        groups: Dict[int, List[int]] = {}
        for x in range(1, self._n + 1):
            groups.setdefault(self.find(x), []).append(x)
        return groups

    def __iter__(self):
        """
        Iterate over the current sets.

        Returns
        -------
        Iterator[List[int]]
            An iterator over the member lists of each set.
        """

        return iter(self.components().values())

    def __len__(self) -> int:
        """
        Return the number of disjoint sets.

        Returns
        -------
        int
            The number of sets currently tracked.
        """

        return self._num_sets
