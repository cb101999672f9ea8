# dlx.py
# Algorithm X (Dancing Links) implementation

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional

ROOT = 0


class SearchCancelled(Exception):
    """The should_stop callback asked the search to stop."""


class DLXSolver:
    """Dancing Links over an arena of nodes.

    Every node is an integer handle into the parallel lists ``left``,
    ``right``, ``up``, ``down``, ``column`` and ``row_id``. Node 0 is the
    root and nodes 1..num_columns are the column headers, linked left to
    right in column-index order. ``size`` is indexed by header handle.
    """

    def __init__(self, num_columns: int):
        if num_columns < 0:
            raise ValueError("num_columns must be >= 0")
        self.num_columns = num_columns
        self.num_rows = 0
        self.search_calls = 0

        self.left: list[int] = []
        self.right: list[int] = []
        self.up: list[int] = []
        self.down: list[int] = []
        self.column: list[int] = []
        self.row_id: list[int] = []
        self.size: list[int] = [0] * (num_columns + 1)

        self._new_node(ROOT, -1)
        # Create column headers in a circular doubly-linked list.
        for i in range(num_columns):
            header = self._new_node(i + 1, -1)
            last = self.left[ROOT]
            self.right[last] = header
            self.left[header] = last
            self.right[header] = ROOT
            self.left[ROOT] = header

    def _new_node(self, column: int, row_id: int) -> int:
        node = len(self.left)
        self.left.append(node)
        self.right.append(node)
        self.up.append(node)
        self.down.append(node)
        self.column.append(column)
        self.row_id.append(row_id)
        return node

    def add_row(self, row_id: int, column_indices: Iterable[int]) -> None:
        columns = sorted(column_indices)
        if not columns:
            raise ValueError(f"Row {row_id} covers no columns")
        if len(set(columns)) != len(columns):
            raise ValueError(f"Row {row_id} repeats a column")
        if columns[0] < 0 or columns[-1] >= self.num_columns:
            raise ValueError(f"Row {row_id} references a column outside 0..{self.num_columns - 1}")

        first: Optional[int] = None
        for c_idx in columns:
            header = c_idx + 1
            node = self._new_node(header, row_id)

            # Insert into column (at bottom)
            bottom = self.up[header]
            self.down[node] = header
            self.up[node] = bottom
            self.down[bottom] = node
            self.up[header] = node
            self.size[header] += 1

            # Link horizontally within row
            if first is None:
                first = node
            else:
                last = self.left[first]
                self.right[last] = node
                self.left[node] = last
                self.right[node] = first
                self.left[first] = node

        self.num_rows += 1

    def _cover(self, col: int) -> None:
        left, right, up, down = self.left, self.right, self.up, self.down
        right[left[col]] = right[col]
        left[right[col]] = left[col]
        row = down[col]
        while row != col:
            node = right[row]
            while node != row:
                up[down[node]] = up[node]
                down[up[node]] = down[node]
                self.size[self.column[node]] -= 1
                node = right[node]
            row = down[row]

    def _uncover(self, col: int) -> None:
        left, right, up, down = self.left, self.right, self.up, self.down
        row = up[col]
        while row != col:
            node = left[row]
            while node != row:
                self.size[self.column[node]] += 1
                up[down[node]] = node
                down[up[node]] = node
                node = left[node]
            row = up[row]
        right[left[col]] = col
        left[right[col]] = col

    def _choose_column(self) -> int:
        # Smallest size wins; ties go to the lowest column index.
        c = self.right[ROOT]
        best = c
        while c != ROOT:
            if self.size[c] < self.size[best]:
                best = c
            c = self.right[c]
        return best

    def solve(self, should_stop: Optional[Callable[[], bool]] = None) -> Iterator[list[int]]:
        """Yield exact covers as lists of row ids.

        The links are restored when the generator finishes, is closed early
        or raises, so the solver can be searched again.
        """
        solution: list[int] = []
        right, left, down = self.right, self.left, self.down

        def search() -> Iterator[list[int]]:
            self.search_calls += 1
            if should_stop is not None and should_stop():
                raise SearchCancelled(f"Search cancelled at depth {len(solution)}")

            if right[ROOT] == ROOT:
                yield [self.row_id[node] for node in solution]
                return

            column = self._choose_column()
            if self.size[column] == 0:
                return

            self._cover(column)
            try:
                row = down[column]
                while row != column:
                    solution.append(row)
                    node = right[row]
                    while node != row:
                        self._cover(self.column[node])
                        node = right[node]
                    try:
                        yield from search()
                    finally:
                        solution.pop()
                        node = left[row]
                        while node != row:
                            self._uncover(self.column[node])
                            node = left[node]
                    row = down[row]
            finally:
                self._uncover(column)

        yield from search()

    def solve_one(self, should_stop: Optional[Callable[[], bool]] = None) -> Optional[list[int]]:
        search = self.solve(should_stop)
        try:
            return next(search, None)
        finally:
            search.close()
