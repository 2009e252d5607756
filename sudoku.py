# sudoku.py
# Solve Sudoku by brute-force backtracking over a tree of grid snapshots.
# Each node fills the first blank cell with 1, 2, ... 9 in turn and recurses.
# No constraint propagation, no cell ordering heuristics.

import logging
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, TextIO

from sudoku_grid import Grid, SIZE, accept, first_empty, print_grid, reject, validate_grid

log = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    """Run-time options carried through every recursive call."""
    output: Optional[TextIO] = None   # stdout when None
    print_partials: bool = False
    delay: int = 0                    # seconds to sleep before each node
    visited: int = 0                  # nodes visited so far


class SearchNode:
    def __init__(self, candidate: Grid):
        self.candidate: Grid = candidate
        # index of the value most recently tried for the chosen cell (value = cursor + 1)
        self.cursor = 0
        self.children: List[Optional["SearchNode"]] = [None] * SIZE

    def spawn(self) -> "SearchNode":
        return SearchNode(list(self.candidate))

    def reject(self) -> bool:
        return reject(self.candidate)

    def accept(self) -> bool:
        return accept(self.candidate)

    def first(self) -> int:
        """Create the first child (value 1 in the first blank cell); return that cell's index."""
        index = first_empty(self.candidate)
        if index is None:
            raise ValueError("Grid has no blank cell to fill.")
        child = self.spawn()
        child.candidate[index] = 1
        self.children[self.cursor] = child
        return index

    def next(self, index: int) -> bool:
        """Create the sibling holding the next value at index; False once 9 has been tried."""
        if self.cursor >= SIZE - 1:
            return False
        child = self.children[self.cursor].spawn()
        child.candidate[index] += 1
        self.cursor += 1
        self.children[self.cursor] = child
        return True

    def release(self):
        self.children = [None] * SIZE

    def backtrack(self, config: SearchConfig) -> Optional["SearchNode"]:
        config.visited += 1
        if config.delay:
            time.sleep(config.delay)
        if config.print_partials:
            print_grid(self.candidate, config.output or sys.stdout)

        if self.reject():
            return None
        if self.accept():
            return self

        index = self.first()
        while True:
            solution = self.children[self.cursor].backtrack(config)
            if solution is not None:
                return solution
            if not self.next(index):
                break

        # every value 1..9 failed for this cell
        self.release()
        return None


def solve(grid: Grid, config: Optional[SearchConfig] = None) -> Optional[Grid]:
    """
    Return a solved copy of grid, or None if no completion exists.
    The given grid is left untouched. Raises ValueError for a malformed grid
    (wrong length or values outside 0..9); a contradictory grid just yields None.
    """
    validate_grid(grid)
    if config is None:
        config = SearchConfig()

    clues = sum(1 for v in grid if v != 0)
    log.debug("Searching from %d clues", clues)
    root = SearchNode(list(grid))
    node = root.backtrack(config)
    if node is None:
        log.debug("Search exhausted after %d nodes", config.visited)
        return None
    log.debug("Solved after %d nodes", config.visited)
    return list(node.candidate)


if __name__ == "__main__":
    from sudoku_grid import parse_grid

    PUZZLE = (
        "530070000"
        "600195000"
        "098000060"
        "800060003"
        "400803001"
        "700020006"
        "060000280"
        "000419005"
        "000080079"
    )
    solution = solve(parse_grid(PUZZLE))
    if solution is None:
        print("Could not solve puzzle")
    else:
        print("Solved:")
        print_grid(solution)
