from __future__ import annotations

import logging

from dataclasses import dataclass, field

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_TAPE_LENGTH = 30000


class Tape:
    """Growable tape of unsigned 8-bit cells.

    Arithmetic wraps modulo 256. The tape only ever grows, by doubling,
    and growth keeps every cell at its index.
    """

    def __init__(self, length: int = DEFAULT_TAPE_LENGTH):
        if length <= 0:
            raise ValueError(f"tape length must be positive, got {length}")
        self.cells = np.zeros(length, dtype=np.uint8)

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> int:
        return int(self.cells[index])

    def __setitem__(self, index: int, value: int) -> None:
        self.cells[index] = np.uint8(value % 256)

    def add(self, index: int, delta: int) -> None:
        self.cells[index] = np.uint8((int(self.cells[index]) + delta) % 256)

    def grow(self) -> None:
        old = len(self.cells)
        self.cells = np.concatenate([self.cells, np.zeros(old, dtype=np.uint8)])
        logger.debug("tape grown from %d to %d cells", old, len(self.cells))

    def ensure(self, index: int) -> None:
        while index >= len(self.cells):
            self.grow()


@dataclass
class ExecutionState:
    tape: Tape = field(default_factory=Tape)
    head: int = 0
    pc: int = 0
    steps: int = 0
