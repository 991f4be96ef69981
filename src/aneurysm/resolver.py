import logging

from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence

from .errors import make_structure_error
from .lexer import Instruction

logger = logging.getLogger(__name__)

JumpTable = Mapping[int, int]


def resolve(instructions: Sequence[Instruction]) -> JumpTable:
    """Pair every '[' with its matching ']'.

    The returned table is read-only and symmetric: ``table[a] == b``
    implies ``table[b] == a``.
    """
    stack: List[int] = []
    table: Dict[int, int] = {}

    for pos, instruction in enumerate(instructions):
        if instruction is Instruction.FORWARD:
            stack.append(pos)
        elif instruction is Instruction.BACKWARD:
            if not stack:
                raise make_structure_error(message="unmatched ']'", index=pos)
            start = stack.pop()
            table[start] = pos
            table[pos] = start

    if stack:
        raise make_structure_error(message="unmatched '['", index=stack[-1])

    logger.debug("resolved %d bracket pairs", len(table) // 2)
    return MappingProxyType(table)
