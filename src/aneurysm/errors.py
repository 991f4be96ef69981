from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Type


def _build_context(lines: List[str], line_no_1: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
    return "\n".join(out)


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'structure':
        if "unmatched ']'" in msg:
            return 'Remove the extra "]" or add a matching "[" before it.'
        if "unmatched '['" in msg:
            return 'Add a closing "]" for this loop. Brackets must nest properly.'
        return None
    if kind == 'runtime':
        if 'pointer underflow' in msg:
            return 'The data pointer starts at cell 0; "<" cannot move left of it.'
        if 'input exhausted' in msg:
            return 'Provide more input bytes on stdin.'
        return None
    return None


@dataclass
class AneurysmError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class SourceReadError(AneurysmError):
    path: str


@dataclass
class LexError(AneurysmError):
    offset: int


@dataclass
class StructureError(AneurysmError):
    index: int
    reason: str
    line: Optional[int] = None
    column: Optional[int] = None
    context: Optional[str] = None


@dataclass
class ImbalancedBracketsError(StructureError):
    pass


@dataclass
class ExecutionError(AneurysmError):
    pc: int
    head: int


@dataclass
class InputExhaustedError(ExecutionError):
    pass


@dataclass
class PointerUnderflowError(ExecutionError):
    pass


@dataclass
class StepLimitExceededError(ExecutionError):
    steps: int


def make_lex_error(*, source: str, offset: int) -> LexError:
    line = source.count('\n', 0, offset) + 1
    ctx = _build_context(source.split('\n'), line)
    return LexError(
        message=f"LexError: cannot scan input at offset {offset} (line {line})\n{ctx}",
        offset=offset,
    )


def make_structure_error(
    *,
    message: str,
    index: int,
    source: Optional[str] = None,
    line: Optional[int] = None,
    column: Optional[int] = None,
) -> ImbalancedBracketsError:
    hint = _hint_for(message, kind='structure')
    hint_block = f"\nHint: {hint}" if hint else ""
    if source is None or line is None:
        return ImbalancedBracketsError(
            message=f"StructureError: {message} (instruction {index}){hint_block}",
            index=index,
            reason=message,
        )
    ctx = _build_context(source.split('\n'), line)
    return ImbalancedBracketsError(
        message=f"StructureError: {message} (line {line}, column {column})\n{ctx}{hint_block}",
        index=index,
        reason=message,
        line=line,
        column=column,
        context=ctx,
    )


def make_runtime_error(cls: Type[ExecutionError], *, message: str, pc: int, head: int, **extra) -> ExecutionError:
    hint = _hint_for(message, kind='runtime')
    hint_block = f"\nHint: {hint}" if hint else ""
    return cls(
        message=f"RuntimeError: {message} (instruction {pc}, cell {head}){hint_block}",
        pc=pc,
        head=head,
        **extra,
    )
