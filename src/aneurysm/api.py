from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Tuple

from .engine import DEFAULT_PROMPT, run
from .errors import SourceReadError, StructureError, make_structure_error
from .lexer import Instruction, Token, scan
from .resolver import JumpTable, resolve
from .state import DEFAULT_TAPE_LENGTH


@dataclass(frozen=True)
class RunOptions:
    tape_length: int = DEFAULT_TAPE_LENGTH
    prompt: bytes = DEFAULT_PROMPT
    encoding: str = "utf-8"
    max_steps: Optional[int] = None


@dataclass(frozen=True)
class Program:
    instructions: Tuple[Instruction, ...]
    jump_table: JumpTable
    tokens: Tuple[Token, ...]


@dataclass(frozen=True)
class RunResult:
    instruction_count: int
    steps: int
    head: int
    tape_length: int


def load_string(source: str) -> Program:
    tokens = tuple(scan(source))
    instructions = tuple(tok.instruction for tok in tokens)
    try:
        table = resolve(instructions)
    except StructureError as e:
        tok = tokens[e.index]
        raise make_structure_error(
            message=e.reason,
            index=e.index,
            source=source,
            line=tok.line,
            column=tok.column,
        ) from e
    return Program(instructions=instructions, jump_table=table, tokens=tokens)


def interpret_string(
    source: str,
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    options: Optional[RunOptions] = None,
) -> RunResult:
    opts = options or RunOptions()
    program = load_string(source)
    state = run(
        program.instructions,
        program.jump_table,
        stdin=stdin,
        stdout=stdout,
        tape_length=opts.tape_length,
        prompt=opts.prompt,
        max_steps=opts.max_steps,
    )
    return RunResult(
        instruction_count=len(program.instructions),
        steps=state.steps,
        head=state.head,
        tape_length=len(state.tape),
    )


def interpret_file(
    path: str | Path,
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    options: Optional[RunOptions] = None,
) -> RunResult:
    opts = options or RunOptions()
    p = Path(path)
    try:
        source = p.read_text(encoding=opts.encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(message=f"SourceReadError: cannot read {p}: {e}", path=str(p)) from e
    return interpret_string(source, stdin=stdin, stdout=stdout, options=opts)
