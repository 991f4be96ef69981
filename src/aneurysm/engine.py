from __future__ import annotations

import logging
import sys

from typing import BinaryIO, Optional, Sequence

from .errors import (
    InputExhaustedError,
    PointerUnderflowError,
    StepLimitExceededError,
    make_runtime_error,
)
from .lexer import Instruction
from .resolver import JumpTable
from .state import DEFAULT_TAPE_LENGTH, ExecutionState, Tape

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = b"> "


def run(
    instructions: Sequence[Instruction],
    jump_table: JumpTable,
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    tape_length: int = DEFAULT_TAPE_LENGTH,
    prompt: bytes = DEFAULT_PROMPT,
    max_steps: Optional[int] = None,
) -> ExecutionState:
    """
    Execute ``instructions`` against a fresh tape.

    ``jump_table`` must come from ``resolve`` on the same instructions.
    ``stdin`` and ``stdout`` are byte streams and default to the process
    streams. ``stdout`` is flushed on every exit path.

    Returns:
        ExecutionState: the final pc, head, tape and step count.
    """
    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer

    state = ExecutionState(tape=Tape(tape_length))
    tape = state.tape
    length = len(instructions)

    try:
        while state.pc < length:
            if max_steps is not None and state.steps >= max_steps:
                raise make_runtime_error(
                    StepLimitExceededError,
                    message=f"step limit of {max_steps} exceeded",
                    pc=state.pc,
                    head=state.head,
                    steps=state.steps,
                )

            instruction = instructions[state.pc]
            state.steps += 1

            if instruction is Instruction.ADVANCE:
                state.head += 1
                tape.ensure(state.head)
            elif instruction is Instruction.RETREAT:
                if state.head == 0:
                    raise make_runtime_error(
                        PointerUnderflowError,
                        message="pointer underflow: '<' at cell 0",
                        pc=state.pc,
                        head=state.head,
                    )
                state.head -= 1
            elif instruction is Instruction.INCREMENT:
                tape.add(state.head, 1)
            elif instruction is Instruction.DECREMENT:
                tape.add(state.head, -1)
            elif instruction is Instruction.OUTPUT:
                stdout.write(bytes((tape[state.head],)))
            elif instruction is Instruction.ACCEPT:
                stdout.write(prompt)
                stdout.flush()
                data = stdin.read(1)
                if not data:
                    raise make_runtime_error(
                        InputExhaustedError,
                        message="input exhausted while waiting for ','",
                        pc=state.pc,
                        head=state.head,
                    )
                tape[state.head] = data[0]
            elif instruction is Instruction.FORWARD:
                if tape[state.head] == 0:
                    state.pc = jump_table[state.pc]
                    continue
            elif instruction is Instruction.BACKWARD:
                if tape[state.head] != 0:
                    state.pc = jump_table[state.pc]
                    continue
            else:
                raise TypeError(f"not an instruction: {instruction!r}")

            state.pc += 1
    finally:
        stdout.flush()

    logger.debug("run finished after %d steps, head at cell %d", state.steps, state.head)
    return state
