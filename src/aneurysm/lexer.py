import enum
import logging
import re

from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import make_lex_error

logger = logging.getLogger(__name__)


class Instruction(enum.Enum):
    ADVANCE = '>'
    RETREAT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    OUTPUT = '.'
    ACCEPT = ','
    FORWARD = '['
    BACKWARD = ']'

    @property
    def symbol(self) -> str:
        return self.value


# A comment is a '#' preceded on its line only by whitespace and must end in
# a newline; an unterminated last line is scanned as junk and commands.
# Junk stops at newlines so the next scan position can be tested as a line
# start.
_SCANNER = re.compile(
    r'(?P<comment>^[^\S\n]*#[^\n]*\n)'
    r'|(?P<command>[><+\-.,\[\]])'
    r'|(?P<junk>[^><+\-.,\[\]\n]+|\n)',
    re.MULTILINE,
)


@dataclass(frozen=True)
class Token:
    instruction: Instruction
    offset: int
    line: int
    column: int


def scan(source: str) -> Iterator[Token]:
    """Yield a Token for every command character in ``source``.

    Line and column are 1-based. Comment lines and junk characters
    produce nothing.
    """
    pos = 0
    line = 1
    line_start = 0
    end = len(source)
    while pos < end:
        m = _SCANNER.match(source, pos)
        if m is None or m.end() == pos:
            raise make_lex_error(source=source, offset=pos)

        kind = m.lastgroup
        if kind == 'command':
            yield Token(
                instruction=Instruction(m.group()),
                offset=pos,
                line=line,
                column=pos - line_start + 1,
            )
        elif m.group().endswith('\n'):
            line += 1
            line_start = m.end()
        pos = m.end()


def tokenize(source: str) -> Tuple[Instruction, ...]:
    instructions = tuple(tok.instruction for tok in scan(source))
    logger.debug("lexed %d instructions from %d characters", len(instructions), len(source))
    return instructions
