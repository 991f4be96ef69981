"""
Lexer tests: command recognition, junk skipping and line comments.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from aneurysm.lexer import Instruction, scan, tokenize

I = Instruction


def test_all_eight_commands():
    assert tokenize("><+-.,[]") == (
        I.ADVANCE, I.RETREAT, I.INCREMENT, I.DECREMENT,
        I.OUTPUT, I.ACCEPT, I.FORWARD, I.BACKWARD,
    )


def test_symbols_round_trip_through_enum():
    for instruction in Instruction:
        assert Instruction(instruction.symbol) is instruction


def test_returns_immutable_tuple():
    assert isinstance(tokenize("+-"), tuple)


def test_empty_source():
    assert tokenize("") == ()


def test_junk_is_skipped():
    assert tokenize("add one + then print it .") == (I.INCREMENT, I.OUTPUT)


@pytest.mark.parametrize("junk", ["a", "  ", "\t", "xyz 123", "\n", "\r\n", "é", "a#b"])
def test_junk_between_commands_does_not_change_result(junk):
    plain = "++[>+<-]."
    padded = junk.join(plain)
    assert tokenize(padded) == tokenize(plain)


def test_comment_only_program_is_empty():
    assert tokenize("# hello\n") == ()


def test_comment_hides_commands():
    assert tokenize("# this + is - ignored [ ]\n+") == (I.INCREMENT,)


def test_indented_comment():
    assert tokenize("+\n   \t# skip ., here\n-") == (I.INCREMENT, I.DECREMENT)


def test_hash_after_code_is_junk():
    # '#' not at the start of its line does not open a comment
    assert tokenize("+ # -\n") == (I.INCREMENT, I.DECREMENT)


def test_comment_without_trailing_newline_is_junk():
    # only a newline closes a comment; the unterminated line keeps its commands
    assert tokenize("+\n# trailing +") == (I.INCREMENT, I.INCREMENT)


def test_comment_only_program_without_newline():
    assert tokenize("# hello") == ()


def test_empty_comment_line():
    assert tokenize("#\n+") == (I.INCREMENT,)


def test_consecutive_comment_lines():
    assert tokenize("# one +\n# two -\n.") == (I.OUTPUT,)


def test_scan_positions():
    tokens = list(scan("+\n  # c\n ab[\n]"))
    assert [t.instruction for t in tokens] == [I.INCREMENT, I.FORWARD, I.BACKWARD]
    assert [(t.line, t.column) for t in tokens] == [(1, 1), (3, 4), (4, 1)]
    assert tokens[1].offset == 11
