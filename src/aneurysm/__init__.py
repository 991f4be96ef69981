from .api import Program, RunOptions, RunResult, interpret_file, interpret_string, load_string
from .engine import run
from .errors import (
    AneurysmError,
    ExecutionError,
    ImbalancedBracketsError,
    InputExhaustedError,
    LexError,
    PointerUnderflowError,
    SourceReadError,
    StepLimitExceededError,
    StructureError,
)
from .lexer import Instruction, Token, scan, tokenize
from .resolver import JumpTable, resolve
from .state import DEFAULT_TAPE_LENGTH, ExecutionState, Tape

__all__ = [
    'Instruction',
    'Token',
    'scan',
    'tokenize',
    'JumpTable',
    'resolve',
    'run',
    'Tape',
    'ExecutionState',
    'DEFAULT_TAPE_LENGTH',
    'RunOptions',
    'RunResult',
    'Program',
    'load_string',
    'interpret_string',
    'interpret_file',
    'AneurysmError',
    'SourceReadError',
    'LexError',
    'StructureError',
    'ImbalancedBracketsError',
    'ExecutionError',
    'InputExhaustedError',
    'PointerUnderflowError',
    'StepLimitExceededError',
]
