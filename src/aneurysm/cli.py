import argparse
import logging
import sys

from typing import List, Optional

from .api import RunOptions, interpret_file
from .errors import AneurysmError, SourceReadError
from .state import DEFAULT_TAPE_LENGTH

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EX_IOERR = 74


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="aneurysm", description="Brainfuck interpreter")
    ap.add_argument("path", help="source file to run")
    ap.add_argument("--tape-length", type=int, default=DEFAULT_TAPE_LENGTH,
                    help=f"initial number of tape cells (default: {DEFAULT_TAPE_LENGTH})")
    ap.add_argument("--prompt", default="> ", help="prompt written before each ',' read")
    ap.add_argument("--encoding", default="utf-8", help="source file encoding")
    ap.add_argument("--max-steps", type=int, default=None,
                    help="abort after this many instructions (default: unlimited)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.tape_length <= 0:
        ap.error("--tape-length must be positive")

    options = RunOptions(
        tape_length=args.tape_length,
        prompt=args.prompt.encode("utf-8"),
        encoding=args.encoding,
        max_steps=args.max_steps,
    )

    try:
        interpret_file(args.path, options=options)
    except SourceReadError as e:
        logger.error("%s", e)
        return EX_IOERR
    except AneurysmError as e:
        logger.error("%s", e)
        return EXIT_FAILURE
    except BrokenPipeError:
        logger.error("output closed before the program finished")
        return EX_IOERR
    return EXIT_OK
