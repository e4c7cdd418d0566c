"""Batch runner: evaluate Scheme source files and print each result."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from minischeme.config import get_log_level, get_prelude_paths
from minischeme.errors import SchemeError
from minischeme.interpreter import Interpreter

logger = logging.getLogger(__name__)


def _read_source(name: str) -> str:
    if name == "-":
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="minischeme",
        description="Evaluate Scheme source files and print the value of each expression",
    )
    parser.add_argument("files", nargs="+", help="source files ('-' reads standard input)")
    args = parser.parse_args(argv)

    # Configure logging from LOGLEVEL environment variable
    logging.basicConfig(level=get_log_level(), format="%(message)s", stream=sys.stderr)

    interp = Interpreter()
    try:
        for path in get_prelude_paths():
            logger.info("Loading prelude %s", path)
            interp.eval_prelude(path.read_text(encoding="utf-8"))
        for name in args.files:
            logger.info("Evaluating %s", name)
            for result in interp.iter_all(_read_source(name)):
                print(result)
    except SchemeError as ex:
        logger.error("%s: %s", type(ex).__name__, ex)
        return 1
    except OSError as ex:
        logger.error("Error reading source: %s", ex)
        return 1
    return 0
