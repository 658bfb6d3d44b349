import logging
import sys
from pathlib import Path

from mclisp import LispValue
from mclisp.config import get_prelude_files, get_recursion_limit, trace_enabled
from mclisp.evaluation.evaluator import evaluate
from mclisp.reader.parser import lex, TokenStream
from mclisp.types.environment import Environment
from mclisp.types.expression import empty_list

TRACE_LOGGERS = ("Evaluator", "Reader")
TRACE_FORMAT = "%(name)s: %(message)s"


def enable_trace(stream=None) -> list[logging.Handler]:
    """Send debug records of the evaluator and reader loggers to `stream`.

    Defaults to stderr. Idempotent: a logger that already has a trace handler
    keeps it.
    """
    handlers = []
    for name in TRACE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        existing = [h for h in logger.handlers if getattr(h, "_mclisp_trace", False)]
        if existing:
            handlers.extend(existing)
            continue
        handler = logging.StreamHandler(stream)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(TRACE_FORMAT))
        handler._mclisp_trace = True
        logger.addHandler(handler)
        handlers.append(handler)
    return handlers


def disable_trace() -> None:
    """Remove trace handlers and restore the default logger levels."""
    for name in TRACE_LOGGERS:
        logger = logging.getLogger(name)
        for handler in [h for h in logger.handlers if getattr(h, "_mclisp_trace", False)]:
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


class Interpreter:
    """
    Reads and evaluates mclisp source against one ambient environment.
    Functions installed with defun stay available to every later eval call.

    Evaluation is plain recursion, so each Lisp call level costs several
    Python frames: with the default recursion limit of 1000 a recursive
    function runs out of stack after roughly 140 nested calls and raises
    RecursionError. Set MCLISP_RECURSION_LIMIT to raise the limit for deeper
    programs. MCLISP_TRACE prints evaluation steps to stderr.
    """

    def __init__(self, prelude: str | None = None, env: Environment | None = None):
        self._logger = logging.getLogger("Interpreter")
        self.env = env if env is not None else Environment()

        if trace_enabled():
            enable_trace()

        limit = get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            self._logger.info("Raising recursion limit to %d", limit)
            sys.setrecursionlimit(limit)

        if prelude == "auto":
            for path in get_prelude_files():
                self.load_file(path)
        elif prelude:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code` and return the last result.

        Returns the empty list when `code` holds no expressions.
        """
        stream = TokenStream(lex(code))
        result = empty_list()
        while True:
            expr = stream.parse_expr()
            if expr is None:
                break
            result = evaluate(self.env, expr)
        return result

    def load_file(self, path: str | Path) -> LispValue:
        """Evaluate a source file in the ambient environment."""
        path = Path(path)
        self._logger.info("Loading %s", path)
        return self.eval(path.read_text(encoding="utf-8"))
