import logging
import sys
from pathlib import Path

from eta import LispValue
from eta.builtin.env_builtin import create_root_environment
from eta.config import get_recursion_limit
from eta.errors import EtaError
from eta.evaluation.evaluator import evaluate
from eta.reader.parser import read
from eta.types.environment import Environment


class Interpreter:
    """
    Host for Eta programs.
    Owns a root environment seeded with the builtins; definitions persist
    across calls to eval so code can be fed incrementally.

    Each Eta call costs several Python frames, so nesting depth is bounded
    by the Python recursion limit. A limit passed in, or configured through
    ETA_RECURSION_LIMIT, raises it for the whole process; it is never lowered.
    """

    def __init__(self, env: Environment | None = None, recursion_limit: int | None = None):
        self._logger = logging.getLogger("Interpreter")
        self.env = env if env is not None else create_root_environment()

        limit = recursion_limit if recursion_limit is not None else get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            self._logger.debug("raising recursion limit to %d", limit)
            sys.setrecursionlimit(limit)

    def eval(self, code: str, filename: str | None = None) -> LispValue:
        """Read and evaluate code; returns the value of the last top-level form.

        Evaluation stops at the first failing form. Definitions made by the
        forms before it stay in the environment.
        """
        module = read(code, filename)
        self._logger.debug("evaluating %d form(s) from %s", len(module), filename or "<input>")
        try:
            return evaluate(module, self.env)
        except EtaError as e:
            self._logger.debug("evaluation failed: %s", e)
            raise

    def eval_file(self, path: str | Path) -> LispValue:
        path = Path(path)
        return self.eval(path.read_text(encoding="utf-8"), str(path))
