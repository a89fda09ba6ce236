"""Command line entry point: run an Eta source file."""

import argparse
import logging
import sys

from eta.config import get_log_level
from eta.errors import EtaError
from eta.interpreter import Interpreter
from eta.types.values import Void


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="eta", description="Run an Eta program")
    parser.add_argument("file", help="Eta source file to run")
    parser.add_argument("-v", "--verbose", action="store_true", help="log evaluation at debug level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger = logging.getLogger("eta")

    interpreter = Interpreter()
    try:
        result = interpreter.eval_file(args.file)
    except OSError as e:
        print(f"error: cannot read {args.file}: {e.strerror or e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"error: cannot read {args.file}: not valid UTF-8 ({e.reason})", file=sys.stderr)
        return 1
    except EtaError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        logger.debug("recursion limit %d exceeded", sys.getrecursionlimit())
        print("error: maximum recursion depth exceeded", file=sys.stderr)
        return 1

    if not isinstance(result, Void):
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
