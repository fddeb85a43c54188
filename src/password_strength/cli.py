"""
cli.py: `password-strength` entry point.

Prompt once, read one line, print two lines, exit. Takes no options.

Exit codes
- 0: report printed
- 1: input closed or unreadable terminal
- 2: internal error (non-positive combination count)
- 130: interrupted
"""

from __future__ import annotations

from typing import List, Optional
import logging
import sys

from .errors import ComputationInvalidError, InputClosedError
from .estimator import estimate
from .prompt import PasswordPrompt
from .report import render_report

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def run(prompt: PasswordPrompt) -> List[str]:
    """Read, estimate, render. Exceptions propagate to `main`."""
    password = prompt.read()
    return render_report(estimate(password))


def main(argv: Optional[List[str]] = None, prompt: Optional[PasswordPrompt] = None) -> int:
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        logger.debug("ignoring %d command-line argument(s)", len(argv))

    try:
        lines = run(prompt or PasswordPrompt())
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130
    except InputClosedError as exc:
        print(f"\nNo password read: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"\nCould not read from the terminal: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except ComputationInvalidError as exc:
        logger.error("internal error: %s", exc)
        return 2

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
