# src/catlite/cli.py
import os
import sys
from typing import List, Optional

# Module imports
from catlite.config import HELP_TEXT
from catlite.core.classifier import classify_arguments
from catlite.core.renderer import render_files
from catlite.core.validator import validate_arguments
from catlite.errors import CatError

PROG = "catlite"


def report_error(message: str) -> None:
    print(f"{PROG}: {message}", file=sys.stderr)


def _silence_stdout() -> None:
    # Stdout is gone; point it at devnull so the interpreter's final flush stays quiet
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        # 1. Classify
        classified = classify_arguments(argv)

        # 2. Validate (files first, then options)
        validated = validate_arguments(classified)

        if validated.help_requested:
            print(HELP_TEXT)
            return 0

        # 3. Render
        render_files(validated.files, validated.numbering, sys.stdout)
        return 0

    except CatError as e:
        report_error(str(e))
        return 1

    except BrokenPipeError:
        _silence_stdout()
        return 1

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
