# src/catlite/core/renderer.py
import io
import sys
from typing import BinaryIO, Iterable, Iterator, Optional, Sequence, TextIO, Union

from catlite.config import DECODE_ERRORS, FILE_ENCODING, START_LINE_NUMBER
from catlite.errors import RenderError
from catlite.models import NumberingMode


def number_lines(
    lines: Iterable[str],
    mode: NumberingMode,
    start: int = START_LINE_NUMBER,
) -> Iterator[str]:
    """
    Applies the numbering policy to already-stripped lines.

    - NUMBER_NONBLANK: only non-empty lines get "<n> ", and only they advance n.
    - NUMBER: every line gets "<n> ", empty ones included.
    - NONE: lines pass through untouched.
    """
    counter = start
    for line in lines:
        if mode is NumberingMode.NUMBER_NONBLANK:
            if line:
                line = f"{counter} {line}"
                counter += 1
        elif mode is NumberingMode.NUMBER:
            line = f"{counter} {line}"
            counter += 1
        yield line


def _read_lines(f: BinaryIO) -> Iterator[str]:
    # Lines end at \n; a \r right before it belongs to the terminator
    for raw in f:
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        yield raw.decode(FILE_ENCODING, errors=DECODE_ERRORS)


def _write_out(out: TextIO, text: str) -> None:
    """Writes bytes to the underlying buffer when there is one, so undecodable input comes back out as-is."""
    raw = getattr(out, "buffer", None)
    if raw is None:
        out.write(text)
        out.flush()
        return
    out.flush()
    raw.write(text.encode(FILE_ENCODING, errors=DECODE_ERRORS))
    raw.flush()


def render_file(path: str, mode: NumberingMode, out: Optional[TextIO] = None) -> None:
    """
    Streams one file into `out`, one output line per source line.
    The output is buffered in memory and flushed once the whole file is read.
    The file is closed on every exit path.
    """
    if out is None:
        out = sys.stdout

    try:
        f = open(path, "rb")
    except OSError as e:
        raise RenderError(path, e) from e

    buffer = io.StringIO()
    line_no = 0
    with f:
        try:
            # number_lines yields exactly one output line per source line
            for line_no, line in enumerate(number_lines(_read_lines(f), mode), start=1):
                buffer.write(line)
                buffer.write("\n")
        except OSError as e:
            raise RenderError(path, e, line_number=line_no + 1) from e

    try:
        _write_out(out, buffer.getvalue())
    except BrokenPipeError:
        raise
    except OSError as e:
        raise RenderError(path, e) from e


def render_files(
    files: Sequence[str],
    numbering: Union[NumberingMode, Sequence[str]],
    out: Optional[TextIO] = None,
) -> None:
    """
    Renders every file in the order given. The first failure stops the run;
    files after it are never opened.
    """
    if not isinstance(numbering, NumberingMode):
        numbering = NumberingMode.from_options(numbering)

    for path in files:
        render_file(path, numbering, out)
