"""Small logger used internally by the client."""

import os
import sys
import threading


def _as_text(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    return str(value)


def _sprint(args):
    pieces = []
    previous_is_str = True
    for position, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if position and not is_str and not previous_is_str:
            pieces.append(" ")
        pieces.append(_as_text(arg))
        previous_is_str = is_str
    return "".join(pieces)


def _sprintln(args):
    return " ".join(_as_text(arg) for arg in args) + "\n"


class InternalLog:
    """Writes log lines to a stream, optionally tagged with the caller's file and line."""

    def __init__(self, stream=None, prefix="", shortfile=False):
        self.stream = sys.stderr if stream is None else stream
        self.prefix = prefix
        self.shortfile = shortfile
        self._lock = threading.Lock()

    def output(self, calldepth, text):
        """Write one line; calldepth 1 names the direct caller of this method."""
        header = self.prefix
        if self.shortfile:
            frame = sys._getframe(calldepth)
            header += f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}: "
        if not text.endswith("\n"):
            text += "\n"
        with self._lock:
            self.stream.write(header + text)

    def print(self, *args):
        self.output(2, _sprint(args))

    def printf(self, fmt, *args):
        self.output(2, fmt % args if args else fmt)

    def println(self, *args):
        self.output(2, _sprintln(args))


class Discard:
    """Debug sink that drops every line, keeping only a count of what it dropped."""

    def __init__(self):
        self.dropped = 0
        self._lock = threading.Lock()

    def debug(self):
        return False

    def debugf(self, fmt, *args):
        with self._lock:
            self.dropped += 1

    def debugln(self, *args):
        with self._lock:
            self.dropped += 1