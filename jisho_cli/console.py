#!/usr/bin/env python3
"""
Terminal utilities: UTF-8 console setup, color decision and the transient status line
"""

import os
import sys
from typing import Mapping, Optional, TextIO

COLOR_CHOICES = ('auto', 'never', 'always')


def setup_console():
    """
    Setup Windows console to print kana and kanji without encoding errors
    """
    if sys.platform.startswith('win'):
        if hasattr(sys.stdout, 'reconfigure'):
            sys.stdout.reconfigure(encoding='utf-8', errors='replace')
            sys.stderr.reconfigure(encoding='utf-8', errors='replace')

        os.environ['PYTHONIOENCODING'] = 'utf-8:replace'


def is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())


def should_use_color(option: str, stream: Optional[TextIO] = None,
                     environ: Optional[Mapping[str, str]] = None) -> bool:
    """Resolve a --color value; 'auto' colors TTYs unless NO_COLOR is set"""
    if option == 'always':
        return True
    if option == 'never':
        return False
    if option != 'auto':
        raise ValueError(f"Invalid value for 'color': {option}")

    env = os.environ if environ is None else environ
    return 'NO_COLOR' not in env and is_tty(stream if stream is not None else sys.stdout)


class StatusLine:
    """Single-line progress message that is erased once work is done. No-op off a TTY."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout
        self.active = False

    def show(self, message: str):
        if not is_tty(self.stream):
            return
        self.stream.write(message)
        self.stream.flush()
        self.active = True

    def clear(self):
        if not self.active:
            return
        # Erase the whole line and return the cursor to column 0
        self.stream.write('\x1b[2K\r')
        self.stream.flush()
        self.active = False
