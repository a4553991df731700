"""Reading words from text streams and building absolute file names."""

from __future__ import annotations

import functools
import os
from collections.abc import Iterator
from typing import TextIO

__all__ = [
    "WordTooLongError",
    "read_words",
    "absolute_filename",
    "dos_absolute_filename",
]


class WordTooLongError(ValueError):
    """Raised when a run of letters is too long to be a real word."""

    def __init__(self, word: str, max_len: int) -> None:
        self.word = word
        self.max_len = max_len
        super().__init__(
            f"Error\n{word}\nis at least {max_len} characters "
            "and cannot possibly be a valid word"
        )


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def read_words(stream: TextIO, max_len: int, lowercase: bool = True) -> Iterator[str]:
    """Yield the runs of ASCII letters in ``stream``.

    Every other character separates words. A run longer than ``max_len`` is
    cut after ``max_len`` letters; the letter read after the cut is dropped
    and the rest of the run comes out as the next word.
    """
    if max_len <= 1:
        raise ValueError("max_len must be greater than 1")

    chars = iter(functools.partial(stream.read, 1), "")
    for ch in chars:
        if not _is_alpha(ch):
            continue
        word = [ch]
        for ch in chars:
            if not _is_alpha(ch) or len(word) >= max_len:
                break
            word.append(ch)
        text = "".join(word)
        yield text.lower() if lowercase else text


def absolute_filename(name: str) -> str:
    """Join the current working directory and ``name`` with a slash."""
    return os.getcwd() + "/" + name


def _split_dos_path(path: str) -> tuple[str, str, str, str]:
    """Split a DOS path into drive, directory, file name and extension."""
    drive = ""
    if len(path) >= 2 and path[1] == ":":
        drive, path = path[:2], path[2:]

    cut = max(path.rfind("\\"), path.rfind("/")) + 1
    directory, rest = path[:cut], path[cut:]
    if rest in (".", ".."):
        return drive, directory + rest, "", ""

    dot = rest.rfind(".")
    if dot > 0:
        return drive, directory, rest[:dot], rest[dot:]
    return drive, directory, rest, ""


def _merge_dos_path(drive: str, directory: str, name: str, ext: str) -> str:
    if directory and directory[-1] not in "\\/":
        directory += "\\"
    if ext and not ext.startswith("."):
        ext = "." + ext
    return drive + directory + name + ext


def dos_absolute_filename(name: str, cwd: str | None = None) -> str:
    """Build the full DOS path (drive, directory, file) of ``name``.

    Leading dots in the directory part climb one directory per dot from
    ``cwd``. When ``cwd`` is omitted the process's working directory is used
    and ``name`` must exist; when it is given nothing on disk is consulted.
    """
    if cwd is None:
        if not os.path.exists(name):
            raise FileNotFoundError(name)
        cwd = os.getcwd()

    cwd_drive, cwd_dir, _, _ = _split_dos_path(cwd + "\\xerrorx")
    drive, directory, filename, ext = _split_dos_path(name)

    if not filename:
        raise ValueError(f"no file name in {name!r}")
    if not drive:
        drive = cwd_drive

    if not directory:
        directory = cwd_dir
    else:
        head = directory.split("\\", 1)[0]
        dots = head.count(".")
        if dots:
            if cwd_dir.count("\\") == dots:
                directory = "\\"
            else:
                trimmed = cwd_dir
                for _ in range(dots):
                    cut = trimmed.rfind("\\")
                    if cut < 0:
                        break
                    trimmed = trimmed[:cut]
                directory = trimmed

    return _merge_dos_path(drive, directory, filename, ext)