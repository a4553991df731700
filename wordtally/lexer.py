"""Count the words of a text file, optionally accumulating into a log file."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field
from typing import TextIO

from wordtally.filesub import WordTooLongError, absolute_filename, read_words

__all__ = ["MAX_WORD_LEN", "LogFileError", "WordLog", "count_words", "main"]

MAX_WORD_LEN = 80

_COUNT_LINE = re.compile(r"\s*(\S+)\s+([+-]?\d+)")


class LogFileError(ValueError):
    """Raised when a log file is not in the expected format."""


@dataclass
class WordLog:
    """Word counts together with the names of the files they came from."""

    counts: dict[str, int] = field(default_factory=dict)
    paths: list[str] = field(default_factory=list)

    def add_word(self, word: str, count: int = 1) -> None:
        self.counts[word] = self.counts.get(word, 0) + count

    def add_path(self, path: str) -> None:
        self.paths.append(path)

    def merge(self, other: WordLog) -> None:
        """Add another log's counts to this one and append its paths."""
        for word, count in other.counts.items():
            self.add_word(word, count)
        self.paths.extend(other.paths)

    def sorted_items(self) -> list[tuple[str, int]]:
        return sorted(self.counts.items())

    def format_counts(self) -> str:
        """One ``word<TAB>count`` line per word, in sorted order."""
        return "".join(f"{word}\t{count}\n" for word, count in self.sorted_items())

    def dump(self, stream: TextIO) -> None:
        """Write counts, a blank line, then one path per line."""
        stream.write(self.format_counts())
        stream.write("\n")
        for path in self.paths:
            stream.write(f"{path}\n")

    @classmethod
    def load(cls, stream: TextIO) -> WordLog:
        """Read a log written by :meth:`dump`; at least one path is required."""
        log = cls()
        while True:
            line = stream.readline()
            if not line:
                raise LogFileError("log file ends before the list of files")
            if line.startswith("\n"):
                break
            match = _COUNT_LINE.match(line)
            if match is None:
                raise LogFileError(f"bad count line: {line!r}")
            log.add_word(match.group(1), int(match.group(2)))

        lines = [line.rstrip("\n") for line in stream]
        if not lines:
            raise LogFileError("log file names no files")
        log.paths.extend(lines)
        return log


def count_words(stream: TextIO, max_word_len: int) -> WordLog:
    """Count the words in ``stream``; a word of ``max_word_len`` letters is an error."""
    log = WordLog()
    for word in read_words(stream, max_word_len, lowercase=False):
        if len(word) == max_word_len:
            raise WordTooLongError(word, max_word_len)
        log.add_word(word)
    return log


def _usage(prog: str) -> int:
    print(f"Usage: {prog} [-l logfile] textfile", file=sys.stderr)
    return 1


def _report_os_error(name: str, err: OSError) -> int:
    print(f"{name}: {err.strerror or err}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Run the word counter; returns the process exit status."""
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "wordtally"
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _usage(prog)

    use_log = False
    while args and args[0].startswith("-"):
        for flag in args.pop(0)[1:]:
            if flag != "l":
                print("Unknown flag in command line", file=sys.stderr)
                return 1
            use_log = True

    log_name = None
    if use_log:
        if not args:
            return _usage(prog)
        log_name = args.pop(0)
    if not args:
        return _usage(prog)

    try:
        text_path = absolute_filename(args[0])
    except OSError as err:
        return _report_os_error(args[0], err)

    try:
        with open(text_path, encoding="utf-8", errors="replace") as text_file:
            log = count_words(text_file, MAX_WORD_LEN)
    except OSError as err:
        return _report_os_error(text_path, err)
    except WordTooLongError as err:
        print(err, file=sys.stderr)
        return 1

    if log_name is not None and os.path.exists(log_name):
        try:
            with open(log_name, encoding="utf-8") as log_file:
                log.merge(WordLog.load(log_file))
        except (LogFileError, OSError):
            print("Error in logfile", file=sys.stderr)
            return 1

    sys.stdout.write(log.format_counts())

    if log_name is not None:
        log.add_path(text_path)
        try:
            with open(log_name, "w", encoding="utf-8") as log_file:
                log.dump(log_file)
        except OSError as err:
            return _report_os_error(log_name, err)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())