# wordtally

wordtally reads a text file and picks out its words. A word is a run of
the ASCII letters A–Z and a–z, and every other character separates words.
It prints every distinct word with the number of times it appears, in
sorted order. It can also keep a log file, so that counts build up over
many texts.

The command keeps the case of each word as it appears in the text. This
means `The` and `the` are counted as two different words. Sorting is by
plain string order, so capitalised words come before lower-case ones.

## Installation

```
pip install .
```

## Command line

```
wordtally [-l logfile] textfile
```

Each line of output is a word, a tab and its count:

```
The	1
cat	2
the	7
```

### The log file

With `-l logfile`, if the log file already exists, its counts are added to
the counts from `textfile` before anything is printed. The combined tally
is then written back to the log file. After the counts comes a blank line,
then one file name per line. The file names are those already in the log,
followed by the name of the text file just counted.

That name is written as the current working directory, a `/`, and the
name given on the command line.

### Errors

The program prints a message to standard error and exits with status 1
when:

- the arguments are wrong (usage message), or an unknown flag is given;
- the text file cannot be opened;
- a run of 80 or more letters is found, which cannot be a real word;
- an existing log file is malformed;
- the log file cannot be written.

The text file is read as UTF-8, with undecodable bytes replaced.

## Library use

```python
import io
from wordtally.lexer import MAX_WORD_LEN, WordLog, count_words

log = count_words(io.StringIO("The cat saw the dog."), MAX_WORD_LEN)
print(log.format_counts())      # The\t1\ncat\t1\ndog\t1\nsaw\t1\nthe\t1\n

with open("tally.log", encoding="utf-8") as stream:
    previous = WordLog.load(stream)
log.merge(previous)
log.add_path("/home/me/story.txt")
with open("tally.log", "w", encoding="utf-8") as stream:
    log.dump(stream)
```

### `WordLog` and `count_words`

- `WordLog` holds a `counts` dictionary and a `paths` list.
  - `add_word(word, count=1)` adds to a word's count.
  - `add_path(path)` appends a file name.
  - `merge(other)` adds another log's counts to this one and appends its paths.
  - `sorted_items()` returns `(word, count)` pairs in sorted order.
  - `format_counts()` returns the `word<TAB>count` lines.
  - `dump(stream)` writes the log in the format described above.
  - `WordLog.load(stream)` reads that format back. It raises `LogFileError`
    when a count line is malformed, when the blank line is missing, or when
    no file names follow it.
- `count_words(stream, max_word_len)` raises `WordTooLongError` for a word
  of `max_word_len` letters.

### `wordtally.filesub`

This module has the lower-level helpers:

- `read_words(stream, max_len, lowercase=True)` yields the words of a
  stream, folded to lower case unless `lowercase` is false. A run longer
  than `max_len` is cut after `max_len` letters. The letter that follows
  the cut is dropped, and the rest of the run comes out as the next word.
  `max_len` must be greater than 1.
- `absolute_filename(name)` joins the working directory and `name` with `/`.
- `dos_absolute_filename(name, cwd=None)` builds a full drive-letter path
  with backslash separators:
  - Leading dots in the directory part climb one directory per dot from
    `cwd`.
  - Without `cwd`, the process's working directory is used and `name` must
    exist, otherwise `FileNotFoundError` is raised.
  - A name with no file part raises `ValueError`.