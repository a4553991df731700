import io

import pytest

from wordtally.filesub import WordTooLongError
from wordtally.lexer import LogFileError, WordLog, count_words, main


def test_count_words_counts_repeats():
    log = count_words(io.StringIO("the cat the dog"), 80)
    assert log.counts == {"the": 2, "cat": 1, "dog": 1}
    assert log.paths == []


def test_count_words_is_case_sensitive():
    log = count_words(io.StringIO("Word word WORD"), 80)
    assert set(log.counts) == {"Word", "word", "WORD"}


def test_count_words_rejects_long_word():
    with pytest.raises(WordTooLongError) as info:
        count_words(io.StringIO("ok abcdefgh"), 5)
    assert info.value.word == "abcde"


def test_sorted_items_are_sorted():
    log = count_words(io.StringIO("pear apple fig apple"), 80)
    items = log.sorted_items()
    assert [w for w, _ in items] == sorted(log.counts)
    assert dict(items) == log.counts


def test_format_counts_layout():
    log = WordLog()
    log.add_word("b", 2)
    log.add_word("a")
    assert log.format_counts() == "a\t1\nb\t2\n"


def test_merge_adds_counts_and_paths():
    first = count_words(io.StringIO("x y"), 80)
    first.add_path("/one")
    second = count_words(io.StringIO("y z"), 80)
    second.add_path("/two")
    first.merge(second)
    assert first.counts["y"] == 2
    assert first.counts["x"] == 1 and first.counts["z"] == 1
    assert first.paths == ["/one", "/two"]


def test_dump_load_round_trip():
    log = count_words(io.StringIO("alpha beta alpha gamma"), 80)
    log.add_path("/data/one.txt")
    log.add_path("/data/two.txt")
    buffer = io.StringIO()
    log.dump(buffer)
    buffer.seek(0)
    assert WordLog.load(buffer) == log


def test_load_empty_counts_with_path():
    log = WordLog.load(io.StringIO("\n/data/file.txt\n"))
    assert log.counts == {}
    assert log.paths == ["/data/file.txt"]


def test_load_without_blank_line_fails():
    with pytest.raises(LogFileError):
        WordLog.load(io.StringIO("word\t3\n"))


def test_load_without_paths_fails():
    with pytest.raises(LogFileError):
        WordLog.load(io.StringIO("word\t3\n\n"))


def test_load_bad_count_fails():
    with pytest.raises(LogFileError):
        WordLog.load(io.StringIO("word\tmany\n\n/p\n"))


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_unknown_flag(capsys):
    assert main(["-x", "file.txt"]) == 1
    assert "Unknown flag in command line" in capsys.readouterr().err


def test_main_log_flag_without_text_file(capsys):
    assert main(["-l", "log"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_missing_text_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["missing.txt"]) == 1
    assert "missing.txt" in capsys.readouterr().err


def test_main_prints_counts(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a.txt").write_text("b a b\n")
    assert main(["a.txt"]) == 0
    expected = count_words(io.StringIO("b a b\n"), 80).format_counts()
    assert capsys.readouterr().out == expected


def test_main_accumulates_log(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a.txt").write_text("b a b\n")
    log_path = tmp_path / "words.log"

    assert main(["-l", str(log_path), "a.txt"]) == 0
    with open(log_path) as f:
        first = WordLog.load(f)
    assert first.counts == {"a": 1, "b": 2}
    assert len(first.paths) == 1
    assert first.paths[0].endswith("/a.txt")

    assert main(["-l", str(log_path), "a.txt"]) == 0
    with open(log_path) as f:
        second = WordLog.load(f)
    assert second.counts == {w: c * 2 for w, c in first.counts.items()}
    assert second.paths == first.paths * 2
    capsys.readouterr()


def test_main_corrupt_log(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a.txt").write_text("word\n")
    log_path = tmp_path / "bad.log"
    log_path.write_text("not a log")
    assert main(["-l", str(log_path), "a.txt"]) == 1
    assert "Error in logfile" in capsys.readouterr().err


def test_main_word_too_long(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a.txt").write_text("x" * 200)
    assert main(["a.txt"]) == 1
    assert "cannot possibly be a valid word" in capsys.readouterr().err