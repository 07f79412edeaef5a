"""
Command-line interface tests for Markovian.
"""

from __future__ import annotations

import json
import re

from markovian.cli import main

CORPUS = "the cat sat on the mat.\nthe dog sat on the cat.\na bird flew over the dog.\n"


def _write_corpus(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text(CORPUS, encoding="utf-8")
    return path


def test_tweets_prints_numbered_sentences(tmp_path, capsys):
    """
    The tweets command prints one numbered sentence per requested tweet.
    """
    path = _write_corpus(tmp_path)
    assert main(["tweets", "7", "3", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(":")[0] for line in lines] == ["Tweet 1", "Tweet 2", "Tweet 3"]
    for line in lines:
        words = line.split(": ", 1)[1].split()
        assert 1 <= len(words) <= 20
        assert not words[0].endswith(".")


def test_tweets_are_reproducible_for_a_seed(tmp_path, capsys):
    """
    The same seed produces the same output.
    """
    path = _write_corpus(tmp_path)
    main(["tweets", "11", "5", str(path)])
    first = capsys.readouterr().out
    main(["tweets", "11", "5", str(path)])
    second = capsys.readouterr().out
    assert first == second


def test_tweets_with_word_limit(tmp_path, capsys):
    """
    A word limit restricts the vocabulary to the leading words.
    """
    path = _write_corpus(tmp_path)
    assert main(["tweets", "3", "4", str(path), "6"]) == 0
    out = capsys.readouterr().out
    vocabulary = {"the", "cat", "sat", "on", "mat."}
    for line in out.splitlines():
        assert set(line.split(": ", 1)[1].split()) <= vocabulary


def test_tweets_missing_file_reports_error(tmp_path, capsys):
    """
    A missing corpus exits with code 2 and the incorrect path message.
    """
    assert main(["tweets", "1", "1", str(tmp_path / "missing.txt")]) == 2
    assert "Error: incorrect file path" in capsys.readouterr().err


def test_tweets_all_terminal_corpus_reports_empty_domain(tmp_path, capsys):
    """
    A corpus made only of sentence ends cannot start a tweet.
    """
    path = tmp_path / "ends.txt"
    path.write_text("one. two. three.\n", encoding="utf-8")
    assert main(["tweets", "1", "1", str(path)]) == 2
    captured = capsys.readouterr()
    assert "all registered states are terminal" in captured.err
    assert captured.out == ""


def test_tweets_from_configuration_file(tmp_path, capsys):
    """
    Run values can come from a YAML file with command-line overrides.
    """
    path = _write_corpus(tmp_path)
    config = tmp_path / "run.yml"
    config.write_text(f"seed: 5\ncount: 1\npath: {path}\nmax_length: 3\n", encoding="utf-8")
    assert main(["tweets", "--config", str(config), "--set", "count=2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    for line in lines:
        assert len(line.split(": ", 1)[1].split()) <= 3


def test_tweets_invalid_configuration(tmp_path, capsys):
    """
    Invalid run values are reported as validation errors.
    """
    path = _write_corpus(tmp_path)
    assert main(["tweets", "1", "-1", str(path)]) == 2
    assert "count" in capsys.readouterr().err


def test_snakes_prints_walks_from_first_cell(capsys):
    """
    Every board walk starts on cell 1 and is bounded in length.
    """
    assert main(["snakes", "3", "4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    for number, line in enumerate(lines, start=1):
        assert line.startswith(f"Random Walk {number}: [1] ->")
        cells = re.findall(r"\[(\d+)\]", line)
        assert 2 <= len(cells) <= 60
        if cells[-1] == "100":
            assert line.endswith(" [100]")


def test_describe_board(capsys):
    """
    The describe command prints board statistics as JSON.
    """
    assert main(["describe", "--board"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["domain_id"] == "board"
    assert payload["state_count"] == 100
    assert payload["terminal_state_count"] == 1


def test_describe_corpus_path(tmp_path, capsys):
    """
    ``markovian describe PATH`` summarizes the word chain of the corpus.
    """
    path = _write_corpus(tmp_path)
    assert main(["describe", str(path)]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["domain_id"] == "words"
    assert payload["state_count"] == 12


def test_describe_corpus_path_with_word_limit(tmp_path, capsys):
    """
    The optional word limit restricts the words read from the corpus.
    """
    path = _write_corpus(tmp_path)
    assert main(["describe", str(path), "3"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["state_count"] == 3
    assert payload["observed_transitions"] == 2


def test_describe_requires_path_or_board(capsys):
    """
    Without --board the command needs a corpus path.
    """
    assert main(["describe"]) == 2
    assert "requires a corpus path" in capsys.readouterr().err


def test_describe_board_rejects_corpus_path(tmp_path, capsys):
    """
    The board summary does not read a corpus.
    """
    path = _write_corpus(tmp_path)
    assert main(["describe", "--board", str(path)]) == 2
    assert "does not take a corpus path" in capsys.readouterr().err
