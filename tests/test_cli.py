from pathlib import Path
import pytest
from typer.testing import CliRunner
from jumbleword.cli import app

WORDS_FILE = Path(__file__).parent / "data" / "words.txt"
runner = CliRunner()


def invoke(*args, dictionary=WORDS_FILE, input=None):
    return runner.invoke(app, ["--dictionary", str(dictionary), "--seed", "5", *args], input=input)


@pytest.fixture
def small_words(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("yellow\nlow\nyew\nowl\n", encoding="utf-8")
    return path


def test_subwords():
    result = invoke("subwords", "yellow")
    assert result.exit_code == 0
    assert "(13)" in result.output
    for word in ("lowly", "yowl", "yeow"):
        assert word in result.output


def test_exists():
    assert invoke("exists", "yellow").exit_code == 0
    result = invoke("exists", "yelow")
    assert result.exit_code == 1
    assert "not a word" in result.output


def test_prefix_and_search():
    result = invoke("prefix", "yel")
    assert "yell, yellow" in result.output
    result = invoke("search", "--start", "a", "--end", "e")
    assert "able, aisle, apple" in result.output


def test_palindromes():
    result = invoke("palindromes")
    assert result.exit_code == 0
    assert "level" in result.output
    assert "Madam" in result.output


def test_random():
    result = invoke("random", "--length", "6")
    assert result.exit_code == 0
    assert result.output.strip() in {"yellow", "prefix", "listen", "silent", "tinsel"}
    assert invoke("random", "--length", "20").exit_code == 1


def test_scramble():
    result = invoke("scramble", "zzz")
    assert result.output.strip() == "zzz"


def test_new_game_reveal(small_words):
    result = invoke("new-game", "--reveal", dictionary=small_words)
    assert result.exit_code == 0
    assert "Word: yellow" in result.output
    assert "yew" in result.output


def test_new_game_rejects_bad_length():
    result = invoke("new-game", "--length", "2")
    assert result.exit_code == 1
    assert "Error" in result.output


def test_missing_dictionary(tmp_path):
    result = invoke("exists", "yellow", dictionary=tmp_path / "missing.txt")
    assert result.exit_code == 1
    assert "Error" in result.output


def test_play(small_words):
    result = invoke("play", dictionary=small_words, input="low\nlow\nnope\n:quit\n")
    assert result.exit_code == 0
    assert "Found low" in result.output
    assert "Already found low" in result.output
    assert "nope is not in this puzzle" in result.output
    assert "Word: yellow" in result.output


def test_play_until_complete(small_words):
    result = invoke("play", dictionary=small_words, input="low\nowl\nyew\n")
    assert result.exit_code == 0
    assert "All words found!" in result.output


def test_play_ends_when_input_runs_out(small_words):
    result = invoke("play", dictionary=small_words, input="low\n")
    assert result.exit_code == 0
    assert "Found low" in result.output
    assert "Word: yellow" in result.output
