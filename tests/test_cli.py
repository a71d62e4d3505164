import json
import logging

import pytest
from click.testing import CliRunner

from valpass.cli import EXIT_ERROR, EXIT_OK, EXIT_WEAK, cli

from tests.conftest import RANDOM_GOOD


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def wordlist_file(tmp_path):
    path = tmp_path / "words.txt"
    words = [f"filler{i:05d}" for i in range(4999)] + ["Password"]
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return path


def test_check_good_passphrase_json(runner):
    result = runner.invoke(cli, ["-o", "json", "check", RANDOM_GOOD[0]])
    assert result.exit_code == EXIT_OK
    report = json.loads(result.output)
    assert report["result"]["ok"] is True
    assert report["result"]["entropy"] == pytest.approx(4.625)
    assert report["configuration"]["compression_min_percent"] == 10


def test_check_weak_passphrase_exit_code(runner):
    result = runner.invoke(cli, ["-o", "json", "check", "123456"])
    assert result.exit_code == EXIT_WEAK
    assert json.loads(result.output)["result"]["failed_checks"] == ["entropy", "distribution"]


def test_check_console_output(runner):
    result = runner.invoke(cli, ["check", "aaaaaaaaaaaaaaaaaaaaa"])
    assert result.exit_code == EXIT_WEAK
    assert "Passphrase Quality" in result.output
    assert "FAIL" in result.output
    assert "rejected" in result.output


def test_threshold_overrides(runner):
    result = runner.invoke(
        cli,
        ["-o", "json", "check", "--entropy", "0", "--distribution", "0", "123456"],
    )
    assert result.exit_code == EXIT_OK


def test_non_printable_is_error(runner):
    result = runner.invoke(cli, ["check", "abc\x0cdef"])
    assert result.exit_code == EXIT_ERROR


def test_unicode_flag(runner):
    args = ["-o", "json", "check", "--unicode", "--distribution", "0", "--entropy", "2", "äöüßÄÖÜ€"]
    result = runner.invoke(cli, args)
    assert result.exit_code == EXIT_OK
    assert json.loads(result.output)["configuration"]["alphabet_mode"] == "unicode_codepoint"


def test_wordlist_hit(runner, wordlist_file):
    result = runner.invoke(
        cli, ["-o", "json", "check", "--wordlist", str(wordlist_file), "PASSWORD"]
    )
    assert result.exit_code == EXIT_WEAK
    report = json.loads(result.output)
    assert report["result"]["dictionary_match"] is True
    assert report["configuration"]["dictionary"] == {
        "words": 5000,
        "allow_substring_match": False,
    }


def test_wordlist_submatch(runner, wordlist_file):
    args = ["check", "--compress", "0", "--entropy", "0", "--distribution", "0",
            "--wordlist", str(wordlist_file), "--submatch", "sswor"]
    assert runner.invoke(cli, args).exit_code == EXIT_WEAK


def test_small_wordlist_is_error(runner, tmp_path):
    path = tmp_path / "small.txt"
    path.write_text("eins\nzwei\ndrei\n", encoding="utf-8")
    result = runner.invoke(cli, ["check", "--wordlist", str(path), RANDOM_GOOD[0]])
    assert result.exit_code == EXIT_ERROR


def test_missing_wordlist_is_error(runner, tmp_path):
    result = runner.invoke(
        cli, ["check", "--wordlist", str(tmp_path / "nope.txt"), RANDOM_GOOD[0]]
    )
    assert result.exit_code == EXIT_ERROR


def test_passphrase_from_stdin(runner):
    result = runner.invoke(cli, ["-q", "check", "-"], input=RANDOM_GOOD[1] + "\n")
    assert result.exit_code == EXIT_OK


def test_output_file(runner, tmp_path):
    out = tmp_path / "reports" / "result.json"
    result = runner.invoke(cli, ["-o", "json", "-f", str(out), "check", RANDOM_GOOD[0]])
    assert result.exit_code == EXIT_OK
    assert json.loads(out.read_text(encoding="utf-8"))["result"]["ok"] is True


def test_config_file(runner, tmp_path):
    config = tmp_path / "valpass.toml"
    config.write_text(
        "[global]\noutput_format = \"json\"\n\n"
        "[validator]\nentropy_min_bits_per_symbol = 5.0\n",
        encoding="utf-8",
    )
    result = runner.invoke(cli, ["-c", str(config), "check", RANDOM_GOOD[0]])
    assert result.exit_code == EXIT_WEAK
    assert json.loads(result.output)["result"]["failed_checks"] == ["entropy"]


def test_quiet_suppresses_json_on_stdout(runner):
    result = runner.invoke(cli, ["-q", "-o", "json", "check", "123456"])
    assert result.exit_code == EXIT_WEAK
    assert result.output == ""


def test_submatch_without_wordlist_is_usage_error(runner):
    result = runner.invoke(cli, ["check", "--submatch", RANDOM_GOOD[0]])
    assert result.exit_code == EXIT_ERROR
    assert "requires a word list" in result.output


def test_aborted_check_is_logged(runner, tmp_path):
    log_file = tmp_path / "valpass.log"
    config = tmp_path / "valpass.toml"
    config.write_text(f"[global]\nlog_file = \"{log_file.as_posix()}\"\n", encoding="utf-8")
    try:
        result = runner.invoke(cli, ["-c", str(config), "check", "abc\x0cdef"])
        assert result.exit_code == EXIT_ERROR
        text = log_file.read_text(encoding="utf-8")
        assert "Check aborted: non-printable character" in text
    finally:
        for name in ("valpass.cli", "valpass.engine"):
            underlying = logging.getLogger(name)
            for handler in list(underlying.handlers):
                handler.close()
                underlying.removeHandler(handler)
            underlying.propagate = True
            underlying.setLevel(logging.NOTSET)
