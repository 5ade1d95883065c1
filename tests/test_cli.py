"""
Tests for CLI Commands
======================
Tests for the wordkit CLI interface in wordkit/cli.py.
"""

import json

import pytest
import sys
import subprocess
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wordkit.cli import main


def run_cli(*args):
    return subprocess.run(
        [sys.executable, "-m", "wordkit", *args],
        capture_output=True,
        text=True,
        cwd=str(ROOT),
    )


@pytest.fixture
def ab_corpus(tmp_path):
    """Corpus file whose only reachable word is 'ab'."""
    path = tmp_path / "ab.txt"
    path.write_text("ab\nab\nab\n")
    return path


class TestCLIBasic:
    """Basic CLI tests."""

    def test_version_flag(self):
        """Test --version flag."""
        result = run_cli("--version")
        assert result.returncode == 0
        assert "wordkit" in result.stdout.lower()

    def test_help_flag(self):
        """Test --help flag."""
        result = run_cli("--help")
        assert result.returncode == 0
        assert "generate" in result.stdout.lower()
        assert "stats" in result.stdout.lower()

    def test_generate_help(self):
        """Test generate --help."""
        result = run_cli("generate", "--help")
        assert result.returncode == 0
        assert "--count" in result.stdout

    def test_no_command_prints_help(self, capsys):
        """Test running without a command prints help."""
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()


class TestCLIGenerate:
    """Tests for generate command."""

    def test_generate_json(self):
        """Test JSON output from the built-in corpus."""
        result = run_cli("generate", "-n", "5", "--seed", "1", "--json")
        assert result.returncode == 0
        words = json.loads(result.stdout)
        assert len(words) == 5
        assert all(3 <= len(w) <= 8 for w in words)

    def test_generate_seed_reproducible(self, capsys):
        """Test the same seed prints the same words."""
        main(["generate", "-n", "6", "--seed", "9", "--plain"])
        first = capsys.readouterr().out
        main(["generate", "-n", "6", "--seed", "9", "--plain"])
        assert capsys.readouterr().out == first

    def test_generate_from_corpus_file(self, ab_corpus, capsys):
        """Test training on a word list file."""
        code = main(["generate", "--corpus", str(ab_corpus), "--order", "1",
                     "-n", "1", "--min-length", "1", "--json"])
        assert code == 0
        assert json.loads(capsys.readouterr().out) == ["ab"]

    def test_generate_capped_batch(self, ab_corpus, capsys):
        """Test an impossible distinct batch stops at --max-attempts."""
        code = main(["generate", "--corpus", str(ab_corpus), "--order", "1",
                     "-n", "3", "--min-length", "1", "--max-attempts", "20", "--json"])
        assert code == 0
        assert json.loads(capsys.readouterr().out) == ["ab"]

    def test_generate_table(self, capsys):
        """Test the default table output."""
        assert main(["generate", "-n", "3", "--seed", "4"]) == 0
        assert "words" in capsys.readouterr().out

    def test_generate_quiet(self, capsys):
        """Test quiet mode prints no table."""
        assert main(["-q", "generate", "-n", "3", "--seed", "4"]) == 0
        assert capsys.readouterr().out == ""

    def test_generate_alias(self, ab_corpus, capsys):
        """Test the 'g' alias."""
        assert main(["g", "-c", str(ab_corpus), "-o", "1", "-n", "1",
                     "--min-length", "1", "--plain"]) == 0
        assert capsys.readouterr().out.strip() == "ab"

    def test_missing_corpus_file(self, tmp_path, capsys):
        """Test a missing corpus file is reported as an error."""
        code = main(["generate", "--corpus", str(tmp_path / "none.txt")])
        assert code == 1
        assert "Error" in capsys.readouterr().err

    def test_invalid_order(self, capsys):
        """Test --order 0 is rejected by the model."""
        assert main(["generate", "--order", "0"]) == 1
        assert "order must be a positive integer" in capsys.readouterr().err

    def test_negative_prior(self, capsys):
        """Test a negative --prior is rejected."""
        assert main(["generate", "--prior", "-1"]) == 1
        assert "prior must be finite and non-negative" in capsys.readouterr().err

    def test_inverted_bounds(self, capsys):
        """Test min length above max length is an error."""
        assert main(["generate", "--min-length", "9", "--max-length", "3"]) == 1
        assert "min_length" in capsys.readouterr().err


class TestCLIInspect:
    """Tests for alphabet and stats commands."""

    def test_alphabet(self, ab_corpus, capsys):
        """Test the alphabet of a corpus file."""
        assert main(["alphabet", "--corpus", str(ab_corpus)]) == 0
        assert capsys.readouterr().out.strip() == "#ab"

    def test_alphabet_json(self, ab_corpus, capsys):
        assert main(["alphabet", "--corpus", str(ab_corpus), "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == ["#", "a", "b"]

    def test_stats_json(self, ab_corpus, capsys):
        """Test model statistics as JSON."""
        assert main(["stats", "--corpus", str(ab_corpus), "--order", "2", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["order"] == 2
        assert data["corpus_size"] == 3
        assert data["alphabet"] == ["#", "a", "b"]
        assert data["contexts"] == [3, 3]

    def test_stats_table(self, capsys):
        """Test the stats panel."""
        assert main(["stats"]) == 0
        assert "Markov model" in capsys.readouterr().out

    def test_stats_invalid_order(self, capsys):
        """Test stats rejects --order 0 the same way as generate."""
        assert main(["stats", "--order", "0"]) == 1
        assert "order must be a positive integer" in capsys.readouterr().err
