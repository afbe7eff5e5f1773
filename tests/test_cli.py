"""Tests for the command-line interface."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from conftest import write_csv
from post_classifier import __version__
from post_classifier.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def tiny_train(tmp_path):
    return write_csv(tmp_path / "tiny.csv", [
        {"tag": "sports", "content": "great game"},
        {"tag": "politics", "content": "great debate"},
    ])


class TestTrainingMode:
    """One argument: diagnostic dump."""

    def test_text_dump(self, runner, tiny_train):
        result = runner.invoke(cli, [str(tiny_train)])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("training data:\n  label = sports, content = great game\n")
        assert "trained on 2 examples\nvocabulary size = 3\n" in result.output
        assert "  politics:great, count = 1, log-likelihood = 0\n" in result.output
        assert "test data:" not in result.output

    def test_json_dump(self, runner, tiny_train):
        result = runner.invoke(cli, [str(tiny_train), "--output", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["total_documents"] == 2

    def test_rich_dump(self, runner, tiny_train):
        result = runner.invoke(cli, [str(tiny_train), "-o", "rich"])
        assert result.exit_code == 0, result.output
        assert "Classifier Parameters" in result.output

    def test_header_only_training_file(self, runner, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("tag,content\n", encoding="utf-8")
        result = runner.invoke(cli, [str(path)])
        assert result.exit_code == 0
        assert "trained on 0 examples" in result.output


class TestEvaluationMode:
    """Two arguments: predictions and accuracy."""

    def test_text_evaluation(self, runner, tiny_train, tmp_path):
        test_file = write_csv(tmp_path / "held.csv", [
            {"tag": "sports", "content": "great game"},
            {"tag": "sports", "content": "great"},
        ])
        result = runner.invoke(cli, [str(tiny_train), str(test_file)])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("trained on 2 examples\n\ntest data:\n")
        assert "  correct = sports, predicted = politics, log-probability score = -0.693\n" in result.output
        assert result.output.endswith("performance: 1 / 2 posts predicted correctly\n\n")
        assert "training data:" not in result.output

    def test_json_evaluation(self, runner, train_csv, test_csv):
        result = runner.invoke(cli, [str(train_csv), str(test_csv), "--output", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["total"] == 3
        assert data["total_documents"] == 5

    def test_rich_evaluation(self, runner, train_csv, test_csv):
        result = runner.invoke(cli, [str(train_csv), str(test_csv), "-o", "rich"])
        assert result.exit_code == 0, result.output
        assert "Test Data" in result.output

    def test_empty_training_with_test_file(self, runner, tmp_path, test_csv):
        path = tmp_path / "empty.csv"
        path.write_text("tag,content\n", encoding="utf-8")
        result = runner.invoke(cli, [str(path), str(test_csv)])
        assert result.exit_code == 1
        assert "no training examples" in result.output


class TestConfiguration:
    """Options for column names and environment variables."""

    def test_custom_columns(self, runner, tmp_path):
        path = write_csv(
            tmp_path / "alt.csv",
            [{"label": "x", "text": "hello"}],
            fieldnames=("label", "text"),
        )
        result = runner.invoke(cli, [str(path), "--label-field", "label", "--content-field", "text"])
        assert result.exit_code == 0, result.output
        assert "  label = x, content = hello\n" in result.output

    def test_output_from_environment(self, runner, tiny_train):
        result = runner.invoke(cli, [str(tiny_train)], env={"POST_CLASSIFIER_OUTPUT": "json"})
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["vocabulary_size"] == 3

    def test_verbose_flag(self, runner, tiny_train):
        result = runner.invoke(cli, [str(tiny_train), "--verbose"])
        assert result.exit_code == 0, result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestErrors:
    """Usage and file errors."""

    def test_no_arguments(self, runner):
        result = runner.invoke(cli, [])
        assert result.exit_code == 2
        assert "Usage:" in result.output

    def test_too_many_arguments(self, runner, tiny_train):
        result = runner.invoke(cli, [str(tiny_train), str(tiny_train), str(tiny_train)])
        assert result.exit_code == 2
        assert "Usage:" in result.output

    def test_missing_training_file(self, runner, tmp_path):
        result = runner.invoke(cli, [str(tmp_path / "missing.csv")])
        assert result.exit_code == 1
        assert "Error opening file" in result.output
        assert "training data:" not in result.output

    def test_missing_test_file_trains_nothing(self, runner, tiny_train, tmp_path):
        result = runner.invoke(cli, [str(tiny_train), str(tmp_path / "missing.csv")])
        assert result.exit_code == 1
        assert "Error opening file" in result.output
        assert "trained on" not in result.output

    def test_malformed_training_file(self, runner, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("tag,content\nx,one,two\n", encoding="utf-8")
        result = runner.invoke(cli, [str(path)])
        assert result.exit_code == 1
        assert "expected 2 fields" in result.output

    def test_invalid_output_choice(self, runner, tiny_train):
        result = runner.invoke(cli, [str(tiny_train), "--output", "xml"])
        assert result.exit_code == 2
