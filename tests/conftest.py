"""Shared test fixtures for post-classifier tests."""

from __future__ import annotations

import csv
from pathlib import Path

import pytest

from post_classifier.classifier import NaiveBayesClassifier


def write_csv(path: Path, rows: list[dict[str, str]], fieldnames: tuple[str, ...] = ("n", "tag", "content")) -> Path:
    """Write ``rows`` to ``path`` as a CSV file with a header row."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for i, row in enumerate(rows):
            writer.writerow({"n": str(i), **row} if "n" in fieldnames else row)
    return path


TRAIN_ROWS = [
    {"tag": "euchre", "content": "can the upcard ever be the left bower"},
    {"tag": "euchre", "content": "when would the dealer ever prefer a card"},
    {"tag": "euchre", "content": "bob played the same card twice is he cheating"},
    {"tag": "calculator", "content": "does stack need its own big three"},
    {"tag": "calculator", "content": "valgrind memory error not sure what it means"},
]

TEST_ROWS = [
    {"tag": "euchre", "content": "my code segfaults when bob is the dealer"},
    {"tag": "euchre", "content": "no rational explanation for this bug"},
    {"tag": "calculator", "content": "countif function in stack class"},
]


@pytest.fixture
def train_rows() -> list[dict[str, str]]:
    return list(TRAIN_ROWS)


@pytest.fixture
def train_csv(tmp_path: Path) -> Path:
    """A small training file with two labels."""
    return write_csv(tmp_path / "train.csv", TRAIN_ROWS)


@pytest.fixture
def test_csv(tmp_path: Path) -> Path:
    """Held-out posts for the labels in ``train_csv``."""
    return write_csv(tmp_path / "test.csv", TEST_ROWS)


@pytest.fixture
def trained_model() -> NaiveBayesClassifier:
    """Model trained on the same posts as ``train_csv``."""
    model = NaiveBayesClassifier()
    for row in TRAIN_ROWS:
        model.train(row["tag"], row["content"])
    return model


@pytest.fixture
def four_doc_model() -> NaiveBayesClassifier:
    """Four posts; "foo" occurs only under "b", "baz" only under "a"."""
    model = NaiveBayesClassifier()
    model.train("a", "bar baz")
    model.train("a", "bar baz")
    model.train("a", "qux")
    model.train("b", "foo bar")
    return model
