"""Multinomial Naive Bayes over per-document word presence.

The model counts, for every training post, which distinct words it
contains. Scores are plain natural-log sums of a label prior and one
likelihood term per distinct word of the post being classified.

Likelihoods back off in three tiers:

1. the word occurred under the label: ``ln(count(label, word) / count(label))``
2. the word occurred under some other label: ``ln(df(word) / N)``
3. the word never occurred in training: ``ln(1 / N)``

There is no add-one smoothing across the vocabulary, so tier 2 and 3
terms are not normalized against tier 1 terms. Scores are therefore
comparable across labels for the same post but are not probabilities.

Example::

    model = NaiveBayesClassifier()
    model.train("sports", "great game")
    model.train("politics", "great debate")

    prediction = model.predict("great")
    print(prediction.label)  # "politics"
"""

from __future__ import annotations

import logging
import math
from collections import defaultdict
from collections.abc import Iterable
from typing import Union

from .errors import UnknownLabelError, UntrainedModelError
from .models import LabelSummary, Prediction, TrainingExample, WordParameter

logger = logging.getLogger(__name__)


def unique_words(content: str) -> set[str]:
    """Return the set of distinct whitespace-delimited words in ``content``."""
    return set(content.split())


class NaiveBayesClassifier:
    """Naive Bayes classifier trained one post at a time.

    All statistics live on the instance. Training only ever adds to them,
    and prediction never modifies them.
    """

    def __init__(self) -> None:
        self._total_documents = 0
        self._vocabulary: set[str] = set()
        self._doc_frequency: dict[str, int] = defaultdict(int)
        # Plain dict keeps labels in first-seen order for reports.
        self._label_frequency: dict[str, int] = {}
        self._label_word_frequency: dict[str, dict[str, int]] = defaultdict(
            lambda: defaultdict(int)
        )
        self._examples: list[TrainingExample] = []

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------

    def train(self, label: str, content: str) -> "NaiveBayesClassifier":
        """Add one labeled post to the model.

        Each distinct word counts once for the post no matter how often
        it repeats. Empty content still counts as a document.

        Args:
            label: Class label of the post.
            content: Raw post text.

        Returns:
            Self (for method chaining).
        """
        words = unique_words(content)

        self._total_documents += 1
        self._label_frequency[label] = self._label_frequency.get(label, 0) + 1
        label_words = self._label_word_frequency[label]

        for word in words:
            self._vocabulary.add(word)
            self._doc_frequency[word] += 1
            label_words[word] += 1

        self._examples.append(TrainingExample(label=label, content=content))
        return self

    def fit(
        self,
        examples: Iterable[Union[TrainingExample, tuple[str, str]]],
    ) -> "NaiveBayesClassifier":
        """Train on every example of an iterable, in order.

        Args:
            examples: ``TrainingExample`` objects or ``(label, content)`` pairs.

        Returns:
            Self (for method chaining).
        """
        before = self._total_documents
        for example in examples:
            if isinstance(example, TrainingExample):
                self.train(example.label, example.content)
            else:
                label, content = example
                self.train(label, content)

        logger.debug(
            "Trained on %d examples (%d total, %d labels, vocabulary size %d)",
            self._total_documents - before,
            self._total_documents,
            len(self._label_frequency),
            len(self._vocabulary),
        )
        return self

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def log_prior(self, label: str) -> float:
        """Return ``ln(count(label) / N)``.

        Raises:
            UntrainedModelError: If no posts have been trained.
            UnknownLabelError: If ``label`` never appeared in training.
        """
        self._require_trained()
        count = self._label_frequency.get(label, 0)
        if count == 0:
            raise UnknownLabelError(label, self.labels)
        return math.log(count / self._total_documents)

    def log_likelihood(self, label: str, word: str) -> float:
        """Return the backed-off ``ln P(word | label)``.

        ``label`` may be one the model has never seen; such a label only
        ever reaches the second or third tier.

        Raises:
            UntrainedModelError: If no posts have been trained.
        """
        self._require_trained()

        count = self.label_word_count(label, word)
        if count > 0:
            return math.log(count / self._label_frequency[label])

        global_count = self._doc_frequency.get(word, 0)
        if global_count > 0:
            return math.log(global_count / self._total_documents)

        return math.log(1 / self._total_documents)

    def score(self, label: str, content: str) -> float:
        """Log-prior of ``label`` plus the likelihood of each distinct word."""
        return self._score_words(label, unique_words(content))

    def _score_words(self, label: str, words: set[str]) -> float:
        total = self.log_prior(label)
        for word in words:
            total += self.log_likelihood(label, word)
        return total

    def predict(self, content: str) -> Prediction:
        """Return the highest-scoring label for ``content``.

        Exact ties go to the lexicographically smallest label.

        Raises:
            UntrainedModelError: If no labels have been trained.
        """
        if not self._label_frequency:
            raise UntrainedModelError(
                "Cannot predict with an untrained classifier. Call train() first."
            )

        words = unique_words(content)
        labels = sorted(self._label_frequency)
        best_label = labels[0]
        best_score = self._score_words(best_label, words)

        for label in labels[1:]:
            score = self._score_words(label, words)
            if score > best_score or (score == best_score and label < best_label):
                best_label = label
                best_score = score

        return Prediction(label=best_label, score=best_score)

    def predict_many(self, contents: Iterable[str]) -> list[Prediction]:
        """Predict a label for each post in ``contents``."""
        return [self.predict(content) for content in contents]

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def is_trained(self) -> bool:
        return self._total_documents > 0

    @property
    def total_documents(self) -> int:
        return self._total_documents

    @property
    def vocabulary(self) -> frozenset[str]:
        return frozenset(self._vocabulary)

    @property
    def vocabulary_size(self) -> int:
        return len(self._vocabulary)

    @property
    def labels(self) -> list[str]:
        """Trained labels in first-seen order."""
        return list(self._label_frequency)

    @property
    def training_examples(self) -> tuple[TrainingExample, ...]:
        return tuple(self._examples)

    def label_count(self, label: str) -> int:
        return self._label_frequency.get(label, 0)

    def document_frequency(self, word: str) -> int:
        return self._doc_frequency.get(word, 0)

    def label_word_count(self, label: str, word: str) -> int:
        label_words = self._label_word_frequency.get(label)
        if label_words is None:
            return 0
        return label_words.get(word, 0)

    def label_summaries(self) -> list[LabelSummary]:
        """Document count and log-prior for each label, first-seen order."""
        return [
            LabelSummary(label=label, count=count, log_prior=self.log_prior(label))
            for label, count in self._label_frequency.items()
        ]

    def word_parameters(self) -> list[WordParameter]:
        """Every (label, word) pair seen in training with its log-likelihood.

        Sorted by label, then by word.
        """
        params: list[WordParameter] = []
        for label in sorted(self._label_word_frequency):
            words = self._label_word_frequency[label]
            for word in sorted(words):
                params.append(
                    WordParameter(
                        label=label,
                        word=word,
                        count=words[word],
                        log_likelihood=self.log_likelihood(label, word),
                    )
                )
        return params

    def _require_trained(self) -> None:
        if self._total_documents == 0:
            raise UntrainedModelError()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(documents={self._total_documents}, "
            f"labels={len(self._label_frequency)}, vocabulary={len(self._vocabulary)})"
        )
