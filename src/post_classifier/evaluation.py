"""Scoring a trained model against held-out posts."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from .classifier import NaiveBayesClassifier
from .models import EvaluationResult, EvaluationRow, TrainingExample


def evaluate(
    model: NaiveBayesClassifier,
    examples: Iterable[TrainingExample],
) -> EvaluationResult:
    """Predict every held-out example and collect the outcomes.

    Args:
        model: A trained classifier.
        examples: Held-out posts with their true labels.

    Returns:
        EvaluationResult with one row per example, in input order.
    """
    result = EvaluationResult()
    for example in examples:
        prediction = model.predict(example.content)
        result.rows.append(
            EvaluationRow(
                true_label=example.label,
                predicted_label=prediction.label,
                score=prediction.score,
                content=example.content,
            )
        )
    return result


def compute_metrics(
    y_true: list[str],
    y_pred: list[str],
) -> dict[str, dict[str, float]]:
    """Per-label precision, recall, F1 and support.

    Args:
        y_true: Ground truth labels.
        y_pred: Predicted labels.

    Returns:
        Dict of ``{label: {"precision", "recall", "f1", "support"}}`` for
        every label in either list, sorted by label.
    """
    if len(y_true) != len(y_pred):
        raise ValueError("y_true and y_pred must have the same length")

    pairs = Counter(zip(y_true, y_pred))
    support = Counter(y_true)
    predicted = Counter(y_pred)

    metrics: dict[str, dict[str, float]] = {}
    for label in sorted(set(y_true) | set(y_pred)):
        tp = pairs[(label, label)]
        precision = tp / predicted[label] if predicted[label] else 0.0
        recall = tp / support[label] if support[label] else 0.0
        f1 = (
            2 * precision * recall / (precision + recall)
            if (precision + recall) > 0
            else 0.0
        )
        metrics[label] = {
            "precision": precision,
            "recall": recall,
            "f1": f1,
            "support": support[label],
        }
    return metrics
