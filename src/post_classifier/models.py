"""Data models shared by the classifier, record source and reports."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TrainingExample:
    """One labeled post, content kept verbatim."""

    label: str
    content: str

    def to_dict(self) -> dict:
        return {"label": self.label, "content": self.content}


@dataclass(frozen=True)
class Prediction:
    """Winning label for a post and its unnormalized log-probability score."""

    label: str
    score: float

    def to_dict(self) -> dict:
        return {"label": self.label, "score": self.score}


@dataclass(frozen=True)
class LabelSummary:
    """Per-label training statistics."""

    label: str
    count: int
    log_prior: float

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "count": self.count,
            "log_prior": self.log_prior,
        }


@dataclass(frozen=True)
class WordParameter:
    """Log-likelihood of a word that occurred under a label."""

    label: str
    word: str
    count: int
    log_likelihood: float

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "word": self.word,
            "count": self.count,
            "log_likelihood": self.log_likelihood,
        }


@dataclass(frozen=True)
class EvaluationRow:
    """Prediction outcome for one held-out post."""

    true_label: str
    predicted_label: str
    score: float
    content: str

    @property
    def is_correct(self) -> bool:
        return self.true_label == self.predicted_label

    def to_dict(self) -> dict:
        return {
            "correct": self.true_label,
            "predicted": self.predicted_label,
            "score": self.score,
            "content": self.content,
        }


@dataclass
class EvaluationResult:
    """Aggregate result of scoring a held-out set."""

    rows: list[EvaluationRow] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.rows)

    @property
    def correct(self) -> int:
        return sum(1 for row in self.rows if row.is_correct)

    @property
    def accuracy(self) -> float:
        """Exact-match accuracy (0.0 for an empty set)."""
        if not self.rows:
            return 0.0
        return self.correct / self.total

    @property
    def true_labels(self) -> list[str]:
        return [row.true_label for row in self.rows]

    @property
    def predicted_labels(self) -> list[str]:
        return [row.predicted_label for row in self.rows]

    def to_dict(self) -> dict:
        return {
            "correct": self.correct,
            "total": self.total,
            "accuracy": round(self.accuracy, 4),
            "rows": [row.to_dict() for row in self.rows],
        }
