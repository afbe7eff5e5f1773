"""Post Classifier -- Naive Bayes labeling of short text posts."""

__version__ = "0.1.0"

from .classifier import NaiveBayesClassifier, unique_words
from .errors import (
    ClassifierError,
    FileAccessError,
    MalformedRecordError,
    UnknownLabelError,
    UntrainedModelError,
)
from .evaluation import compute_metrics, evaluate
from .models import (
    EvaluationResult,
    EvaluationRow,
    LabelSummary,
    Prediction,
    TrainingExample,
    WordParameter,
)
from .records import load_examples, read_records

__all__ = [
    # Model
    "NaiveBayesClassifier",
    "unique_words",
    "Prediction",
    "TrainingExample",
    "LabelSummary",
    "WordParameter",
    # Records
    "read_records",
    "load_examples",
    # Evaluation
    "evaluate",
    "compute_metrics",
    "EvaluationResult",
    "EvaluationRow",
    # Errors
    "ClassifierError",
    "FileAccessError",
    "MalformedRecordError",
    "UntrainedModelError",
    "UnknownLabelError",
]
