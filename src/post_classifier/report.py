"""Report rendering for training diagnostics and evaluation results.

Three formats are supported:

- ``text``: line-oriented plain text, numbers shown with three
  significant digits
- ``rich``: tables and panels for an interactive terminal
- ``json``: a single JSON document
"""

from __future__ import annotations

import json

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .classifier import NaiveBayesClassifier
from .evaluation import compute_metrics
from .models import EvaluationResult

OUTPUT_FORMATS = ("text", "rich", "json")


def format_number(value: float) -> str:
    """Format a float with three significant digits (``%g`` style)."""
    return format(value, ".3g")


# ------------------------------------------------------------------
# Plain text
# ------------------------------------------------------------------

def training_report_text(model: NaiveBayesClassifier) -> str:
    """Dump training examples, class priors and word likelihoods."""
    lines = ["training data:"]
    for example in model.training_examples:
        lines.append(f"  label = {example.label}, content = {example.content}")
    lines.append(f"trained on {model.total_documents} examples")
    lines.append(f"vocabulary size = {model.vocabulary_size}")
    lines.append("")

    lines.append("classes:")
    for summary in model.label_summaries():
        lines.append(
            f"  {summary.label}, {summary.count} examples, "
            f"log-prior = {format_number(summary.log_prior)}"
        )

    lines.append("classifier parameters:")
    for param in model.word_parameters():
        lines.append(
            f"  {param.label}:{param.word}, count = {param.count}, "
            f"log-likelihood = {format_number(param.log_likelihood)}"
        )

    return "\n".join(lines) + "\n"


def evaluation_report_text(model: NaiveBayesClassifier, result: EvaluationResult) -> str:
    """Per-post predictions followed by the overall hit count."""
    lines = [f"trained on {model.total_documents} examples", "", "test data:"]
    for row in result.rows:
        lines.append(
            f"  correct = {row.true_label}, predicted = {row.predicted_label}, "
            f"log-probability score = {format_number(row.score)}"
        )
        lines.append(f"  content = {row.content}")
        lines.append("")

    lines.append(
        f"performance: {result.correct} / {result.total} posts predicted correctly"
    )
    lines.append("")
    return "\n".join(lines) + "\n"


# ------------------------------------------------------------------
# JSON
# ------------------------------------------------------------------

def training_report_json(model: NaiveBayesClassifier) -> str:
    return json.dumps(
        {
            "training_data": [e.to_dict() for e in model.training_examples],
            "total_documents": model.total_documents,
            "vocabulary_size": model.vocabulary_size,
            "classes": [s.to_dict() for s in model.label_summaries()],
            "parameters": [p.to_dict() for p in model.word_parameters()],
        },
        indent=2,
    )


def evaluation_report_json(model: NaiveBayesClassifier, result: EvaluationResult) -> str:
    data = result.to_dict()
    data["total_documents"] = model.total_documents
    data["per_label"] = {
        label: {k: round(v, 4) for k, v in m.items()}
        for label, m in compute_metrics(result.true_labels, result.predicted_labels).items()
    }
    return json.dumps(data, indent=2)


# ------------------------------------------------------------------
# Rich
# ------------------------------------------------------------------

def render_training_report(model: NaiveBayesClassifier, console: Console) -> None:
    """Render training diagnostics as rich tables."""
    console.print()
    console.print(Panel(
        f"Trained on [bold]{model.total_documents}[/] examples | "
        f"Labels: {len(model.labels)} | "
        f"Vocabulary: {model.vocabulary_size}",
        title="Naive Bayes Model",
        border_style="blue",
    ))

    examples = Table(title="Training Data", show_lines=False)
    examples.add_column("Label", style="cyan")
    examples.add_column("Content", style="white")
    for example in model.training_examples:
        examples.add_row(escape(example.label), escape(example.content))
    console.print(examples)

    classes = Table(title="Classes")
    classes.add_column("Label", style="cyan")
    classes.add_column("Examples", justify="right")
    classes.add_column("Log-prior", justify="right")
    for summary in model.label_summaries():
        classes.add_row(escape(summary.label), str(summary.count), format_number(summary.log_prior))
    console.print(classes)

    params = Table(title="Classifier Parameters")
    params.add_column("Label", style="cyan")
    params.add_column("Word", style="white")
    params.add_column("Count", justify="right")
    params.add_column("Log-likelihood", justify="right")
    for param in model.word_parameters():
        params.add_row(
            escape(param.label),
            escape(param.word),
            str(param.count),
            format_number(param.log_likelihood),
        )
    console.print(params)
    console.print()


def render_evaluation_report(
    model: NaiveBayesClassifier,
    result: EvaluationResult,
    console: Console,
) -> None:
    """Render held-out predictions and per-label metrics as rich tables."""
    console.print()
    console.print(f"Trained on [bold]{model.total_documents}[/] examples")

    table = Table(title="Test Data", show_lines=True)
    table.add_column("#", justify="right", width=4)
    table.add_column("Correct", style="cyan")
    table.add_column("Predicted")
    table.add_column("Score", justify="right")
    table.add_column("Content (excerpt)", max_width=60)

    for i, row in enumerate(result.rows, 1):
        style = "green" if row.is_correct else "bold red"
        excerpt = row.content[:120] + ("..." if len(row.content) > 120 else "")
        table.add_row(
            str(i),
            escape(row.true_label),
            Text(row.predicted_label, style=style),
            format_number(row.score),
            escape(excerpt),
        )
    console.print(table)

    if result.rows:
        metrics = Table(title="Per-label Metrics")
        metrics.add_column("Label", style="cyan")
        metrics.add_column("Precision", justify="right")
        metrics.add_column("Recall", justify="right")
        metrics.add_column("F1", justify="right")
        metrics.add_column("Support", justify="right")
        for label, m in compute_metrics(result.true_labels, result.predicted_labels).items():
            metrics.add_row(
                escape(label),
                f"{m['precision']:.4f}",
                f"{m['recall']:.4f}",
                f"{m['f1']:.4f}",
                str(m["support"]),
            )
        console.print(metrics)

    accuracy = result.accuracy
    if accuracy >= 0.8:
        style = "bold green"
    elif accuracy >= 0.5:
        style = "bold yellow"
    else:
        style = "bold red"
    console.print(
        f"Performance: [{style}]{result.correct} / {result.total}[/] posts "
        f"predicted correctly ({accuracy:.0%})"
    )
    console.print()
