"""Command-line interface for the post classifier.

Trains on a labeled CSV file. With only a training file, prints the
training data and the learned parameters; with a test file as well,
predicts each test post and reports accuracy instead.

Usage::

    post-classifier train.csv
    post-classifier train.csv test.csv
    post-classifier train.csv test.csv --output rich

Every option can also be set through a ``POST_CLASSIFIER_<OPTION>``
environment variable or a ``.env`` file in the working directory.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .classifier import NaiveBayesClassifier
from .errors import ClassifierError
from .evaluation import evaluate
from .records import DEFAULT_CONTENT_FIELD, DEFAULT_LABEL_FIELD, load_examples, validate_path
from .report import (
    OUTPUT_FORMATS,
    evaluation_report_json,
    evaluation_report_text,
    render_evaluation_report,
    render_training_report,
    training_report_json,
    training_report_text,
)

ENV_PREFIX = "POST_CLASSIFIER"

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(message: str) -> None:
    err_console.print(f"[bold red]Error:[/] {escape(message)}", highlight=False, soft_wrap=True)
    sys.exit(1)


@click.command(context_settings={"auto_envvar_prefix": ENV_PREFIX})
@click.version_option(__version__, package_name="post-classifier")
@click.argument("train_file", type=click.Path(path_type=Path))
@click.argument("test_file", type=click.Path(path_type=Path), required=False)
@click.option("--output", "-o", type=click.Choice(OUTPUT_FORMATS), default="text",
              show_default=True, help="Report format.")
@click.option("--label-field", default=DEFAULT_LABEL_FIELD, show_default=True,
              help="CSV column holding the label.")
@click.option("--content-field", default=DEFAULT_CONTENT_FIELD, show_default=True,
              help="CSV column holding the post text.")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Log debug messages to stderr.")
def cli(
    train_file: Path,
    test_file: Optional[Path],
    output: str,
    label_field: str,
    content_field: str,
    verbose: bool,
) -> None:
    """Train a Naive Bayes post classifier on TRAIN_FILE.

    With TEST_FILE, predict a label for every post in it and report
    accuracy. Without it, print the training data and model parameters.

    Example: post-classifier train.csv test.csv
    """
    _configure_logging(verbose)

    # Both files are checked before training so a bad path leaves no output.
    try:
        validate_path(train_file)
        if test_file is not None:
            validate_path(test_file)
    except ClassifierError as e:
        _fail(str(e))

    model = NaiveBayesClassifier()
    try:
        model.fit(load_examples(train_file, label_field, content_field))
    except ClassifierError as e:
        _fail(str(e))

    if test_file is None:
        _print_training_report(model, output)
        return

    if not model.is_trained:
        _fail(f"no training examples in {train_file}")

    try:
        result = evaluate(model, load_examples(test_file, label_field, content_field))
    except ClassifierError as e:
        _fail(str(e))

    logger.debug("Evaluated %d posts, accuracy %.4f", result.total, result.accuracy)
    if output == "json":
        click.echo(evaluation_report_json(model, result))
    elif output == "rich":
        render_evaluation_report(model, result, console)
    else:
        click.echo(evaluation_report_text(model, result), nl=False)


def _print_training_report(model: NaiveBayesClassifier, output: str) -> None:
    if output == "json":
        click.echo(training_report_json(model))
    elif output == "rich":
        render_training_report(model, console)
    else:
        click.echo(training_report_text(model), nl=False)


def main() -> None:
    """Console-script entry point: load ``.env`` then run the command."""
    load_dotenv(find_dotenv(usecwd=True))
    cli()


if __name__ == "__main__":
    main()
