"""CSV record source for labeled posts.

Files carry a header row naming their columns. Values containing commas,
quotes or newlines use standard CSV quoting, which ``csv.DictReader``
resolves before any record reaches the classifier.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterator
from pathlib import Path

from .errors import FileAccessError, MalformedRecordError
from .models import TrainingExample

logger = logging.getLogger(__name__)

DEFAULT_LABEL_FIELD = "tag"
DEFAULT_CONTENT_FIELD = "content"


def validate_path(path: str | Path) -> Path:
    """Check that ``path`` names a readable regular file.

    Raises:
        FileAccessError: If the file is missing, a directory, or unreadable.
    """
    path = Path(path)
    if not path.exists():
        raise FileAccessError(path, "file not found")
    if path.is_dir():
        raise FileAccessError(path, "is a directory")
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise FileAccessError(path, exc.strerror or str(exc)) from exc
    return path


def read_records(
    path: str | Path,
    required_fields: tuple[str, ...] = (DEFAULT_LABEL_FIELD, DEFAULT_CONTENT_FIELD),
) -> Iterator[dict[str, str]]:
    """Yield one dict per data row of a CSV file.

    Args:
        path: Path to the CSV file.
        required_fields: Column names the header must contain.

    Yields:
        Mapping of column name to value for each row.

    Raises:
        FileAccessError: If the file cannot be opened.
        MalformedRecordError: If the header lacks a required column, a row
            has the wrong number of fields, or the CSV is unparseable.
    """
    path = validate_path(path)
    logger.debug("Reading records from %s", path)

    try:
        f = open(path, "r", encoding="utf-8", newline="")
    except OSError as exc:
        raise FileAccessError(path, exc.strerror or str(exc)) from exc

    count = 0
    with f:
        reader = csv.DictReader(f)
        try:
            header = reader.fieldnames
            if header is None:
                raise MalformedRecordError("missing header row", path=path, line=1)

            missing = [name for name in required_fields if name not in header]
            if missing:
                raise MalformedRecordError(
                    f"header is missing column(s): {', '.join(missing)}",
                    path=path,
                    line=1,
                )

            for row in reader:
                # DictReader files surplus values under None and pads short rows with None.
                if None in row or any(value is None for value in row.values()):
                    raise MalformedRecordError(
                        f"expected {len(header)} fields",
                        path=path,
                        line=reader.line_num,
                    )
                count += 1
                yield row
        except csv.Error as exc:
            raise MalformedRecordError(str(exc), path=path, line=reader.line_num) from exc
        except UnicodeDecodeError as exc:
            raise MalformedRecordError(
                f"cannot decode as UTF-8: {exc}", path=path, line=reader.line_num
            ) from exc

    logger.debug("Read %d records from %s", count, path)


def load_examples(
    path: str | Path,
    label_field: str = DEFAULT_LABEL_FIELD,
    content_field: str = DEFAULT_CONTENT_FIELD,
) -> Iterator[TrainingExample]:
    """Yield a ``TrainingExample`` per row of a CSV file.

    Args:
        path: Path to the CSV file.
        label_field: Column holding the label.
        content_field: Column holding the post text.

    Raises:
        FileAccessError: If the file cannot be opened.
        MalformedRecordError: If the file is not well-formed.
    """
    for row in read_records(path, required_fields=(label_field, content_field)):
        yield TrainingExample(label=row[label_field], content=row[content_field])
