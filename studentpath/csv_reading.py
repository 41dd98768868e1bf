"""Reading semicolon-separated student data into Student records."""

from __future__ import annotations

import csv
import os

from studentpath.tree import Student

_CATEGORIES = {"Dropout": 1.0, "Enrolled": 2.0, "Graduate": 3.0}


def encode_field(text: str) -> float:
    """Encode one field: outcome names become 1, 2 or 3, anything else a number."""
    if text in _CATEGORIES:
        return _CATEGORIES[text]
    if text != text.strip() or "_" in text:
        raise ValueError(f"not a valid number: {text!r}")
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"not a valid number: {text!r}") from None


def read_csv(path: str | os.PathLike) -> tuple[list[str], list[Student]]:
    """Return the feature names and one Student per data row of the file.

    The last column is the target; the others are features.
    """
    with open(path, newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle, delimiter=";")
        try:
            headers = next(reader)
        except StopIteration:
            raise ValueError(f"{path}: no header row") from None
        if not headers:
            raise ValueError(f"{path}: empty header row")
        students = []
        for row in reader:
            if not row:
                continue
            if len(row) != len(headers):
                raise ValueError(
                    f"{path}, line {reader.line_num}: {len(row)} fields, "
                    f"expected {len(headers)}"
                )
            *features, label = (encode_field(value) for value in row)
            students.append(Student(features, label))
    return headers[:-1], students