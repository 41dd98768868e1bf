"""Command line: train a tree on student data and report how well it does."""

from __future__ import annotations

import argparse
import random

from studentpath.csv_reading import read_csv
from studentpath.metrics import (
    print_accuracy,
    print_confusion_matrix,
    print_first_ten_predictions,
)
from studentpath.tree import build_tree, label_name, predict_one_student


def main(argv=None) -> int:
    """Run the program and return its exit status."""
    parser = argparse.ArgumentParser(
        prog="studentpath",
        description="Predict student outcomes with a decision tree.",
    )
    parser.add_argument(
        "path", nargs="?", default="src/college_data.csv", help="semicolon CSV file"
    )
    parser.add_argument("--depth", type=int, default=6, help="maximum tree depth")
    parser.add_argument("--seed", type=int, help="seed for choosing the sample student")
    args = parser.parse_args(argv)

    try:
        feature_names, students = read_csv(args.path)
        tree, train, test = build_tree(feature_names, students, args.depth)
    except (OSError, ValueError) as error:
        parser.error(str(error))

    num = random.Random(args.seed).randrange(len(students))

    print()
    print(f"FOR A TREE WITH A DEPTH OF {args.depth}:")
    print()
    print(f"For student {num}:")
    predict_one_student(tree, students[num].features)
    print()
    actual = label_name(students[num].label) or "Unknown"
    print(f'the actual label for that student is "{actual}"')
    print()
    try:
        print_accuracy(tree, train, test)
        print_confusion_matrix(tree, test)
        print()
        print_first_ten_predictions(tree, test)
    except ValueError as error:
        parser.error(str(error))
    return 0