"""Accuracy and confusion-matrix reports for a fitted decision tree."""

from __future__ import annotations

from studentpath.tree import LABELS, Dataset, DecisionTree

CLASS_VALUES = tuple(sorted(LABELS))
_WIDTH = 16


def accuracy(decision_tree: DecisionTree, dataset: Dataset) -> float:
    """Return the share of rows whose prediction matches the target."""
    if not len(dataset):
        raise ValueError("cannot measure accuracy on an empty dataset")
    predictions = decision_tree.predict(dataset)
    correct = sum(p == a for p, a in zip(predictions, dataset.targets))
    return correct / len(dataset)


def confusion_matrix(decision_tree: DecisionTree, dataset: Dataset) -> list[list[int]]:
    """Return counts with actual classes as rows and predicted classes as columns."""
    predictions = decision_tree.predict(dataset)
    pairs = list(zip(dataset.targets, predictions))
    return [
        [sum(1 for pair in pairs if pair == (row, column)) for column in CLASS_VALUES]
        for row in CLASS_VALUES
    ]


def print_accuracy(decision_tree: DecisionTree, train: Dataset, test: Dataset) -> None:
    """Print the accuracy on the training and testing data as percentages."""
    print(f"Train accuracy: {accuracy(decision_tree, train) * 100:.2f}%")
    print(f"Test accuracy: {accuracy(decision_tree, test) * 100:.2f}%")


def print_confusion_matrix(decision_tree: DecisionTree, test: Dataset) -> None:
    """Print the confusion matrix for the testing data."""
    corner = "Actual \\ Pred"
    print("\nConfusion Matrix:")
    header = [corner] + [LABELS[value] for value in CLASS_VALUES]
    print("".join(f"{cell:<{_WIDTH}}" for cell in header))
    for value, counts in zip(CLASS_VALUES, confusion_matrix(decision_tree, test)):
        cells = [LABELS[value]] + [str(count) for count in counts]
        print("".join(f"{cell:<{_WIDTH}}" for cell in cells))


def print_first_ten_predictions(decision_tree: DecisionTree, test: Dataset) -> None:
    """Print the predicted and actual labels of the first ten testing rows."""
    if len(test) < 10:
        raise ValueError(f"need at least 10 rows, got {len(test)}")
    predictions = decision_tree.predict(test)
    print("First 10 Predictions vs Actual Labels:")
    for number, (pred, actual) in enumerate(
        zip(predictions[:10], test.targets[:10]), start=1
    ):
        print(f"Sample {number}: Predicted = {pred}, Actual = {actual}")