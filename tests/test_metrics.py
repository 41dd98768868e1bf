import pytest

from studentpath.metrics import (
    accuracy,
    confusion_matrix,
    print_accuracy,
    print_confusion_matrix,
    print_first_ten_predictions,
)
from studentpath.tree import Dataset, DecisionTree, Student, build_tree


def _split(count=60, depth=6):
    students = []
    for i in range(count):
        a = i % 30
        label = 1.0 if a < 10 else 2.0 if a < 20 else 3.0
        students.append(Student([float(a), float(i % 7)], label))
    return build_tree(["a", "b"], students, depth)


def test_accuracy_perfect():
    tree, train, test = _split()
    assert accuracy(tree, train) == 1.0
    assert accuracy(tree, test) == 1.0


def test_accuracy_partial():
    tree = DecisionTree(0).fit(Dataset([[0.0], [1.0], [2.0]], [1, 1, 3]))
    data = Dataset([[0.0], [1.0], [2.0], [3.0]], [1, 1, 3, 3])
    assert accuracy(tree, data) == 0.5


def test_accuracy_empty_raises():
    tree, _train, _test = _split()
    with pytest.raises(ValueError):
        accuracy(tree, Dataset([], [], ["a", "b"]))


def test_confusion_matrix_counts():
    tree, _train, test = _split()
    matrix = confusion_matrix(tree, test)
    assert sum(map(sum, matrix)) == len(test)
    off_diagonal = [matrix[r][c] for r in range(3) for c in range(3) if r != c]
    assert off_diagonal == [0] * 6
    assert [matrix[i][i] for i in range(3)] == [
        test.targets.count(value) for value in (1, 2, 3)
    ]


def test_print_confusion_matrix_runs(capsys):
    tree, _train, test = _split(depth=3)
    print_confusion_matrix(tree, test)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == ""
    assert lines[1] == "Confusion Matrix:"
    assert lines[2].startswith("Actual \\ Pred   Dropout")
    assert lines[3].startswith("Dropout")
    assert len(lines) == 6


def test_print_accuracy(capsys):
    tree, train, test = _split()
    print_accuracy(tree, train, test)
    assert capsys.readouterr().out == (
        "Train accuracy: 100.00%\nTest accuracy: 100.00%\n"
    )


def test_print_first_ten_predictions(capsys):
    tree, _train, test = _split()
    print_first_ten_predictions(tree, test)
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "First 10 Predictions vs Actual Labels:"
    assert len(lines) == 11
    assert lines[1] == f"Sample 1: Predicted = {test.targets[0]}, Actual = {test.targets[0]}"


def test_print_first_ten_predictions_too_few_rows():
    tree, _train, _test = _split()
    with pytest.raises(ValueError):
        print_first_ten_predictions(tree, Dataset([[1.0, 1.0]], [1], ["a", "b"]))