"""Student records, datasets and a CART decision-tree classifier."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import pairwise

LABELS = {1: "Dropout", 2: "Enrolled", 3: "Graduate"}

MIN_WEIGHT_SPLIT = 2
MIN_WEIGHT_LEAF = 1
MIN_IMPURITY_DECREASE = 1e-5


def label_name(value) -> str | None:
    """Return the outcome name for an encoded label, or None if it has none."""
    return LABELS.get(value)


@dataclass
class Student:
    """One row of the data: numeric features and an encoded outcome label."""

    features: list[float]
    label: float


@dataclass
class Dataset:
    """A table of feature rows with one integer target per row."""

    records: list[tuple[float, ...]]
    targets: list[int]
    feature_names: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.records = [tuple(float(x) for x in row) for row in self.records]
        self.targets = [int(t) for t in self.targets]
        self.feature_names = list(self.feature_names)
        if len(self.records) != len(self.targets):
            raise ValueError(
                f"{len(self.records)} records but {len(self.targets)} targets"
            )
        width = self.n_features
        for number, row in enumerate(self.records):
            if len(row) != width:
                raise ValueError(
                    f"record {number} has {len(row)} values, expected {width}"
                )

    @property
    def n_features(self) -> int:
        if self.feature_names:
            return len(self.feature_names)
        return len(self.records[0]) if self.records else 0

    def __len__(self) -> int:
        return len(self.records)

    def split_with_ratio(self, ratio: float) -> tuple[Dataset, Dataset]:
        """Split in order: the first ``ratio`` share of rows, then the rest."""
        if not 0.0 <= ratio <= 1.0:
            raise ValueError(f"ratio must lie between 0 and 1, got {ratio}")
        cut = math.ceil(len(self) * ratio)
        first = Dataset(self.records[:cut], self.targets[:cut], self.feature_names)
        second = Dataset(self.records[cut:], self.targets[cut:], self.feature_names)
        return first, second


@dataclass
class _Node:
    prediction: int
    feature: int | None = None
    threshold: float = 0.0
    left: _Node | None = None
    right: _Node | None = None


@dataclass
class _Split:
    score: float
    feature: int
    threshold: float


def _gini_from_squares(squares: int, total: int) -> float:
    return 1.0 - squares / (total * total) if total else 0.0


class DecisionTree:
    """A classification tree split on Gini impurity, grown to ``max_depth``."""

    def __init__(self, max_depth: int | None) -> None:
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {max_depth}")
        self.max_depth = max_depth
        self._root: _Node | None = None
        self._n_features = 0
        self._rows: list[tuple[float, ...]] = []
        self._targets: list[int] = []

    def fit(self, dataset: Dataset) -> DecisionTree:
        """Grow the tree on ``dataset`` and return the fitted tree."""
        if not len(dataset):
            raise ValueError("cannot fit a decision tree on an empty dataset")
        self._rows = dataset.records
        self._targets = dataset.targets
        self._n_features = dataset.n_features
        try:
            self._root = self._grow(list(range(len(dataset))), 0)
        finally:
            self._rows, self._targets = [], []
        return self

    def _grow(self, indices: list[int], depth: int) -> _Node:
        counts = Counter(self._targets[i] for i in indices)
        # Ties go to the smallest label.
        prediction = max(sorted(counts), key=counts.__getitem__)
        node = _Node(prediction)
        total = len(indices)
        impurity = _gini_from_squares(sum(c * c for c in counts.values()), total)
        if (
            (self.max_depth is not None and depth >= self.max_depth)
            or total < MIN_WEIGHT_SPLIT
            or impurity == 0.0
        ):
            return node
        best = self._best_split(indices, counts)
        if best is None or impurity - best.score < MIN_IMPURITY_DECREASE:
            return node
        left = [i for i in indices if self._rows[i][best.feature] < best.threshold]
        right = [i for i in indices if self._rows[i][best.feature] >= best.threshold]
        node.feature = best.feature
        node.threshold = best.threshold
        node.left = self._grow(left, depth + 1)
        node.right = self._grow(right, depth + 1)
        return node

    def _best_split(self, indices: list[int], counts: Counter) -> _Split | None:
        total = len(indices)
        best: _Split | None = None
        for feature in range(self._n_features):
            order = sorted(indices, key=lambda i: self._rows[i][feature])
            left: Counter = Counter()
            right = Counter(counts)
            left_sq = 0
            right_sq = sum(c * c for c in right.values())
            for n_left, (current, following) in enumerate(pairwise(order), start=1):
                label = self._targets[current]
                left_sq += 2 * left[label] + 1
                right_sq -= 2 * right[label] - 1
                left[label] += 1
                right[label] -= 1
                low = self._rows[current][feature]
                high = self._rows[following][feature]
                n_right = total - n_left
                if low == high or n_left < MIN_WEIGHT_LEAF or n_right < MIN_WEIGHT_LEAF:
                    continue
                score = (
                    n_left * _gini_from_squares(left_sq, n_left)
                    + n_right * _gini_from_squares(right_sq, n_right)
                ) / total
                if best is None or score < best.score:
                    best = _Split(score, feature, (low + high) / 2.0)
        return best

    def predict(self, records: Dataset | Iterable[Sequence[float]]) -> list[int]:
        """Predict one label for each row of ``records``."""
        if self._root is None:
            raise RuntimeError("the decision tree has not been fitted")
        rows = records.records if isinstance(records, Dataset) else records
        return [self._predict_row(row) for row in rows]

    def _predict_row(self, row: Sequence[float]) -> int:
        if len(row) != self._n_features:
            raise ValueError(
                f"row has {len(row)} features, the tree expects {self._n_features}"
            )
        node = self._root
        while node.feature is not None:
            node = node.left if row[node.feature] < node.threshold else node.right
        return node.prediction


def build_tree(
    feature_names: Sequence[str], students: Sequence[Student], max_depth: int | None
) -> tuple[DecisionTree, Dataset, Dataset]:
    """Split the students 80/20 in order and fit a tree on the first part."""
    dataset = Dataset(
        [tuple(s.features) for s in students],
        [int(s.label) for s in students],
        list(feature_names),
    )
    train, test = dataset.split_with_ratio(0.8)
    tree = DecisionTree(max_depth).fit(train)
    return tree, train, test


def predict_one_student(decision_tree: DecisionTree, features: Sequence[float]) -> str:
    """Predict, print and return the outcome name for one student's features."""
    prediction = decision_tree.predict([list(features)])[0]
    answer = label_name(prediction) or "Invalid prediction"
    print(f'The predicted label for this student is: "{answer}"')
    return answer