# studentpath

studentpath trains a decision tree on a semicolon-separated table of student records. It then reports how well the tree predicts each student's outcome. There are three outcomes: **Dropout**, **Enrolled** and **Graduate**.

The package needs nothing outside the Python standard library. It supports Python 3.10 and later.

## Input format

- The first line is a header row. Fields are separated by `;`.
- Every column except the last is a numeric feature.
- The last column is the outcome. It may be one of the names `Dropout`, `Enrolled` or `Graduate`, which are encoded as 1, 2 and 3. It may also already be a number.
- Empty lines are skipped.
- A row whose number of fields differs from the header row is an error. So is a field that is neither an outcome name nor a number.

## Command line

```
studentpath [path] [--depth N] [--seed S]
```

- `path` is the data file. The default is `src/college_data.csv`, relative to the current directory. No data file is shipped with the package.
- `--depth` sets the maximum tree depth. The default is 6.
- `--seed` seeds the random choice of the sample student.

The command does the following:

1. Reads the data.
2. Splits the rows in file order. The first 80% (rounded up) are used for training and the rest for testing.
3. Fits the tree on the training rows.
4. Picks one student at random, prints the predicted outcome, and then prints that student's actual label.
5. Prints the training and testing accuracy as percentages.
6. Prints a confusion matrix over the test split, with actual outcomes as rows and predicted outcomes as columns.
7. Prints the first ten test predictions next to their actual labels.

The command stops with an error message and exit status 2 in these cases:

- The file cannot be read or parsed.
- The training split is empty.
- The test split has fewer than ten rows.

## Library use

```python
from studentpath.csv_reading import read_csv
from studentpath.tree import build_tree, predict_one_student
from studentpath.metrics import accuracy, confusion_matrix, print_confusion_matrix

feature_names, students = read_csv("college_data.csv")
decision_tree, train, test = build_tree(feature_names, students, 6)

name = predict_one_student(decision_tree, students[0].features)  # also prints it
print(accuracy(decision_tree, test))
print(confusion_matrix(decision_tree, test))
print_confusion_matrix(decision_tree, test)
```

### `studentpath.csv_reading`

- `read_csv(path)` returns the feature names and a list of `Student` records. The feature names are all headers except the last.
- `encode_field(text)` encodes one field.

### `studentpath.tree`

- `Student` holds `features` and `label`.
- `Dataset` holds `records`, `targets` and `feature_names`. `split_with_ratio(ratio)` splits it in order.
- `DecisionTree(max_depth)` is a classification tree:
  - It splits on Gini impurity, with thresholds at the midpoint between neighbouring values.
  - `fit(dataset)` grows the tree. `max_depth=None` means the depth is unlimited.
  - `predict(records)` takes a `Dataset` or rows of numbers.
- `build_tree(feature_names, students, max_depth)` does the 80/20 split and the fit. It returns the tree, the training set and the test set.
- `predict_one_student(decision_tree, features)` prints and returns the outcome name. If the predicted label is not 1, 2 or 3, it returns `"Invalid prediction"`.
- `label_name(value)` maps 1, 2 and 3 to their names. It returns `None` for any other value.

### `studentpath.metrics`

- `accuracy` and `confusion_matrix` return their values.
- `print_accuracy`, `print_confusion_matrix` and `print_first_ten_predictions` print reports.

## What it does not do

- The rows are never shuffled before splitting.
- A fitted tree cannot be saved or loaded.
- The tree has no tuning beyond its maximum depth.

## Development

```
pip install -e .[test]
pytest
```