from pathlib import Path
from typing import Iterable, Dict, TextIO
import csv

PATH = Path(__file__).parents[0]


def get_test_path(filename: str) -> Path:
    return PATH / f"{filename}.csv"


def open_test(filename: str) -> TextIO:
    return open(get_test_path(filename), newline='')


def load_cases(filename: str) -> Iterable[Dict[str, str]]:
    """
    Rows of a ';' separated table of cases, with columns value, bound and expected.
    Cells are kept as text, see test.parse_value and test.parse_bound.
    """
    with open_test(filename) as file:
        return [row for row in csv.DictReader(file, delimiter=';', quotechar='"')]
