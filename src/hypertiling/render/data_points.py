"""
Data Points — точки данных для наложения на разбиение

Формат CSV: одна запись "x,y" на строку, пустые строки пропускаются.
Dict-записи проверяются по контракту data_point.
"""

import csv
import io
from typing import Any, Iterable

from hypertiling.core.contracts.validators import validate_point_record
from hypertiling.core.math.complex_value import Complex
from hypertiling.core.math.numerical_safeguards import is_valid_float


def parse_points_csv(text: str) -> list[Complex]:
    """
    Разбор CSV-текста в список точек.

    Raises:
        ValueError: для записи не из двух конечных чисел (с номером строки)
    """
    points = []
    for line_no, row in enumerate(csv.reader(io.StringIO(text)), start=1):
        if not row or all(not cell.strip() for cell in row):
            continue
        if len(row) != 2:
            raise ValueError(f"Line {line_no}: expected 'x,y', got {row!r}")
        try:
            x, y = float(row[0]), float(row[1])
        except ValueError as e:
            raise ValueError(f"Line {line_no}: non-numeric record {row!r}") from e
        if not (is_valid_float(x) and is_valid_float(y)):
            raise ValueError(f"Line {line_no}: NaN/Inf in record {row!r}")
        points.append(Complex(x, y))
    return points


def points_from_records(records: Iterable[dict[str, Any]]) -> list[Complex]:
    """
    Точки из dict-записей {"x": ..., "y": ...}.

    Raises:
        ValidationError: если запись не соответствует контракту data_point
        ValueError: для NaN/Inf координат (схема number их пропускает)
    """
    points = []
    for index, record in enumerate(records):
        validate_point_record(record)
        x, y = float(record["x"]), float(record["y"])
        if not (is_valid_float(x) and is_valid_float(y)):
            raise ValueError(f"Record {index}: NaN/Inf in record {record!r}")
        points.append(Complex(x, y))
    return points
