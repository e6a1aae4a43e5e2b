from __future__ import annotations

from pathlib import Path

from train_sim.table import SampleTable


def _detect_delimiter(line: str) -> str:
    semicolons = line.count(";")
    commas = line.count(",")
    return ";" if semicolons >= commas and semicolons > 0 else ","


def _data_lines(text: str) -> list[str]:
    return [l.strip() for l in text.splitlines() if l.strip() and not l.strip().startswith("#")]


def _find_col(headers: list[str], column: str) -> int:
    for i, h in enumerate(headers):
        if h == column:
            return i
    return -1


def load_acceleration_csv(path: Path, column: str | None = None) -> SampleTable:
    """
    Load one acceleration sample per second from a CSV file.

    Without `column` the file has no header and the first field of each row
    is used. With `column` the first line is a header and the field under that
    exact name is used.
    """
    path = Path(path)
    lines = _data_lines(path.read_text(encoding="utf-8"))
    if not lines:
        raise ValueError(f"No acceleration samples found in {path.name}")

    delimiter = _detect_delimiter(lines[0])

    col = 0
    if column is not None:
        headers = [h.strip() for h in lines[0].split(delimiter)]
        col = _find_col(headers, column.strip())
        if col == -1:
            raise ValueError(
                f"Column '{column}' not found in {path.name}. Available: {', '.join(headers)}"
            )
        lines = lines[1:]

    values: list[float] = []
    for entry, line in enumerate(lines, start=1):
        parts = line.split(delimiter)
        if len(parts) <= col:
            raise ValueError(f"Missing column {col} in {path.name}, entry {entry}")
        try:
            values.append(float(parts[col].strip()))
        except ValueError as e:
            raise ValueError(
                f"Failed to convert entry {entry} of {path.name} into a float: {parts[col]!r}"
            ) from e

    if not values:
        raise ValueError(f"No acceleration samples found in {path.name}")

    return SampleTable.from_values(values)
