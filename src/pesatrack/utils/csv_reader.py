"""CSV statement reading."""

import csv
from pathlib import Path

from pesatrack.domain.entities import RawRow


def read_statement_rows(csv_file_path: str) -> list[RawRow]:
    """Decode a CSV statement export into raw row records.

    The delimiter is sniffed from the first kilobyte and a UTF-8 byte order
    mark is tolerated. Header labels and values are stripped; missing trailing
    cells become empty strings.

    Raises:
        FileNotFoundError: If the CSV file doesn't exist
        ValueError: If the file has no header row
    """
    csv_path = Path(csv_file_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_file_path}")

    with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
        sample = f.read(1024)
        f.seek(0)
        try:
            delimiter = csv.Sniffer().sniff(sample, delimiters=",;\t|").delimiter
        except csv.Error:
            delimiter = ","

        reader = csv.DictReader(f, delimiter=delimiter)
        if reader.fieldnames is None:
            raise ValueError("CSV file has no columns")

        rows: list[RawRow] = []
        for row in reader:
            # Overflow cells land under the None key
            rows.append(
                {
                    key.strip(): (value or "").strip()
                    for key, value in row.items()
                    if key is not None
                }
            )
        return rows
