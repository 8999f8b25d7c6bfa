# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""CSV rendering for admin exports."""
import csv
import io
from typing import Any, Iterable, Sequence


def render_csv(header: Sequence[str], rows: Iterable[Sequence[Any]]) -> str:
    """Fields containing a comma, quote or line break are quoted with inner
    quotes doubled. None becomes an empty cell."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL)
    writer.writerow(header)
    for row in rows:
        writer.writerow(["" if value is None else value for value in row])
    return buffer.getvalue()
