from typing import Optional, Sequence


def median(values: Sequence[float]) -> Optional[float]:
    """Exact median of *values*, or None when empty. The input is left untouched."""
    count = len(values)
    if count == 0:
        return None
    if count == 1:
        return values[0]
    if count == 2:
        return 0.5 * (values[0] + values[1])
    ordered = sorted(values)
    mid = count // 2
    if count % 2 == 1:
        return ordered[mid]
    return 0.5 * (ordered[mid - 1] + ordered[mid])
