class WindowController:
    """Tracks window boundaries over a series' time span.

    Windows start out uniform, ``(end - start) / num_points`` wide. When the
    data stops matching that estimate (a gap wider than a window, or a window
    that flushed empty) the cursor snaps to the current point and the width is
    re-derived from the remaining span and the remaining point budget.

    All arithmetic is in float milliseconds; the width is never rounded.
    """

    def __init__(self, start_ms: float, end_ms: float, num_points: int):
        self.base_ms = start_ms
        self.end_ms = end_ms
        self.window_ms = (end_ms - start_ms) / num_points

    @property
    def boundary_ms(self) -> float:
        return self.base_ms + self.window_ms

    def crossed(self, time_ms: float) -> bool:
        # a point sitting exactly on the boundary belongs to the next window
        return time_ms > self.boundary_ms

    def advance(self) -> float:
        self.base_ms += self.window_ms
        return self.base_ms

    def re_estimate(self, time_ms: float, remaining: int) -> None:
        if remaining < 1:
            raise ValueError(f"remaining must be positive, got {remaining}")
        self.base_ms = time_ms
        self.window_ms = (self.end_ms - time_ms) / remaining

    def tail_stamp(self, time_ms: float) -> float:
        """Stamp for the last aggregated window before raw points are copied through."""
        return min(self.boundary_ms, time_ms)
