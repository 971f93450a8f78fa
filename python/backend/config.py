"""Engine constants."""

from __future__ import annotations

# Smallest square that can be rotated; also the smallest generated board.
MIN_SIZE = 2
DEFAULT_SIZE = 4
# Upper bound offered by the frontends' size pickers.  The engine itself
# accepts any even size.
MAX_SIZE = 10
SIZE_CHOICES: tuple[int, ...] = tuple(range(MIN_SIZE, MAX_SIZE + 1, 2))

# ``None`` keeps every snapshot until the next reset.
DEFAULT_HISTORY_LIMIT: int | None = None

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
