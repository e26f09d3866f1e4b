# io/search_logging.py
import json
import logging
import sys
from enum import Enum

from astar_grid.search.engine import FailureReason
from astar_grid.search.hooks import NoopHooks


def _default_json_logger(name="astar_grid", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


def _plain(v):
    # positions as [x, y], enums by value
    if isinstance(v, Enum):
        return v.value
    if hasattr(v, "x") and hasattr(v, "y"):
        return [v.x, v.y]
    return v


class SearchLogging(NoopHooks):
    """
    Structured logs for search lifecycle events.
    Per-node expansion records only go out when ``debug`` is on, sampled.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **{k: _plain(v) for k, v in extra.items()}}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    # ------------- hooks -------------

    def search_start(self, *, start, goal):
        self._emit("INFO", "search_start", start=start, goal=goal)

    def expand(self, position, *, steps, open_size, closed_size):
        if self.debug and (steps % self.sample_every) == 0:
            self._emit(
                "DEBUG",
                "expand",
                position=position,
                steps=steps,
                open_size=open_size,
                closed_size=closed_size,
            )

    def search_end(self, *, state, reason, steps, path_len, **extra):
        self._emit(
            "WARNING" if reason is FailureReason.EXHAUSTED else "INFO",
            "search_end",
            state=state,
            reason=reason,
            steps=steps,
            path_len=path_len,
            **extra,
        )
