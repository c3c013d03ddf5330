"""Timestamped log lines and a rate-limited progress printer for long searches."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass


def ts() -> str:
    # Local time timestamp for logs
    return time.strftime("%Y-%m-%d %H:%M:%S")


def log(msg: str, *, quiet: bool = False) -> None:
    # stderr: stdout carries the solved board
    if not quiet:
        print(f"[{ts()}] {msg}", file=sys.stderr, flush=True)


@dataclass
class ProgressConfig:
    log_every_nodes: int
    log_every_secs: float


class ProgressPrinter:
    """Callable handed to ``solve(progress=...)``; logs node count, depth and rate."""

    def __init__(self, cfg: ProgressConfig, *, quiet: bool = False) -> None:
        self.cfg = cfg
        self.quiet = quiet
        self._t0 = time.time()
        self._t_last = self._t0

    def __call__(self, stats) -> None:
        self.maybe_print(stats.nodes, extra=f"depth={stats.depth}, backtracks={stats.backtracks:,}")

    def maybe_print(self, nodes_done: int, extra: str = "") -> None:
        if self.quiet:
            return
        now = time.time()
        should_by_nodes = self.cfg.log_every_nodes > 0 and (nodes_done % self.cfg.log_every_nodes == 0)
        should_by_time = self.cfg.log_every_secs > 0 and (now - self._t_last) >= self.cfg.log_every_secs

        if should_by_nodes or should_by_time:
            elapsed = now - self._t0
            rate = (nodes_done / elapsed) if elapsed > 0 else 0.0
            msg = f"progress: nodes={nodes_done:,}, elapsed={elapsed:,.1f}s, rate={rate:,.0f} nodes/s"
            if extra:
                msg += f", {extra}"
            log(msg)
            self._t_last = now
