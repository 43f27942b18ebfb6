#!/usr/bin/env python3
from __future__ import annotations

import math
import statistics as stats
import time
from dataclasses import dataclass
from typing import List, Tuple

from ttt_minimax.board import Board
from ttt_minimax.minimax import MiniMax


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    repeats: int = 5
    openings: Tuple[str, ...] = ("o   x    ", "    x    ", "x       o", "ooxxo    ")


def main() -> int:
    cfg = Config()
    for stop_at_line in (False, True):
        searcher = MiniMax(stop_at_line=stop_at_line)
        for raw in cfg.openings:
            board = Board(raw)
            times: List[float] = []
            for _ in range(cfg.repeats):
                t0 = time.perf_counter()
                move = searcher.best_next_move(board)
                times.append(time.perf_counter() - t0)
            m, h = ci95(times)
            print(f"stop_at_line={stop_at_line} board={raw!r} move={move}: mean={m:.4f}s ± {h:.4f}s (95% CI)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
