from __future__ import annotations

from statistics import mean
from typing import Dict, Iterable

from circbuf.core.buffer import RingBuffer


def _pct(sorted_vals: Iterable[float], q: float) -> float:
    vals = list(sorted_vals)
    if not vals:
        return 0.0
    idx = max(0, min(len(vals) - 1, int(round((len(vals) - 1) * q))))
    return vals[idx]


def summarize(buf: RingBuffer[float]) -> Dict[str, float]:
    """Summary of the live window (count/min/max/mean/p50/p90/p99)."""
    vals = [float(v) for v in buf]
    if not vals:
        return {
            "count": 0.0,
            "min": 0.0,
            "max": 0.0,
            "mean": 0.0,
            "p50": 0.0,
            "p90": 0.0,
            "p99": 0.0,
        }
    vals_sorted = sorted(vals)
    return {
        "count": float(len(vals)),
        "min": vals_sorted[0],
        "max": vals_sorted[-1],
        "mean": mean(vals),
        "p50": _pct(vals_sorted, 0.50),
        "p90": _pct(vals_sorted, 0.90),
        "p99": _pct(vals_sorted, 0.99),
    }


def window_mean(buf: RingBuffer[float]) -> float:
    if buf.is_empty():
        return 0.0
    return mean(float(v) for v in buf)
