"""Benchmark: containment query latency — per-query avg/p99.

Builds a layered role hierarchy and measures SessionRoleManager.has_link()
for queries that succeed at full depth and queries that exhaust the depth
budget without finding the target.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from temporal_rbac.rbac.manager import SessionRoleManager

_LAYERS: int = 8
_FAN_OUT: int = 3
_ITERATIONS: int = 200
_WINDOW: tuple[str, str] = ("2020-01-01", "2020-12-31")
_REQUEST_TIME: str = "2020-06-01"


def _build_manager() -> SessionRoleManager:
    manager = SessionRoleManager(_LAYERS)
    for layer in range(_LAYERS):
        for i in range(_FAN_OUT):
            for j in range(_FAN_OUT):
                manager.add_link(f"r{layer}-{i}", f"r{layer + 1}-{j}", *_WINDOW)
    return manager


def _measure(manager: SessionRoleManager, source: str, target: str) -> list[float]:
    latencies_ms: list[float] = []
    for _ in range(_ITERATIONS):
        t0 = time.perf_counter()
        manager.has_link(source, target, _REQUEST_TIME)
        latencies_ms.append((time.perf_counter() - t0) * 1000)
    return latencies_ms


def bench_has_link_latency() -> dict[str, object]:
    """Benchmark SessionRoleManager.has_link() per-call latency.

    Returns
    -------
    dict with keys: operation, iterations, layers, fan_out, and avg/p99
    latency for the hit and miss cases.
    """
    manager = _build_manager()
    manager.add_link("orphan", "nowhere", *_WINDOW)

    result: dict[str, object] = {
        "operation": "has_link_latency",
        "iterations": _ITERATIONS,
        "layers": _LAYERS,
        "fan_out": _FAN_OUT,
    }
    for label, target in (("hit", f"r{_LAYERS}-{_FAN_OUT - 1}"), ("miss", "nowhere")):
        lats = sorted(_measure(manager, "r0-0", target))
        n = len(lats)
        result[f"{label}_avg_latency_ms"] = round(sum(lats) / n, 4)
        result[f"{label}_p99_latency_ms"] = round(lats[min(int(n * 0.99), n - 1)], 4)

    print(
        f"[bench_has_link_latency] hit p99={result['hit_p99_latency_ms']:.4f}ms  "
        f"miss p99={result['miss_p99_latency_ms']:.4f}ms"
    )
    return result


if __name__ == "__main__":
    print(json.dumps(bench_has_link_latency(), indent=2))
