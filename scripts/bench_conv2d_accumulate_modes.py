"""
scripts/bench_conv2d_accumulate_modes.py

Benchmark script (NOT a unit test) comparing tensornn Conv2D throughput across
the three ``matmuladd`` accumulation modes:

1) reference  : scalar Python loops
2) vectorized : one NumPy row update per input channel (bit-identical to 1)
3) blas       : ``vec @ mat`` per tap

It also reports whether ``vectorized`` and ``blas`` reproduce the reference
output exactly.

Usage examples
--------------
# Default: benchmark a few shapes
python scripts/bench_conv2d_accumulate_modes.py

# Benchmark a single shape
python scripts/bench_conv2d_accumulate_modes.py --H 16 --W 16 --C-in 8 --C-out 16 --k 3 --s 1

# Skip the (slow) reference mode
python scripts/bench_conv2d_accumulate_modes.py --skip-reference

Notes
-----
- This benchmark includes Python overhead for calling the op; it's meant to
  measure end-to-end speed at the Python API level.
"""

from __future__ import annotations

import os
import sys

# Ensure repo_root/src is importable when running this file directly:
# repo_root/
#   src/tensornn/...
#   scripts/bench_conv2d_accumulate_modes.py
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")

if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

import argparse
import statistics
import time
from typing import Callable

import numpy as np

from tensornn.infrastructure.ops.conv2d_cpu import conv2d_forward_cpu


def _time_one(fn: Callable[[], None], *, warmup: int, repeats: int) -> list[float]:
    for _ in range(warmup):
        fn()

    times: list[float] = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        times.append(t1 - t0)
    return times


def _fmt_seconds(x: float) -> str:
    if x < 1e-6:
        return f"{x*1e9:.2f} ns"
    if x < 1e-3:
        return f"{x*1e6:.2f} µs"
    if x < 1:
        return f"{x*1e3:.2f} ms"
    return f"{x:.3f} s"


def bench_one(
    *,
    H: int,
    W: int,
    C_in: int,
    C_out: int,
    k: int,
    s: int,
    warmup: int,
    repeats: int,
    skip_reference: bool,
) -> None:
    rng = np.random.default_rng(0)
    x = rng.standard_normal((H, W, C_in)).astype(np.float32)
    w = rng.standard_normal((k, k, C_in, C_out)).astype(np.float32)
    strides = [s, s, 1]

    modes = ["vectorized", "blas"] if skip_reference else ["reference", "vectorized", "blas"]
    outputs: dict[str, np.ndarray] = {}
    medians: dict[str, float] = {}

    for mode in modes:

        def run() -> None:
            outputs[mode] = conv2d_forward_cpu(x, w, strides=strides, accumulate=mode)

        samples = _time_one(run, warmup=warmup, repeats=repeats)
        medians[mode] = statistics.median(samples)

    print(f"\nshape=(H={H}, W={W}, C_in={C_in}) filter=({k}, {k}, {C_in}, {C_out}) stride={s}")
    baseline = medians[modes[0]]
    for mode in modes:
        speedup = baseline / medians[mode] if medians[mode] > 0 else float("inf")
        print(
            f"  {mode:<11} median={_fmt_seconds(medians[mode]):>10}  "
            f"vs {modes[0]}={speedup:>7.2f}x"
        )

    ref = outputs[modes[0]]
    for mode in modes[1:]:
        exact = bool(np.array_equal(outputs[mode], ref))
        max_diff = float(np.max(np.abs(outputs[mode] - ref))) if ref.size else 0.0
        print(f"  {mode:<11} bit-identical={exact}  max|diff|={max_diff:.3e}")


def main() -> None:
    p = argparse.ArgumentParser(description="Benchmark tensornn conv2d accumulate modes.")
    p.add_argument("--H", type=int, default=None)
    p.add_argument("--W", type=int, default=None)
    p.add_argument("--C-in", dest="C_in", type=int, default=None)
    p.add_argument("--C-out", dest="C_out", type=int, default=None)
    p.add_argument("--k", type=int, default=3)
    p.add_argument("--s", type=int, default=1)
    p.add_argument("--warmup", type=int, default=1)
    p.add_argument("--repeats", type=int, default=5)
    p.add_argument("--skip-reference", action="store_true")
    args = p.parse_args()

    if args.H is not None:
        shapes = [(args.H, args.W or args.H, args.C_in or 4, args.C_out or 8, args.k, args.s)]
    else:
        shapes = [
            (8, 8, 3, 8, 3, 1),
            (16, 16, 8, 16, 3, 1),
            (28, 28, 1, 16, 5, 2),
        ]

    for H, W, C_in, C_out, k, s in shapes:
        bench_one(
            H=H,
            W=W,
            C_in=C_in,
            C_out=C_out,
            k=k,
            s=s,
            warmup=args.warmup,
            repeats=args.repeats,
            skip_reference=args.skip_reference,
        )


if __name__ == "__main__":
    main()
