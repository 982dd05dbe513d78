"""Command line entry point: monostatic RCS of a hierarchy for a set of observations."""

from __future__ import annotations

import sys
import time
from typing import Optional, Sequence

from sbrcs.bvh import ReducedBvhArray
from sbrcs.observation import ObservationArray
from sbrcs.solver import SbrSolver

_USAGE = "usage: sbrcs <input.rba> <input.obs> <output.rcs>"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a hierarchy and observations, solve, and write the RCS values."""
    args = list(sys.argv[1:] if argv is None else argv)
    print("## MakeRCS ##")
    start = time.perf_counter()

    if len(args) != 3:
        print("Command line arg count must be 3!", file=sys.stderr)
        print(_USAGE, file=sys.stderr)
        return 1

    rba_path, obs_path, rcs_path = args
    try:
        bvh = ReducedBvhArray.load(rba_path)
        observations = ObservationArray.load(obs_path)
        rcs = SbrSolver().monostatic_rcs(bvh, observations)
        rcs.save(rcs_path)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(rcs_path)
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    print(f"## Finished in {elapsed_ms} ms. ##")
    return 0


if __name__ == "__main__":
    sys.exit(main())