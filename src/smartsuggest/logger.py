"""
SmartSuggest progress logging - operator-facing output for CLI runs.

Answers three questions:
1. What was loaded?
2. What was skipped, and why?
3. What came out on top?

The ranking engine itself never logs; only the CLI drives this.
"""

import sys
from datetime import UTC, datetime

# Force line buffering for immediate output (important on Windows/PowerShell)
try:
    sys.stdout.reconfigure(line_buffering=True)  # type: ignore
except Exception:
    pass  # Fallback for non-reconfigurable streams


def _print(*args: object, **kwargs: object) -> None:
    """Print with immediate flush."""
    print(*args, **kwargs, flush=True)


def _eprint(*args: object, **kwargs: object) -> None:
    """Print to stderr with immediate flush."""
    print(*args, **kwargs, file=sys.stderr, flush=True)


class RankLogger:
    """Structured progress logger for a ranking run."""

    def __init__(self, query: str, verbose: bool = False):
        self.query = query
        self.verbose = verbose
        self.start_time = datetime.now(UTC)
        self.phase_times: dict[str, datetime] = {}

    def phase(self, name: str, detail: str = "") -> None:
        """Log a phase transition."""
        now = datetime.now(UTC)
        self.phase_times[name] = now
        elapsed = (now - self.start_time).total_seconds()

        if detail:
            _print(f"[Phase] {name}: {detail} ({elapsed:.1f}s)")
        else:
            _print(f"[Phase] {name} ({elapsed:.1f}s)")

    def loaded(self, candidates: int, skipped: int = 0) -> None:
        """Log how many candidate records were accepted."""
        if skipped > 0:
            _print(f"  [Loaded] {candidates} candidates ({skipped} skipped)")
        else:
            _print(f"  [Loaded] {candidates} candidates")

    def skip(self, reason: str, detail: str) -> None:
        """Log a skipped record (verbose only)."""
        if self.verbose:
            _print(f"    [Skip] {reason}: {detail[:60]}")

    def ranked(self, total: int, shown: int) -> None:
        """Log ranking results."""
        _print(f"  [Ranked] {total} candidates -> showing {shown}")

    def bands(self, bands: dict[str, int]) -> None:
        """Log confidence band distribution."""
        band_str = ", ".join(f"{k}={v}" for k, v in sorted(bands.items()))
        _print(f"  [Bands] {band_str}")

    def finish(self, top: str = "") -> None:
        """Log run completion."""
        elapsed = (datetime.now(UTC) - self.start_time).total_seconds()
        _print(f"\n[SmartSuggest] Ranked '{self.query}' in {elapsed:.2f}s")
        if top:
            _print(f"  Top: {top}")

    def error(self, msg: str) -> None:
        """Log an error."""
        _eprint(f"[Error] {msg}")

    def warning(self, msg: str) -> None:
        """Log a warning."""
        _eprint(f"[Warning] {msg}")
