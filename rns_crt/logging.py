"""
Structured logging for CRT solve runs.

Produces:
  - manifest.json: One-time run metadata (git hash, config, versions)
  - solutions.jsonl: One record per solved system
  - errors.jsonl: One record per system that raised
  - metrics.jsonl: Timing data
"""

import json
import os
import platform
import subprocess
import sys
import time
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Any

import numpy as np
import sympy

from rns_crt.config import config_hash


@dataclass
class RunManifest:
    """Run-level metadata, saved once per run."""
    run_id: str
    timestamp: str
    git_commit: str
    config_hash: str
    node_name: str
    python_version: str
    numpy_version: str
    sympy_version: str
    config: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def save(self, path: Path):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2, default=str)


def _get_git_commit() -> str:
    """Get current git commit hash, or 'unknown'."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            capture_output=True, text=True, timeout=5,
        )
    except (OSError, subprocess.SubprocessError):
        return "unknown"
    return result.stdout.strip() if result.returncode == 0 else "unknown"


def create_manifest(run_id: str, config: Dict[str, Any]) -> RunManifest:
    """Create a RunManifest with auto-detected metadata."""
    return RunManifest(
        run_id=run_id,
        timestamp=time.strftime("%Y-%m-%dT%H:%M:%S%z"),
        git_commit=_get_git_commit(),
        config_hash=config_hash(config),
        node_name=os.environ.get("HOSTNAME", platform.node()),
        python_version=sys.version,
        numpy_version=np.__version__,
        sympy_version=sympy.__version__,
        config=config,
    )


class RunLogger:
    """Structured JSONL logger for one solve run.

    Writes three files:
      - solutions.jsonl
      - errors.jsonl
      - metrics.jsonl
    """

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        self._solutions_path = self.output_dir / "solutions.jsonl"
        self._errors_path = self.output_dir / "errors.jsonl"
        self._metrics_path = self.output_dir / "metrics.jsonl"

        # Append mode so reruns into the same directory accumulate
        self._solutions_f = open(self._solutions_path, 'a')
        self._errors_f = open(self._errors_path, 'a')
        self._metrics_f = open(self._metrics_path, 'a')

        self._solutions_count = 0
        self._errors_count = 0

    def _write(self, f, record: Dict[str, Any]):
        record["timestamp"] = time.time()
        f.write(json.dumps(record, default=str) + "\n")

    def log_solution(self, record: Dict[str, Any]):
        """Log a solved system."""
        self._write(self._solutions_f, record)
        self._solutions_count += 1

        # Flush periodically
        if self._solutions_count % 100 == 0:
            self._solutions_f.flush()

    def log_error(self, record: Dict[str, Any]):
        """Log a system that failed to solve."""
        self._write(self._errors_f, record)
        self._errors_f.flush()
        self._errors_count += 1

    def log_metrics(self, record: Dict[str, Any]):
        """Log timing metrics."""
        self._write(self._metrics_f, record)
        self._metrics_f.flush()

    def close(self):
        """Flush and close all log files."""
        for f in [self._solutions_f, self._errors_f, self._metrics_f]:
            f.flush()
            f.close()

    @property
    def summary(self) -> Dict[str, int]:
        return {
            "solutions_logged": self._solutions_count,
            "errors_logged": self._errors_count,
        }

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
