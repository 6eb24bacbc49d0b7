#!/usr/bin/env python3
"""
Solve congruence systems from a YAML config or the command line.

Each system is solved independently; a failing system is reported and
logged, and the run continues with the next one.

Usage:
    python scripts/solve_crt.py --config configs/example_systems.yaml
    python scripts/solve_crt.py --remainders 2 3 2 --moduli 3 5 7
    python scripts/solve_crt.py --config configs/example_systems.yaml \\
        --method garner --cross-check --output-dir outputs/run1
"""

import argparse
import sys
import time
import traceback
from dataclasses import replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from rns_crt.config import (
    CongruenceSystem, SolverConfig, METHODS, EGCD_PROVIDERS,
    load_config, parse_int,
)
from rns_crt.crt.system import solve_system
from rns_crt.errors import CrtError
from rns_crt.logging import RunLogger, create_manifest


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Chinese Remainder Theorem solver"
    )
    parser.add_argument("--config", type=str, default=None,
                        help="Path to YAML config file")
    parser.add_argument("--remainders", nargs="+", type=parse_int, default=None,
                        help="Remainders of a single ad-hoc system")
    parser.add_argument("--moduli", nargs="+", type=parse_int, default=None,
                        help="Moduli of a single ad-hoc system")
    parser.add_argument("--method", choices=METHODS, default=None)
    parser.add_argument("--egcd", choices=EGCD_PROVIDERS, default=None)
    parser.add_argument("--require-coprime", action="store_true", default=None,
                        help="Run the explicit pairwise-gcd check first")
    parser.add_argument("--signed", action="store_true", default=None,
                        help="Also report the centered representative")
    parser.add_argument("--cross-check", action="store_true", default=None,
                        help="Verify every solution against sympy")
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Write manifest and JSONL logs here")
    parser.add_argument("--run-id", type=str, default=None,
                        help="Run ID (default: auto-generated)")
    return parser


def resolve_inputs(args):
    """Merge config file and CLI overrides into (config, systems)."""
    if args.config:
        config, systems = load_config(args.config)
    else:
        config, systems = SolverConfig(), []

    if args.remainders is not None or args.moduli is not None:
        systems = systems + [CongruenceSystem(
            name="cli",
            remainders=args.remainders or [],
            moduli=args.moduli or [],
        )]

    overrides = {
        "method": args.method,
        "egcd": args.egcd,
        "require_coprime": args.require_coprime,
        "signed": args.signed,
        "cross_check": args.cross_check,
        "output_dir": args.output_dir,
    }
    config = replace(config, **{k: v for k, v in overrides.items()
                                if v is not None})
    return config, systems


def run(config: SolverConfig, systems, logger=None) -> int:
    """Solve all systems; return the number that failed."""
    n_failed = 0
    for idx, system in enumerate(systems):
        t0 = time.time()
        try:
            solution = solve_system(system.remainders, system.moduli, config)
        except CrtError as e:
            n_failed += 1
            print(f"[{system.name}] ERROR {type(e).__name__}: {e}", flush=True)
            if logger is not None:
                logger.log_error({
                    "system_idx": idx,
                    "name": system.name,
                    "error_type": type(e).__name__,
                    "error": str(e),
                    "fields": {k: str(v) for k, v in vars(e).items()},
                })
            continue
        except AssertionError as e:
            n_failed += 1
            print(f"[{system.name}] CROSS-CHECK FAILED: {e}", flush=True)
            traceback.print_exc()
            if logger is not None:
                logger.log_error({
                    "system_idx": idx,
                    "name": system.name,
                    "error_type": "CrossCheckFailed",
                    "error": str(e),
                })
            continue

        elapsed = time.time() - t0
        line = f"[{system.name}] x = {solution.value} (mod {solution.modulus})"
        if solution.signed_value is not None:
            line += f"  signed = {solution.signed_value}"
        print(line, flush=True)

        if logger is not None:
            record = {"system_idx": idx, "name": system.name}
            record.update(solution.to_dict())
            logger.log_solution(record)
            logger.log_metrics({
                "system_idx": idx,
                "name": system.name,
                "n_congruences": len(system.moduli),
                "modulus_bits": solution.modulus.bit_length(),
                "elapsed_s": elapsed,
            })
    return n_failed


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config, systems = resolve_inputs(args)
    except (OSError, ValueError) as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 2

    if not systems:
        parser.error("no systems given: use --config or --remainders/--moduli")

    run_id = args.run_id or f"run_{int(time.time())}"

    if config.output_dir is None:
        n_failed = run(config, systems)
    else:
        output_dir = Path(config.output_dir)
        manifest = create_manifest(run_id=run_id, config={
            "solver": config.to_dict(),
            "n_systems": len(systems),
            "source": args.config or "cli",
        })
        manifest.save(output_dir / "manifest.json")

        with RunLogger(output_dir) as logger:
            n_failed = run(config, systems, logger)
            summary = logger.summary
        print(f"Logged {summary['solutions_logged']} solution(s), "
              f"{summary['errors_logged']} error(s) to {output_dir}", flush=True)

    print(f"\nSummary: {len(systems) - n_failed}/{len(systems)} solved",
          file=sys.stderr)
    return 1 if n_failed else 0


if __name__ == "__main__":
    sys.exit(main())
