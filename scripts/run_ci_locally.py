#!/usr/bin/env python3
"""
Run the full_name_splitter checks locally using the ACTIVE virtual environment.

Order:
  1) uv sync --all-extras [--frozen if uv.lock exists]  (ACTIVE venv)
  2) black --check on the package, tests and scripts (line length 120)
  3) mypy on the package
  4) pytest tests/ with coverage of full_name_splitter

Pass --skip-sync to reuse the environment as it is.
"""

import os
import sys
import shutil
import subprocess
from pathlib import Path

PACKAGE = "full_name_splitter"
LINT_TARGETS = [PACKAGE, "tests", "scripts"]
COVERAGE_FLOOR = 90


def repo_root() -> Path:
    here = Path(__file__).resolve().parent
    for d in [here] + list(here.parents):
        if (d / "pyproject.toml").exists():
            return d
    return here  # fallback


REPO = repo_root()


def uv_exe() -> list[str]:
    uv_path = shutil.which("uv")
    if uv_path:
        return [uv_path]
    print("ERROR: 'uv' not found. Install uv first.", file=sys.stderr)
    sys.exit(2)


def run(cmd: list[str], *, env: dict[str, str] | None = None) -> None:
    print(">>>", " ".join(cmd))
    subprocess.run(cmd, check=True, cwd=str(REPO), env=env)


def uv_run(*args: str, env: dict[str, str] | None = None) -> None:
    run(uv_exe() + ["run", "--active", *args], env=env)


def main(argv: list[str]) -> None:
    if "--skip-sync" not in argv:
        sync_args = ["sync", "--active", "--all-extras"]
        if (REPO / "uv.lock").exists():
            sync_args.append("--frozen")
        run(uv_exe() + sync_args)

    uv_run("black", *LINT_TARGETS, "--check", "--line-length", "120")
    uv_run("mypy", PACKAGE, "--ignore-missing-imports")

    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO)
    uv_run(
        "pytest",
        "tests/",
        f"--cov={PACKAGE}",
        "--cov-report=term-missing",
        f"--cov-fail-under={COVERAGE_FLOOR}",
        env=env,
    )

    print("\nALL CHECKS PASSED")


if __name__ == "__main__":
    try:
        main(sys.argv[1:])
    except subprocess.CalledProcessError as e:
        print(f"\nCommand failed with exit code {e.returncode}", file=sys.stderr)
        sys.exit(e.returncode)
