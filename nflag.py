#!/usr/bin/env python3
"""
nflag - Validate the required `-n <value>` flag.

Architecture: Functional Core, Imperative Shell
- Data: immutable dataclasses
- Computations: pure functions (no I/O, no printing)
- Renderers: pure functions (data → str)
- Actions: a single stderr write at the edge
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Sequence

__version__ = "2.3.4"

VERSION = __version__
REQUIRED_FLAG = "-n"
MIN_ARGS = 2  # flag + value
FLAG_INDEX = 1  # position of the flag, counting the program name as 0


# =============================================================================
# DOMAIN TYPES (Data)
# =============================================================================


class FailureKind(Enum):
    """Kind of validation failure."""

    MISSING_ARGUMENTS = auto()
    UNRECOGNIZED_FLAG = auto()


@dataclass(frozen=True)
class ValidationFailure:
    """A rejected argument list (pure data)."""

    kind: FailureKind
    version: str
    value: str | None = None  # offending argument, UNRECOGNIZED_FLAG only
    index: int | None = None


# =============================================================================
# PURE FUNCTIONS (Computations) - No I/O, no side effects, no printing
# =============================================================================


def validate_args(
    args: Sequence[str],
    version: str = VERSION,
) -> ValidationFailure | None:
    """
    Check the argument list (program name excluded).

    Returns None when valid. The length check runs first, so a lone
    wrong flag is reported as missing arguments.

    Pure: (Sequence[str], str) -> ValidationFailure | None
    """
    if len(args) < MIN_ARGS:
        return ValidationFailure(kind=FailureKind.MISSING_ARGUMENTS, version=version)

    if args[0] != REQUIRED_FLAG:
        return ValidationFailure(
            kind=FailureKind.UNRECOGNIZED_FLAG,
            version=version,
            value=args[0],
            index=FLAG_INDEX,
        )

    return None


# =============================================================================
# RENDERERS (Pure: Data -> str)
# =============================================================================


def render_failure(failure: ValidationFailure) -> str:
    """Render a failure as its stderr message. Pure: ValidationFailure -> str."""
    match failure.kind:
        case FailureKind.MISSING_ARGUMENTS:
            return "Invalid number of args, for v{}\n!\n".format(failure.version)
        case FailureKind.UNRECOGNIZED_FLAG:
            return "{} is a wrong param at index {} for v{}.\n".format(
                failure.value, failure.index, failure.version
            )
        case _:
            raise ValueError(f"unknown failure kind: {failure.kind}")


# =============================================================================
# MAIN (Orchestration) - Wiring only, single write at the end
# =============================================================================


def run(args: Sequence[str]) -> tuple[int, str]:
    """
    Validate args. Returns (exit_code, output_for_stderr).

    Pure: no I/O, the caller decides what to do with the result.
    """
    failure = validate_args(args)

    if failure is None:
        return (0, "")

    return (1, render_failure(failure))


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point. Calls run(), writes to stderr at most once, returns the exit code."""
    args = sys.argv[1:] if argv is None else argv

    exit_code, output = run(args)

    # Single write at the edge; messages carry their own newlines
    if output:
        sys.stderr.write(output)
        sys.stderr.flush()

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
