"""Suite context: pass/fail counts for one test run."""

from __future__ import annotations

import inspect
import logging
from typing import Any

import typer

from ctest.config import SuiteConfig

logger = logging.getLogger(__name__)

# Fill unused fields with 0x95 (10010101): 149 unsigned, -107 signed,
# both prime, with an odd high nibble.
BAD_MEM = 0x95

# "CTst"
MAGIC = 0x74735443

# A 64-bit field with every byte BAD_MEM. Negative, so poisoned counters
# fail the non-negative check as well.
POISON = int.from_bytes(bytes([BAD_MEM]) * 8, "little", signed=True)


class InvalidContextError(AssertionError):
    """A suite context was used outside its create/release lifetime.

    This is a programming error, never a condition to recover from.
    """


class SuiteContext:
    """Counts of tests passed and failed.

    Get one from create(). An instance constructed directly is scrubbed and
    fails every check until create() initializes it.
    """

    __slots__ = ("magic", "c_pass", "c_fail", "config")

    def __init__(self, config: SuiteConfig | None = None) -> None:
        self.config = config or SuiteConfig()
        _scrub(self)

    def __enter__(self) -> SuiteContext:
        _check(self)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        release(self)

    def __repr__(self) -> str:
        if self.magic != MAGIC:
            return "<SuiteContext (invalid)>"
        return f"<SuiteContext pass={self.c_pass} fail={self.c_fail}>"


def _scrub(ctx: SuiteContext) -> None:
    if ctx.config.poison:
        ctx.magic = ctx.c_pass = ctx.c_fail = POISON
    else:
        ctx.magic = 0
        ctx.c_pass = ctx.c_fail = 0


def _check(ctx: SuiteContext) -> None:
    if not isinstance(ctx, SuiteContext):
        raise InvalidContextError(
            f"expected a SuiteContext, got {type(ctx).__name__}"
        )
    if ctx.magic != MAGIC:
        raise InvalidContextError(
            f"suite context is not live (tag {ctx.magic!r}); "
            "it was never created or has already been released"
        )
    if not all(isinstance(c, int) and c >= 0 for c in (ctx.c_pass, ctx.c_fail)):
        raise InvalidContextError(
            f"suite context counts are corrupt: pass={ctx.c_pass!r} fail={ctx.c_fail!r}"
        )


def create(config: SuiteConfig | None = None) -> SuiteContext:
    """Allocate a live suite context with both counts at zero."""
    ctx = SuiteContext(config)

    ctx.magic = MAGIC
    ctx.c_pass = 0
    ctx.c_fail = 0

    _check(ctx)
    logger.debug(f"Created {ctx.config.system_name} suite context")
    return ctx


def release(ctx: SuiteContext) -> None:
    """Invalidate ctx, warning on stderr if no tests were recorded."""
    _check(ctx)
    if not count_test(ctx):
        typer.echo(
            f"Warning: no {ctx.config.system_name} unit tests were run.",
            err=True,
            color=True,
        )
    logger.debug(
        f"Releasing {ctx.config.system_name} suite context: "
        f"{ctx.c_pass} passed, {ctx.c_fail} failed"
    )
    _scrub(ctx)


def record(ctx: SuiteContext, name: str, result: Any, file: str, line: int) -> None:
    """Count one assertion outcome.

    A false result also prints ``<file>:<line>: test failed: <name>`` to
    stderr. The caller evaluates the assertion; only its truth value is used.
    """
    _check(ctx)
    passed = bool(result)
    if passed:
        ctx.c_pass += 1
    else:
        ctx.c_fail += 1
        # color=True keeps escape codes in the name when stderr is not a tty
        typer.echo(f"{file}:{line}: test failed: {name}", err=True, color=True)
    logger.debug(f"{name}: {'passed' if passed else 'failed'} ({file}:{line})")


def check(ctx: SuiteContext, result: Any, name: str) -> bool:
    """Record result at the caller's file and line. Returns bool(result)."""
    caller = inspect.currentframe().f_back
    passed = bool(result)
    record(ctx, name, passed, caller.f_code.co_filename, caller.f_lineno)
    return passed


def count_pass(ctx: SuiteContext) -> int:
    _check(ctx)
    return ctx.c_pass


def count_fail(ctx: SuiteContext) -> int:
    _check(ctx)
    return ctx.c_fail


def count_test(ctx: SuiteContext) -> int:
    _check(ctx)
    return ctx.c_pass + ctx.c_fail
