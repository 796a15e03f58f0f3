"""Pass/fail accounting for unit test runs."""

from ctest.config import SuiteConfig, load_config
from ctest.context import (
    InvalidContextError,
    SuiteContext,
    check,
    count_fail,
    count_pass,
    count_test,
    create,
    record,
    release,
)
from ctest.metrics import SuiteSummary, summarize
from ctest.verbose import setup_logger

__all__ = [
    "InvalidContextError",
    "SuiteConfig",
    "SuiteContext",
    "SuiteSummary",
    "check",
    "count_fail",
    "count_pass",
    "count_test",
    "create",
    "load_config",
    "record",
    "release",
    "setup_logger",
    "summarize",
]
