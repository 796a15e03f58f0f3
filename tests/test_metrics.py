import pytest

from ctest.context import InvalidContextError, create, record, release
from ctest.metrics import summarize


def test_summarize_mixed_run():
    ctx = create()
    record(ctx, "a1", True, "t.c", 1)
    record(ctx, "a2", True, "t.c", 2)
    record(ctx, "a3", False, "t.c", 3)

    summary = summarize(ctx)

    assert summary.passed == 2
    assert summary.failed == 1
    assert summary.total == 3
    assert summary.pass_rate == pytest.approx(66.67, abs=0.01)
    assert summary.all_passed is False


def test_summarize_empty_run():
    summary = summarize(create())
    assert summary.total == 0
    assert summary.pass_rate == 0.0
    assert summary.all_passed is True


def test_summarize_does_not_record():
    ctx = create()
    record(ctx, "a", True, "t.c", 1)
    summarize(ctx)
    summarize(ctx)
    assert summarize(ctx).total == 1


def test_summary_to_dict():
    ctx = create()
    record(ctx, "a", True, "t.c", 1)
    assert summarize(ctx).to_dict() == {
        "passed": 1,
        "failed": 0,
        "total": 1,
        "pass_rate": 100.0,
        "all_passed": True,
    }


def test_summarize_released_context_fails():
    ctx = create()
    record(ctx, "a", True, "t.c", 1)
    release(ctx)
    with pytest.raises(InvalidContextError):
        summarize(ctx)
