from datetime import timedelta

from nodescaler.result import Result, min_result


def test_default_is_zero():
    assert Result().is_zero()
    assert not Result(requeue=True).is_zero()
    assert not Result(requeue_after=timedelta(seconds=1)).is_zero()


def test_min_of_nothing_is_zero():
    assert min_result().is_zero()


def test_min_of_zero_results_is_zero():
    assert min_result(Result(), Result()) == Result()


def test_min_picks_soonest():
    soon = timedelta(seconds=5)
    later = timedelta(seconds=10)
    assert min_result(Result(requeue_after=later), Result(requeue_after=soon)) == Result(
        requeue=True, requeue_after=soon
    )


def test_min_ignores_zero_results():
    after = timedelta(seconds=3)
    assert min_result(Result(), Result(requeue_after=after)) == Result(
        requeue=True, requeue_after=after
    )


def test_immediate_requeue_wins():
    result = min_result(Result(requeue_after=timedelta(seconds=9)), Result(requeue=True))
    assert result.requeue
    assert result.requeue_after == timedelta(0)