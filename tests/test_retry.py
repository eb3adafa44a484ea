#!filepath: tests/test_retry.py
import pytest
from elspot import retry


def test_retry_success_without_retry():
    call_count = {"n": 0}

    @retry.decorator(max_attempts=3)
    def func():
        call_count["n"] += 1
        return "ok"

    assert func() == "ok"
    assert call_count["n"] == 1


def test_retry_success_after_failures():
    call_count = {"n": 0}

    @retry.decorator(max_attempts=5, delay=0.01, backoff=1)
    def func():
        call_count["n"] += 1
        if call_count["n"] < 3:
            raise ValueError("fail")
        return "success"

    assert func() == "success"
    assert call_count["n"] == 3


def test_retry_raises_after_max_attempts():
    call_count = {"n": 0}

    @retry.decorator(max_attempts=3, delay=0.01)
    def func():
        call_count["n"] += 1
        raise ValueError("fail")

    with pytest.raises(ValueError):
        func()

    assert call_count["n"] == 3


def test_retry_catches_specific_exception():
    call_count = {"n": 0}

    @retry.decorator(exceptions=(KeyError,), max_attempts=3)
    def func():
        call_count["n"] += 1
        raise ValueError("this is not KeyError")

    with pytest.raises(ValueError):
        func()

    assert call_count["n"] == 1


def test_exponential_backoff(monkeypatch):
    sleep_calls = []
    monkeypatch.setattr("time.sleep", lambda t: sleep_calls.append(t))

    @retry.decorator(max_attempts=4, delay=1, backoff=2, jitter=False)
    def func():
        raise ValueError("fail")

    with pytest.raises(ValueError):
        func()

    # 3 retries: 1, 2, 4
    assert sleep_calls == [1, 2, 4]
