#!filepath: elspot/utils/retry.py
import time
import random
from functools import wraps
from typing import Callable, Tuple, Type

from elspot.utils.logger import logs


class Retry:
    """
    Synchronous retry helper: exponential backoff, jitter, one log line per failure.
    """

    @staticmethod
    def run(
        func: Callable,
        *args,
        exceptions: Tuple[Type[Exception], ...] = (Exception,),
        max_attempts: int = 3,
        delay: float = 1.0,
        backoff: float = 2.0,
        jitter: bool = True,
        **kwargs,
    ):
        attempt = 1
        while attempt <= max_attempts:

            try:
                return func(*args, **kwargs)

            except exceptions as e:
                if attempt == max_attempts:
                    logs.error(f"[Retry] {func.__name__} failed after {max_attempts} attempts")
                    raise

                wait = delay * (backoff ** (attempt - 1))
                if jitter:
                    wait = wait * random.uniform(0.8, 1.2)

                logs.warning(
                    f"[Retry] attempt {attempt}/{max_attempts} failed: {e}. "
                    f"retrying in {wait:.2f}s..."
                )
                time.sleep(wait)

                attempt += 1

    @staticmethod
    def decorator(
        exceptions: Tuple[Type[Exception], ...] = (Exception,),
        max_attempts: int = 3,
        delay: float = 1.0,
        backoff: float = 2.0,
        jitter: bool = True,
    ):
        def wrapper(func: Callable):
            @wraps(func)
            def inner(*args, **kwargs):
                return Retry.run(
                    func,
                    *args,
                    exceptions=exceptions,
                    max_attempts=max_attempts,
                    delay=delay,
                    backoff=backoff,
                    jitter=jitter,
                    **kwargs,
                )

            return inner

        return wrapper
