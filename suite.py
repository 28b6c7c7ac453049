import sys
import time
from dataclasses import dataclass
from typing import List, Dict, Any, Callable, Optional, Type

_registered: List[Dict[str, Any]] = []


class _c:
    """color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


@dataclass
class _Result:
    description: str
    passed: bool
    error: Optional[str] = None


class TestAssertionError(AssertionError):
    """raised by assert_that, so failures read differently from crashes."""
    __test__ = False

# --- public api ---

def test(description: str) -> Callable:
    """decorator registering a function as a test case. the function itself is returned unchanged for pytest."""

    def decorator(func: Callable) -> Callable:
        _registered.append({'func': func, 'description': description})
        return func

    return decorator


# pytest collects the same test_ functions directly; the decorator itself is not a test
test.__test__ = False


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any], message: str = "") -> BaseException:
    """calls func and requires it to raise error_type; returns the raised error."""
    try:
        func()
    except error_type as e:
        return e
    raise TestAssertionError(message or f"expected {error_type.__name__} to be raised")


def run(title: str = "test run") -> bool:
    """runs every registered test, prints a report and clears the registry. true when all passed."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()
    results: List[_Result] = []

    for entry in _registered:
        try:
            entry['func']()
            result = _Result(entry['description'], True)
        except TestAssertionError as e:
            result = _Result(entry['description'], False, f"assertion failed: {e}")
        except Exception as e:
            result = _Result(entry['description'], False, f"{type(e).__name__}: {e}")
        results.append(result)

        if result.passed:
            print(f"  {_c.ok}pass{_c.reset}  {result.description}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {result.description}")
            print(f"    {_c.grey}-> {result.error}{_c.reset}")

    _print_summary(results, start_time)
    _registered.clear()
    return all(r.passed for r in results)


def main(title: str) -> None:
    """script entry point: run the suite and exit non-zero on failure."""
    sys.exit(0 if run(title) else 1)


def _print_summary(results: List[_Result], start_time: float) -> None:
    duration = (time.perf_counter() - start_time) * 1000
    failed = sum(1 for r in results if not r.passed)
    color = _c.ok if failed == 0 else _c.fail

    print(f"\n{color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{len(results)}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {len(results) - failed}{_c.reset}, {_c.fail}failed: {failed}{_c.reset}")
