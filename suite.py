import time
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_registry: Dict[str, List[Dict[str, Any]]] = {
    'cases': [],
    'outcomes': []
}


class _c:
    """ansi colour codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class CheckFailed(AssertionError):
    """an assert_that failure, reported apart from unexpected errors."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """register a function as a test case. the function stays callable, so pytest can collect it too."""

    def decorator(func: Callable) -> Callable:
        _registry['cases'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise CheckFailed(message)


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any],
                  message: str = "expected an exception") -> BaseException:
    """call func and require it to raise error_type. returns the raised error for further checks."""
    try:
        func()
    except error_type as e:
        return e
    raise CheckFailed(f"{message}: {error_type.__name__} was not raised")


def run(title: str = "test run") -> bool:
    """run every registered case, print a report and return whether all passed."""
    print(f"\n{_c.info}=== {title} ==={_c.reset}")
    started = time.perf_counter()
    outcomes = []

    for case in _registry['cases']:
        error = None
        try:
            case['func']()
        except CheckFailed as e:
            error = f"check failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        outcomes.append({'passed': error is None, 'description': case['description'], 'error': error})
        if error is None:
            print(f"  {_c.ok}ok{_c.reset}    {case['description']}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {case['description']}")
            print(f"        {_c.grey}{error}{_c.reset}")

    _registry['outcomes'] = outcomes
    # cases are cleared so several suites can run from one script
    _registry['cases'] = []
    return _report(started)


def _report(started: float) -> bool:
    elapsed = (time.perf_counter() - started) * 1000
    outcomes = _registry['outcomes']
    failed = sum(1 for o in outcomes if not o['passed'])
    colour = _c.ok if failed == 0 else _c.fail

    print(f"\n{colour}{len(outcomes)} cases in {_c.warn}{elapsed:.2f}ms{colour}: "
          f"{len(outcomes) - failed} passed, {failed} failed{_c.reset}\n")
    return failed == 0
