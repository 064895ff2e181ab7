import time
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    """ansi colours for the report"""
    ok = '\033[92m'
    fail = '\033[91m'
    info = '\033[94m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """a failed check, reported apart from unexpected errors."""


# --- public api ---

def test(description: str) -> Callable:
    """
    decorator to register a function as a test case.
    the function is returned unchanged apart from its description, so pytest
    collects the same functions when the modules are run under it.
    """

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        wrapper.description = description
        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """fail the current test with `message` unless condition holds."""
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any],
                  message: Optional[str] = None) -> BaseException:
    """
    call func and require it to raise error_type (or a subclass).
    returns the caught error so the caller can inspect it.
    """
    try:
        func()
    except error_type as e:
        return e
    except Exception as e:
        raise SuiteAssertionError(
            message or f"expected {error_type.__name__}, got {type(e).__name__}: {e}") from e
    raise SuiteAssertionError(message or f"expected {error_type.__name__}, nothing was raised")


def _run_one(func: Callable) -> Optional[str]:
    """run a single test; returns the failure text, or None when it passed."""
    try:
        func()
    except SuiteAssertionError as e:
        return f"assertion failed: {e}"
    except Exception as e:
        return f"{type(e).__name__}: {e}"
    return None


def run(title: str = "test run") -> bool:
    """executes all registered tests, prints a report and returns True if all passed."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()

    results = []
    for item in _suite_state['tests']:
        error = _run_one(item['func'])
        results.append({'passed': error is None, 'description': item['description'], 'error': error})
        if error is None:
            print(f"  {_c.ok}✔{_c.reset} {PASS_FACE}  {item['description']}")
        else:
            print(f"  {_c.fail}✖{_c.reset} {FAIL_FACE}  {item['description']}")
            print(f"      {error}")

    _suite_state['results'] = results
    # registrations are per module run
    _suite_state['tests'] = []
    return _print_summary(start_time)


def _print_summary(start_time: float) -> bool:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']
    failed = sum(1 for r in results if not r['passed'])
    colour = _c.ok if failed == 0 else _c.fail
    print(f"\n{colour}{SUMMARY_FACE}  {len(results) - failed}/{len(results)} passed, "
          f"{failed} failed ({duration:.2f}ms){_c.reset}\n")
    return failed == 0
