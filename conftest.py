import pytest

def pytest_addoption(parser):
    parser.addoption("--quick", action="store_true",
                     default=False, help="skip slow tests")
    parser.addoption("--slow", action="store_true",
                     default=False, help="only run slow tests")


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: long running randomized tests, skipped by --quick")


def pytest_collection_modifyitems(config, items):
    quick = config.getoption("--quick")
    slow_only = config.getoption("--slow")
    if not (quick or slow_only):
        return
    skip_slow = pytest.mark.skip(reason="--quick given, skipping slow tests")
    skip_quick = pytest.mark.skip(reason="--slow given, skipping tests that are not slow")
    for item in items:
        is_slow = 'slow' in item.keywords
        if quick and is_slow:
            item.add_marker(skip_slow)
        elif slow_only and not is_slow:
            item.add_marker(skip_quick)
