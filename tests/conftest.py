import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="run the live checks against the real website",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--live"):
        return
    skip_live = pytest.mark.skip(reason="live site checks need --live")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)
