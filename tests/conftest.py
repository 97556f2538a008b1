import pytest

from symbolic_expressions.logging_system import LogLevel, configure_logging


@pytest.fixture(autouse=True)
def silent_logging():
    """Keep library logging off the terminal unless a test opts in."""
    configure_logging(LogLevel.SILENT)
    yield
    configure_logging(LogLevel.SILENT)
