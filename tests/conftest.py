import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import io

import pytest

from plot_expression.logging_system import LogLevel, configure_logging


@pytest.fixture
def log_stream():
    """Route package logging into a buffer at verbose level."""
    stream = io.StringIO()
    configure_logging(log_level=LogLevel.VERBOSE, stream=stream)
    yield stream
    configure_logging(log_level=LogLevel.SILENT)
