"""Shared pytest fixtures for the schemascan test suite.

Provides the test environment, sample generated documents, and cleanup of
process-wide state (config cache, correlation ID, root log handlers).
"""

import logging
import os
from collections.abc import Iterator

import pytest

from packages.common.config import get_config
from packages.common.tracing import clear_correlation_id

# ========== Test Environment Setup ==========


@pytest.fixture(scope="session", autouse=True)
def setup_test_env() -> None:
    """Pin configuration so a developer's .env cannot change test behavior."""
    os.environ["SCHEMASCAN_LOG_LEVEL"] = "WARNING"
    os.environ["SCHEMASCAN_LOG_JSON"] = "true"
    os.environ["SCHEMASCAN_INPUT_ENCODING"] = "utf-8"
    os.environ.pop("SCHEMASCAN_MAX_INPUT_BYTES", None)
    get_config.cache_clear()


@pytest.fixture(autouse=True)
def reset_process_state() -> Iterator[None]:
    """Clear cached config, correlation ID and root handlers around each test."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level

    get_config.cache_clear()
    clear_correlation_id()
    yield

    get_config.cache_clear()
    clear_correlation_id()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)


# ========== Sample Documents ==========


@pytest.fixture
def component_json() -> str:
    """Generated component JSON with one property per line."""
    return """{
 "component": {
    "kind": "component",
    "scheme": "timer",
    "description": "The timer component is used for generating message exchanges when a timer fires."
  },
  "properties": {
    "timerName": { "kind": "path", "type": "string", "javaType": "java.lang.String", "description": "The name of the timer" },
    "delay": { "kind": "parameter", "type": "integer", "javaType": "long", "defaultValue": "1000", "description": "The number of milliseconds to wait before the first event is generated." },
    "fixedRate": { "kind": "parameter", "type": "boolean", "javaType": "boolean", "defaultValue": "false" },
    "pattern": { "kind": "parameter", "type": "string", "javaType": "java.lang.String", "description": "Allows you to specify a custom \\"Date\\" pattern" }
  }
}
"""


@pytest.fixture
def explain_json() -> str:
    """Generated endpoint explain JSON: two header lines, then one option per line."""
    return """{
  "endpoint": "timer://foo?period=5000",
  "period": { "value": "5000", "description": "If greater than 0 generate periodic events every period milliseconds." },
  "fixedRate": { "value": "", "description": "Events take place at approximately regular intervals" },
  "timerName": { "value": "foo" },
  "daemon": { },
}
"""
