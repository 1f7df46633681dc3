"""Shared test fixtures."""

import logging
from typing import Any, Dict, List, Optional

import pytest
import structlog
from pydantic import BaseModel

from iter_tools.infrastructure.logging import LIBRARY_LOGGER_NAME


class Person(BaseModel):
    """Record read by attribute rather than by key."""

    name: str
    age: Optional[int] = None


@pytest.fixture
def records() -> List[Dict[str, Any]]:
    """Records with one empty id."""
    return [{"id": 1}, {"id": 2}, {"id": 3}, {"id": None}]


@pytest.fixture
def ages() -> Dict[str, int]:
    """Mapping keyed by name."""
    return {"joe": 14, "john": 2, "jim": 66}


@pytest.fixture
def people() -> List[Person]:
    """Attribute records; the last one has no age."""
    return [Person(name="ann", age=31), Person(name="bob", age=17), Person(name="cy")]


@pytest.fixture
def reset_logging():
    """Restore logging and structlog state after a test reconfigures it."""
    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    saved_level = library_logger.level
    saved_handlers = library_logger.handlers[:]
    yield
    for handler in library_logger.handlers[:]:
        library_logger.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    for handler in saved_handlers:
        library_logger.addHandler(handler)
    library_logger.setLevel(saved_level)
    structlog.reset_defaults()
