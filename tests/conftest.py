"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages, and
keeps every test away from the developer's real commentgate config.
"""

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point the global config at an empty temp location and drop env overrides."""
    from commentgate.config import loader

    monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", tmp_path / "global-config.yaml")
    for key in list(os.environ):
        if key.upper().startswith("COMMENTGATE__"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def sample_python_content() -> str:
    return '''#!/usr/bin/env python
"""Module docstring."""

import os


class Greeter:
    """Says hello."""

    def greet(self, name):
        """Return a greeting."""
        # build the message
        return f"Hello, {name}"  # type: ignore[no-any-return]
'''


@pytest.fixture
def sample_javascript_content() -> str:
    return """/**
 * Adds two numbers.
 */
function add(a, b) {
  // sum them
  return a + b; /* inline */
}
"""
