"""Shared pytest configuration, marker assignment and stub converters."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_WRITING_STUB = """\
#!{python}
import sys

args = sys.argv[1:]
for flag in ("-o", "--output"):
    if flag in args:
        with open(args[args.index(flag) + 1], "w", encoding="utf-8") as handle:
            handle.write(".TH STUB 1\\n")
        sys.exit(0)
sys.exit(1)
"""

_FAILING_STUB = """\
#!{python}
import sys

sys.exit(3)
"""


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


def _write_stub(path: Path, template: str) -> Path:
    path.write_text(template.format(python=sys.executable), encoding="utf-8")
    path.chmod(0o755)
    return path


@pytest.fixture
def stub_converter(tmp_path: Path) -> Path:
    """Executable that writes a placeholder page to its ``-o``/``--output`` path."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir(exist_ok=True)
    return _write_stub(bin_dir / "stub-converter", _WRITING_STUB)


@pytest.fixture
def failing_converter(tmp_path: Path) -> Path:
    """Executable that always exits with status 3."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir(exist_ok=True)
    return _write_stub(bin_dir / "failing-converter", _FAILING_STUB)
