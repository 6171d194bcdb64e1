"""Pytest configuration and shared fixtures for timeout_checker tests."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def provider_root() -> Path:
    """Return path to the miniature provider repository."""
    return FIXTURES_DIR / "provider"


@pytest.fixture
def service_dir(provider_root) -> Path:
    """Return path to the Go sources of the fixture provider."""
    return provider_root / "internal" / "service"


@pytest.fixture
def output() -> io.StringIO:
    """Return a buffer that a test console writes into."""
    return io.StringIO()


@pytest.fixture
def console(output) -> Console:
    """Return a plain, wide console writing into ``output``."""
    return Console(file=output, width=120, no_color=True, soft_wrap=True)


def write_definition(path: Path, timeouts: dict[str, str]) -> Path:
    """Helper to write a Go resource definition declaring ``timeouts``.

    ``timeouts`` maps Go field labels (``Create``...) to duration expressions
    such as ``30 * time.Minute``.
    """
    lines = [
        "func ResourceExample() *schema.Resource {",
        "\treturn &schema.Resource{",
        "\t\tTimeouts: &schema.ResourceTimeout{",
    ]
    for label, expr in timeouts.items():
        lines.append(f"\t\t\t{label}: schema.DefaultTimeout({expr}),")
    lines.extend(["\t\t},", "\t}", "}"])
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def write_markdown(path: Path, timeouts: dict[str, str]) -> Path:
    """Helper to write a documentation page with a Timeouts section.

    ``timeouts`` maps field names (``create``...) to default descriptions
    such as ``30 minutes``.
    """
    lines = ["# example_resource", "", "## Timeouts", ""]
    for name, text in timeouts.items():
        lines.append(f"* `{name}` - (Default `{text}`)")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
