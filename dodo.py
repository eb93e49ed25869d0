"""Development tasks for taskmill, run with ``doit``."""

import os
import shutil
from pathlib import Path

from doit.tools import title_with_actions
from rich.console import Console
from rich.panel import Panel

# Configuration
DOIT_CONFIG = {
    "verbosity": 2,
    "default_tasks": ["list"],
}

# Use direnv-managed UV_CACHE_DIR if available, otherwise use tmp/
UV_CACHE_DIR = os.environ.get("UV_CACHE_DIR", "tmp/.uv_cache")
UV_RUN = f"UV_CACHE_DIR={UV_CACHE_DIR} uv run"


def success_message():
    """Print success message after all checks pass."""
    console = Console()
    console.print()
    console.print(Panel.fit(
        "[bold green]✓ All checks passed![/bold green]",
        border_style="green",
        padding=(1, 2)
    ))
    console.print()


# --- Setup / Install Tasks ---


def task_install():
    """Install package with dependencies."""
    return {
        "actions": [f"UV_CACHE_DIR={UV_CACHE_DIR} uv sync"],
        "title": title_with_actions,
    }


def task_dev():
    """Install package with dev dependencies."""
    return {
        "actions": [f"UV_CACHE_DIR={UV_CACHE_DIR} uv sync --all-extras --dev"],
        "title": title_with_actions,
    }


def task_cleanup():
    """Clean build and cache artifacts."""

    def clean_artifacts():
        console = Console()
        console.print("[bold yellow]Cleaning...[/bold yellow]")
        for name in ("build", "dist", ".pytest_cache", ".ruff_cache", "tmp/htmlcov"):
            if os.path.isdir(name):
                console.print(f"  [dim]Removing {name}...[/dim]")
                shutil.rmtree(name)
        for cache in Path(".").rglob("__pycache__"):
            shutil.rmtree(cache, ignore_errors=True)
        console.print("[bold green]✓ Clean complete.[/bold green]")

    return {
        "actions": [clean_artifacts],
        "title": title_with_actions,
    }


# --- Testing Tasks ---


def task_test():
    """Run pytest, skipping the subprocess integration tests."""
    return {
        "actions": [f'{UV_RUN} pytest -v -m "not integration"'],
        "title": title_with_actions,
    }


def task_test_all():
    """Run every test, including the integration tests."""
    return {
        "actions": [f"{UV_RUN} pytest -v"],
        "title": title_with_actions,
    }


def task_coverage():
    """Run pytest with coverage."""
    return {
        "actions": [
            f"{UV_RUN} pytest "
            "--cov=taskmill --cov-report=term-missing "
            "--cov-report=html:tmp/htmlcov --cov-report=xml:tmp/coverage.xml -v"
        ],
        "title": title_with_actions,
    }


# --- Code Quality Tasks ---


def task_lint():
    """Run ruff linting."""
    return {
        "actions": [f"{UV_RUN} ruff check src/ tests/"],
        "title": title_with_actions,
    }


def task_format():
    """Format code with ruff."""
    return {
        "actions": [
            f"{UV_RUN} ruff format src/ tests/",
            f"{UV_RUN} ruff check --fix src/ tests/",
        ],
        "title": title_with_actions,
    }


def task_format_check():
    """Check code formatting without modifying files."""
    return {
        "actions": [f"{UV_RUN} ruff format --check src/ tests/"],
        "title": title_with_actions,
    }


def task_check():
    """Run all checks (format, lint, test)."""
    return {
        "actions": [success_message],
        "task_dep": ["format_check", "lint", "test"],
        "title": title_with_actions,
    }


# --- Build Tasks ---


def task_build():
    """Build package."""
    return {
        "actions": [f"UV_CACHE_DIR={UV_CACHE_DIR} uv build"],
        "title": title_with_actions,
    }
