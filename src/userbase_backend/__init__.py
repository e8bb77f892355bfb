"""Userbase backend package wiring and entrypoints."""

from userbase_backend.settings import BackendSettings, get_settings


def run_dev() -> None:
    """Run the development ASGI server with auto-reload."""
    from userbase_backend.main import run_dev as _run_dev

    _run_dev()


def run_prod() -> None:
    """Run the production ASGI server without auto-reload."""
    from userbase_backend.main import run_prod as _run_prod

    _run_prod()


main = run_dev

__all__ = [
    "BackendSettings",
    "get_settings",
    "main",
    "run_dev",
    "run_prod",
]
