"""Fixtures for end-to-end tests of the ``handykit`` command line.

Provides a test-only `log-demo` command that emits log records at every
level, plus fixtures to register it, obtain a CliRunner and run inside an
isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from handykit.entrypoints.cli.main import handykit

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one record per level on 'handykit.demo' and a few third-party ones."""
    logger = logging.getLogger("handykit.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and from any Click-Extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture(autouse=True)
def isolated_env(clean_env, tmp_path):
    """Drop HANDYKIT_* settings and keep the default flight-recorder file in tmp."""
    clean_env.setenv("HANDYKIT_LOG_PATH", str(tmp_path / "handykit.log"))
    return clean_env


@pytest.fixture
def registered_log_demo():
    """Register 'log-demo' on the top-level group for the duration of a test."""
    handykit.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(handykit, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside runner.isolated_filesystem()."""
    with runner.isolated_filesystem():
        yield
