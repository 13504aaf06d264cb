"""Fixtures for CLI tests."""

import unittest.mock as _mock

import click.testing as _click_testing
import pytest as _pytest


@_pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from reconfiguring the root logger during tests."""
    with _mock.patch("policymatch.cli.main._configure_logging") as configure:
        yield configure


@_pytest.fixture
def runner() -> _click_testing.CliRunner:
    return _click_testing.CliRunner()
