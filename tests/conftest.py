"""
Pytest configuration and shared fixtures for StarterKit tests.
"""

import logging

import pytest

from starterkit.builders import (
    BuilderDescriptor,
    BuilderRegistry,
    ExternalDependency,
    GeneratorKind,
    ManifestKind,
)


@pytest.fixture
def registry():
    """Registry with the built-in builder table."""
    return BuilderRegistry()


@pytest.fixture
def custom_registry():
    """Registry with a small custom table and a non-standard default."""
    entries = {
        "Alpha": BuilderDescriptor(
            output_file="alpha.PL",
            generator=GeneratorKind.BUILD_PL,
            manifest=ManifestKind.MODULE_BUILD,
            instructions=["run alpha"],
            dependencies=[ExternalDependency("alphatool", ("alphatool", "atool"))],
        ),
        "Beta": BuilderDescriptor(
            output_file="alpha.PL",
            generator=GeneratorKind.MAKEFILE_PL,
            manifest=ManifestKind.MAKEMAKER,
            instructions=["run beta"],
        ),
    }
    return BuilderRegistry(entries, default="Beta")


@pytest.fixture
def warnings_log(caplog):
    """
    Capture StarterKit warnings.

    Returns a callable giving the warning messages logged so far.
    """
    caplog.set_level(logging.WARNING, logger="starterkit")

    def _messages():
        return [
            record.getMessage()
            for record in caplog.records
            if record.levelno == logging.WARNING
            and record.name.startswith("starterkit")
        ]

    return _messages
