"""Behaviour tests for production-only JS minification.

Scenarios in ``js_minification.feature`` run :func:`folio_site.minify.minify_js`
under different build modes and confirm only ``production`` changes output.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from folio_site.minify import minify_js

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "js_minification.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, str]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given(parsers.parse('the script "{source}"'))
def given_script(scenario_state: dict[str, str], source: str) -> None:
    """Record the script source."""
    scenario_state["source"] = source


@when(parsers.parse('the script is minified for the "{environment}" environment'))
def when_minified(scenario_state: dict[str, str], environment: str) -> None:
    """Minify the recorded script in ``environment`` mode."""
    scenario_state["result"] = asyncio.run(
        minify_js(scenario_state["source"], environment)
    )


@then(parsers.parse('the script is "{expected}"'))
def then_script_is(scenario_state: dict[str, str], expected: str) -> None:
    """The minified output matches ``expected``."""
    assert scenario_state["result"] == expected


@then("the script is unchanged")
def then_unchanged(scenario_state: dict[str, str]) -> None:
    """Development output equals the input exactly."""
    assert scenario_state["result"] == scenario_state["source"]
