# tests/test_rules.py
import pytest

from flattree.rules import (
    DEFAULT_IGNORED_PATTERNS,
    is_ignored,
    is_priority,
    language_for,
    should_include,
)


@pytest.mark.parametrize(
    "path",
    ["node_modules/pkg/index.js", ".git/config", "src/__pycache__/a.pyc", "dist"],
)
def test_default_patterns_exclude_common_noise(path):
    assert is_ignored(path, DEFAULT_IGNORED_PATTERNS)


def test_substring_matching_is_not_glob():
    # "env" is a plain substring: it also hits names that merely contain it
    assert is_ignored("src/environment.py", ["env"])
    assert not is_ignored("src/a.py", ["*.py"])


def test_matching_is_case_sensitive():
    assert not is_ignored("Node_Modules/x.js", ["node_modules"])


def test_empty_rule_set_excludes_nothing():
    assert not is_ignored("node_modules/x.js", [])


@pytest.mark.parametrize(
    "name",
    ["README.md", "readme.md", "ReadMe.MD", "package.json", "requirements.txt",
     "pyproject.toml", "a.py", "b.js", "c.jsx", "d.ts", "e.tsx", "tsconfig.json"],
)
def test_eligible_names(name):
    assert should_include(name)


@pytest.mark.parametrize(
    "name",
    ["config", "notes.md", "Requirements.txt", "PyProject.toml", "a.PY", "style.css"],
)
def test_ineligible_names(name):
    assert not should_include(name)


def test_priority_is_case_insensitive():
    assert is_priority("README.md")
    assert is_priority("Package.json")
    assert not is_priority("index.ts")


def test_language_label():
    assert language_for("src/index.ts") == "ts"
    assert language_for("Main.PY") == "py"
    assert language_for("Makefile") == "text"
    assert language_for(".bashrc") == "text"
