"""Tests for the custom lint rules in scripts/extra_lints.py."""

from pathlib import Path

import pytest

from extra_lints import lint_paths, lint_source

REPO_ROOT = Path(__file__).resolve().parent.parent

SOURCE = Path("src/weighted_rnd/example.py")
TEST = Path("tests/test_example.py")


def rules(path: Path, source: str) -> list[str]:
    return [error.rule for error in lint_source(path, source)]


def test_repository_is_clean() -> None:
    """The package and its tests pass every custom rule."""
    errors = lint_paths([REPO_ROOT / "src", REPO_ROOT / "tests"])
    assert errors == [], "\n".join(str(e) for e in errors)


@pytest.mark.parametrize(
    "source",
    [
        "import random\n\ndef pick(xs):\n    return random.choice(xs)\n",
        "import random\n\nrandom.seed(4)\n",
        "from random import randrange\n",
    ],
)
def test_global_random_rejected_in_source(source: str) -> None:
    """Source code must draw from the generator it is given."""
    assert "global-random" in rules(SOURCE, source)


def test_random_generator_type_allowed_in_source() -> None:
    """Annotating with or constructing random.Random is fine."""
    source = (
        "import random\nfrom random import Random\n\n"
        "def draw(rng: random.Random) -> float:\n    return rng.random()\n\n"
        "FRESH = random.Random(0)\n"
    )
    assert rules(SOURCE, source) == []


def test_global_random_allowed_in_tests() -> None:
    """Tests may use the module-level generator."""
    source = "import random\n\ndef test_x() -> None:\n    random.random()\n"
    assert rules(TEST, source) == []


def test_print_rejected_in_source_only() -> None:
    """Source code logs instead of printing."""
    source = "def report(x):\n    print(x)\n"
    assert rules(SOURCE, source) == ["no-print"]
    assert rules(TEST, source) == []


def test_import_in_function_rejected_in_source_only() -> None:
    """Source code imports at module level."""
    source = "def load():\n    import math\n    return math\n"
    assert rules(SOURCE, source) == ["import-in-function"]
    assert rules(TEST, source) == []


def test_mutable_default_rejected() -> None:
    """Mutable defaults are rejected everywhere."""
    source = "def f(xs=[]):\n    return xs\n\nasync def g(d=dict()):\n    return d\n"
    assert rules(TEST, source) == ["mutable-default", "mutable-default"]


def test_class_based_tests_rejected() -> None:
    """Tests are module-level functions."""
    source = "class TestThing:\n    def test_it(self) -> None:\n        pass\n"
    assert rules(TEST, source) == ["no-class-tests"]


def test_todo_needs_issue_reference() -> None:
    """TODO comments must name an issue."""
    assert rules(SOURCE, "x = 1  #" + " TODO fix this\n") == ["todo-needs-issue"]
    assert rules(SOURCE, "x = 1  #" + " TODO: RND-12 fix this\n") == []


def test_syntax_errors_reported() -> None:
    """Unparseable files are reported rather than crashing the run."""
    assert rules(SOURCE, "def (:\n") == ["syntax-error"]
