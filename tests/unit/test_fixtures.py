"""
Fixture tests: parse every tests/fixtures/*.bl file and compare the rendered
output with its .expected.txt sibling.
"""

import sys
from pathlib import Path

import pytest

# Make the fixture runner script importable
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "scripts"))

from run_fixtures import FixtureRunner, normalize_output, render_result  # noqa: E402
from bearlang import Compiler  # noqa: E402

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


@pytest.mark.parametrize(
    "fixture", sorted(FIXTURES_DIR.glob("*.bl")), ids=lambda p: p.stem
)
def test_fixture(fixture):
    expected = fixture.with_name(f"{fixture.stem}.expected.txt").read_text(encoding="utf-8")
    actual = render_result(Compiler(), fixture)
    assert normalize_output(actual) == normalize_output(expected)


def test_runner_passes_all_fixtures(fixtures_dir, capsys):
    runner = FixtureRunner(fixtures_dir)
    assert runner.run_all() == 0
    assert runner.suite.failed_count == 0
    assert runner.suite.passed_count == len(list(fixtures_dir.glob("*.bl")))


def test_runner_reports_mismatch(temp_dir, capsys):
    (temp_dir / "one.bl").write_text("a + b;")
    (temp_dir / "one.expected.txt").write_text("(b + a)\n")
    runner = FixtureRunner(temp_dir)
    assert runner.run_all() == 1
    assert runner.suite.results[0].error_message == "Output mismatch"


def test_runner_missing_directory(temp_dir):
    assert FixtureRunner(temp_dir / "absent").run_all() == 1
