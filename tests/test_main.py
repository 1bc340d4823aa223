import pathlib
import sys

import matplotlib

matplotlib.use("Agg")

# Ensure the repo root is on path so the launcher module can be imported
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import main as launcher  # noqa: E402


def test_profile_flag_defaults_to_cumulative() -> None:
    assert launcher._profile_options("1") == ("cumulative", 50)


def test_profile_sort_key_and_limit_are_parsed() -> None:
    assert launcher._profile_options("tottime:20") == ("tottime", 20)
    assert launcher._profile_options("NCALLS") == ("ncalls", 50)


def test_profile_invalid_values_fall_back() -> None:
    assert launcher._profile_options("bogus:-3") == ("cumulative", 50)
    assert launcher._profile_options("tottime:many") == ("tottime", 50)


def test_profiled_run_reports_on_stderr(capsys) -> None:
    assert launcher._run_with_cprofile(["--demo", "--no-show"], "tottime:5") == 0
    err = capsys.readouterr().err
    assert "function calls" in err
