import pytest

from sca25519 import bench
from sca25519.ephemeral import ephemeral_scalarmult_base, unprotected_scalarmult_base
from sca25519.randomness import SeededWordSource
from sca25519.scalarmult import scalarmult_base


def test_check_scalarmult_passes():
    assert bench.check_scalarmult() is True


def test_unprotected_matches_expected_value():
    assert unprotected_scalarmult_base(bench.SCALAR) == bench.EXPECTED_R


def test_variants_agree_on_fixed_scalar():
    protected = scalarmult_base(bench.SCALAR, SeededWordSource(3))
    ephemeral = ephemeral_scalarmult_base(bench.SCALAR, SeededWordSource(4))
    assert protected == ephemeral == bench.EXPECTED_R


def test_measure_cost_calls_operation_runs_times():
    calls = []
    cost = bench.measure_cost(lambda: calls.append(1), 5)
    assert len(calls) == 5
    assert cost >= 0


@pytest.mark.parametrize("runs", [0, -1])
def test_measure_cost_rejects_non_positive_runs(runs):
    with pytest.raises(ValueError):
        bench.measure_cost(lambda: None, runs)


def test_main_measures_unprotected(capsys):
    assert bench.main(["scalarmult-unprotected", "--runs", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Program started."
    assert lines[-1] == "Done!"
    assert lines[1] == (
        "Measuring unprotected scalar multiplication, this can take few minutes."
    )
    assert lines[2].startswith("Unprotected scalar multiplication cost: ")
    assert int(lines[2].rsplit(" ", 1)[1]) >= 0


def test_main_runs_self_check(capsys):
    assert bench.main(["test"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "Test scalarmult: 0 (PASS)" in out


def test_main_rejects_unknown_operation():
    with pytest.raises(SystemExit):
        bench.main(["sign-static"])


def test_main_rejects_zero_runs():
    with pytest.raises(SystemExit):
        bench.main(["scalarmult-static", "--runs", "0"])