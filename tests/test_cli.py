import csv
import random

import pytest

from carlo.cli import main
from carlo.pi import estimate_pi_area, estimate_pi_integral


def _final_pi(output: str) -> float:
    line = output.strip().splitlines()[-1]
    prefix = "The final approximation to pi is: "
    assert line.startswith(prefix)
    return float(line[len(prefix):])


def test_pi_matches_library_estimate(capsys):
    assert main(["--seed", "7", "pi", "--samples", "500"]) == 0
    value = _final_pi(capsys.readouterr().out)
    assert value == estimate_pi_area(random.Random(7), 500)


def test_pi_integral_method(capsys):
    main(["--seed", "3", "pi", "--method", "integral", "--samples", "400"])
    value = _final_pi(capsys.readouterr().out)
    assert value == estimate_pi_integral(random.Random(3), 400)
    assert 0.0 <= value <= 4.0


def test_pi_same_seed_same_output(capsys):
    main(["--seed", "11", "pi", "--samples", "300"])
    first = capsys.readouterr().out
    main(["--seed", "11", "pi", "--samples", "300"])
    assert capsys.readouterr().out == first


def test_pi_rejects_non_positive_samples():
    with pytest.raises(SystemExit) as info:
        main(["pi", "--samples", "0"])
    assert info.value.code == 2


def test_rps_output_shape(capsys):
    assert main(["--seed", "5", "rps", "--throws", "12"]) == 0
    lines = capsys.readouterr().out.splitlines()
    wins_a = int(lines[0].split(":")[1])
    wins_b = int(lines[1].split(":")[1])
    assert lines[2] == "The history of wins was:"
    history = [int(line) for line in lines[3:]]
    assert len(history) == 12
    assert set(history) <= {-1, 0, 1}
    draws = history.count(0)
    assert wins_a == history.count(1) + draws
    assert wins_b == history.count(-1) + draws


def test_rps_rejects_negative_throws():
    with pytest.raises(SystemExit) as info:
        main(["rps", "--throws", "-1"])
    assert info.value.code == 2


def test_metropolis_writes_csv_and_reports(tmp_path, capsys):
    out = tmp_path / "samples.csv"
    assert main(
        ["--seed", "2", "metropolis", "--samples", "250", "--csv", str(out)]
    ) == 0
    lines = capsys.readouterr().out.splitlines()
    # reports at samples 0, 100 and 200
    assert len(lines) == 6
    assert lines[0].startswith("Current avg is: ")
    assert lines[1].startswith("Current var is: ")
    with open(out, newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert rows[0] == ["sample"]
    values = [float(row[0]) for row in rows[1:]]
    assert len(values) == 250
    first_avg = float(lines[0].split(": ")[1])
    assert first_avg == values[0]


def test_metropolis_start_is_far_and_chain_moves_down(tmp_path, capsys):
    out = tmp_path / "s.csv"
    main(
        [
            "--seed", "4", "metropolis", "--samples", "2000",
            "--start", "100", "--step", "1.0", "--csv", str(out),
        ]
    )
    with open(out, newline="", encoding="utf-8") as handle:
        values = [float(row[0]) for row in list(csv.reader(handle))[1:]]
    assert values[0] <= 101.0
    assert abs(values[-1]) < abs(values[0])


def test_metropolis_rejects_bad_step(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["metropolis", "--step", "0", "--csv", str(tmp_path / "x.csv")])
    assert info.value.code == 2


def test_unknown_command_exits():
    with pytest.raises(SystemExit) as info:
        main(["dance"])
    assert info.value.code == 2