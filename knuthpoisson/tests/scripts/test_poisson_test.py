"""Testing the command line harness of the Poisson generator"""

import pytest

from knuthpoisson.scripts import poisson_test


def parse_output(output):
    lines = output.strip().splitlines()
    ks = [int(line.split("=")[1]) for line in lines if line.startswith("k = ")]
    totals = {line.split("=")[0].strip(): line.split("=")[1].strip() for line in lines if not line.startswith("k = ")}
    return ks, totals


def test_run(capsys):
    assert poisson_test.main(["-n", "50", "-l", "0.5"]) == 0
    ks, totals = parse_output(capsys.readouterr().out)

    assert len(ks) == 50
    assert int(totals["total of all k values"]) == sum(ks)
    assert totals["mean of k"] == "{:f}".format(sum(ks) / 50)
    assert int(totals["max value of k"]) == max(ks)


def test_defaults(capsys):
    assert poisson_test.main([]) == 0
    ks, _ = parse_output(capsys.readouterr().out)
    assert len(ks) == 100


def test_run_is_reproducible(capsys):
    poisson_test.main(["-n", "20", "-seed", "11"])
    output1 = capsys.readouterr().out
    poisson_test.main(["-n", "20", "-seed", "11"])
    output2 = capsys.readouterr().out
    assert output1 == output2


def test_zero_intensity(capsys):
    assert poisson_test.main(["-n", "10", "-l", "0"]) == 0
    ks, totals = parse_output(capsys.readouterr().out)
    assert ks == [0] * 10
    assert totals["mean of k"] == "0.000000"


def test_no_numbers(capsys):
    assert poisson_test.main(["-n", "0"]) == 0
    ks, totals = parse_output(capsys.readouterr().out)
    assert ks == []
    assert totals["total of all k values"] == "0"
    assert totals["mean of k"] == "nan"
    assert totals["max value of k"] == "0"


@pytest.mark.parametrize("args", [["-x"], ["-n", "many"], ["-l"]])
def test_wrong_command_line_prints_usage(capsys, args):
    with pytest.raises(SystemExit) as error:
        poisson_test.main(args)
    assert error.value.code == 0
    captured = capsys.readouterr()
    assert "usage: poisson-test" in captured.out


def test_invalid_intensity_prints_usage(capsys):
    assert poisson_test.main(["-l", "-1"]) == 0
    assert "usage: poisson-test" in capsys.readouterr().out


def test_iteration_limit_exceeded(capsys):
    assert poisson_test.main(["-n", "5", "-l", "20", "-max_iterations", "2"]) == 1


def test_plot(capsys, monkeypatch):
    shown = []
    monkeypatch.setattr(poisson_test.plt, "show", lambda: shown.append(True))
    assert poisson_test.main(["-n", "30", "-plot"]) == 0
    assert shown == [True]
    poisson_test.plt.close("all")
