import pytest

from codedemos.series import closed_form, iterative, main


@pytest.mark.parametrize("n", range(0, 60))
def test_both_methods_agree(n):
    assert closed_form(n) == iterative(n)


def test_zero_terms():
    assert closed_form(0) == 0
    assert iterative(0) == 0


def test_iterative_negative_runs_no_terms():
    assert iterative(-3) == 0


def test_consecutive_difference_is_n():
    for n in range(1, 30):
        assert closed_form(n) - closed_form(n - 1) == n


def test_main_prints_both_results(capsys):
    assert main(["--repeat", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(closed_form(1000)), str(iterative(1000))]
    assert lines[0] == lines[1]


def test_main_with_zero_repeats_prints_zero(capsys):
    main(["--repeat", "0", "--n", "10"])
    assert capsys.readouterr().out.splitlines() == ["0", "0"]