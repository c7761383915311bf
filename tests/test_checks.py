"""Run the printable sanity checks under pytest."""

import checks


def test_all_checks_pass(capsys):
    checks.run_all_checks()
    out = capsys.readouterr().out
    assert out.count("OK:") == 6
