import logging

from latlng.cli import main


def test_cli_prints_distance_and_azimuth(capsys):
    rc = main(["--to", "139.539242", "35.686991", "--from", "135.545261", "34.598366"])
    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("distance_m=")
    assert abs(float(out[0].split("=")[1]) - 453495.8) < 1.0
    assert abs(float(out[1].split("=")[1]) - 169.0) < 0.5


def test_cli_single_and_clamp(capsys):
    main(["--to", "0", "0", "--from", "0", "0", "--single", "--clamp"])
    out = capsys.readouterr().out.splitlines()
    assert float(out[0].split("=")[1]) == 0.0


def test_cli_verbose_sets_debug_level(monkeypatch, capsys):
    levels = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: levels.append(kw["level"]))
    main(["--to", "1", "2", "--from", "3", "4", "-v"])
    main(["--to", "1", "2", "--from", "3", "4"])
    assert levels == [logging.DEBUG, logging.WARNING]
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 4
    assert out[0] == out[2]
