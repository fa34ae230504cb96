"""
Unit tests for the terminal timeline renderer.
"""

from scripts.render_timeline import main


def test_render_timeline_prints_headline_and_year_row(capsys):
    assert main(["--start", "1975-01-01", "--end", "1975-12-31"]) == 0

    out = capsys.readouterr().out
    assert "27 downtime days over 364 days" in out
    assert "1975  .........##." in out
    assert not any(line.startswith("[") for line in out.splitlines())


def test_render_timeline_pads_partial_first_year(capsys):
    assert main(["--start", "2016-06-15", "--end", "2017-01-31"]) == 0

    out = capsys.readouterr().out
    assert "2016       ..!...." in out
    assert "2017  ." in out


def test_render_timeline_lists_incidents_newest_first(capsys):
    assert main(["--start", "1975-01-01", "--end", "1975-12-31", "--incidents"]) == 0

    lines = capsys.readouterr().out.splitlines()
    listed = [line for line in lines if line.startswith("[")]
    assert len(listed) == 4
    assert "Medicare Outage" in listed[0]
    assert "1975 Australian Constitutional Crisis (constitutional-crisis, 27d)" in listed[-1]


def test_render_timeline_rejects_reversed_window(capsys):
    assert main(["--start", "2000-01-02", "--end", "2000-01-01"]) == 1
    assert "Error:" in capsys.readouterr().err
