from gpxkit.appconfig import DEFAULT_CONFIG
from gpxkit.commands.coords import run


def test_coords_table(sample_path, capsys):
    run(sample_path, DEFAULT_CONFIG)
    out = capsys.readouterr().out

    assert "Latitude" in out
    assert "37.7740000" in out
    assert "-122.4194210" in out
    assert len(out.strip().splitlines()) == 2 + 11


def test_coords_csv(sample_path, capsys):
    run(sample_path, DEFAULT_CONFIG, as_csv=True)
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "latitude,longitude"
    assert lines[1] == "37.774,-122.419421"
    assert len(lines) == 12
