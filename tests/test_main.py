import pytest

from silenced.main import DEFAULT_ASSET_DIR, build_parser, main


def test_defaults():
    parser = build_parser()
    parser.parse([])
    assert parser.value("asset-dir") == "/workspace/silenced-engine/SilencedAssets/"
    assert parser.value("framerate") == "30"


def test_asset_dir_aliases_share_value():
    parser = build_parser()
    parser.parse(["--assets", "/tmp/a"])
    assert parser.value("asset-dir") == "/tmp/a"
    assert parser.value("assetdir") == "/tmp/a"


def test_framerate_equals_form():
    parser = build_parser()
    parser.parse(["--framerate=60"])
    assert parser.value("framerate") == "60"
    assert parser.count("framerate") == 1


def test_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert capsys.readouterr().out.strip() == "0.1"


def test_help(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert capsys.readouterr().out.strip() == build_parser().helptext


def test_unknown_option_fails(capsys):
    assert main(["--bogus"]) == 1
    assert "--bogus is not a recognised flag or option." in capsys.readouterr().err


def test_bad_framerate_fails(capsys):
    assert main(["--framerate", "fast"]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_missing_asset_dir_fails(tmp_path, capsys):
    assert main(["--asset-dir", str(tmp_path / "missing")]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_default_asset_dir_constant_matches_parser():
    parser = build_parser()
    parser.parse(["--framerate", "10"])
    assert parser.value("assets") == DEFAULT_ASSET_DIR