import pytest

from silenced.args import ArgError, ArgParser


def make_parser():
    parser = ArgParser(helptext="usage text", version="1.2.3")
    parser.flag("quiet q")
    parser.option("asset-dir assets a", "default-dir")
    parser.option("framerate f", "30")
    return parser


def test_flag_aliases_share_count():
    parser = make_parser()
    parser.parse(["--quiet", "-q", "-qq"])
    assert parser.count("quiet") == 4
    assert parser.count("q") == 4
    assert parser.found("quiet")


def test_unset_flag_and_unknown_name():
    parser = make_parser()
    parser.parse([])
    assert not parser.found("quiet")
    assert parser.count("quiet") == 0
    assert parser.count("nothing") == 0
    assert not parser.found("nothing")


def test_option_fallback_when_absent():
    parser = make_parser()
    parser.parse(["pos"])
    assert parser.value("framerate") == "30"
    assert parser.value("f") == "30"
    assert parser.values("framerate") == []
    assert not parser.found("framerate")


def test_option_values_collected_in_order():
    parser = make_parser()
    parser.parse(["--framerate", "60", "-f", "120", "--asset-dir=one", "-a=two"])
    assert parser.values("framerate") == ["60", "120"]
    assert parser.value("framerate") == "120"
    assert parser.values("assets") == ["one", "two"]
    assert parser.value("asset-dir") == "two"
    assert parser.count("a") == 2


def test_value_of_unknown_or_flag_is_empty():
    parser = make_parser()
    parser.parse(["-q"])
    assert parser.value("quiet") == ""
    assert parser.values("missing") == []


def test_combined_short_flags_and_option():
    parser = make_parser()
    parser.parse(["-qf", "45", "rest"])
    assert parser.count("q") == 1
    assert parser.value("f") == "45"
    assert parser.args == ["rest"]


def test_dash_and_negative_numbers_are_positional():
    parser = make_parser()
    parser.parse(["-", "-5", "x"])
    assert parser.args == ["-", "-5", "x"]


def test_double_dash_stops_option_parsing():
    parser = make_parser()
    parser.parse(["a", "--", "--quiet", "-f"])
    assert parser.args == ["a", "--quiet", "-f"]
    assert not parser.found("quiet")


@pytest.mark.parametrize(
    "argv",
    [
        ["--framerate"],
        ["-f"],
        ["-qf"],
        ["--unknown"],
        ["-z"],
        ["-qz"],
        ["--framerate="],
        ["--nope=3"],
        ["-z=3"],
    ],
)
def test_errors_raise(argv):
    parser = make_parser()
    with pytest.raises(ArgError):
        parser.parse(argv)


def test_error_message_names_option():
    parser = make_parser()
    with pytest.raises(ArgError, match="--framerate"):
        parser.parse(["--framerate"])


def test_long_help_prints_and_exits(capsys):
    parser = make_parser()
    with pytest.raises(SystemExit) as exc:
        parser.parse(["--help"])
    assert exc.value.code == 0
    assert capsys.readouterr().out == "usage text\n"


def test_short_version_prints_and_exits(capsys):
    parser = make_parser()
    with pytest.raises(SystemExit) as exc:
        parser.parse(["-v"])
    assert exc.value.code == 0
    assert capsys.readouterr().out == "1.2.3\n"


def test_help_without_helptext_is_an_error():
    parser = ArgParser()
    with pytest.raises(ArgError):
        parser.parse(["--help"])


def test_command_with_callback_and_aliases():
    calls = []
    parser = ArgParser()
    parser.flag("verbose")
    sub = parser.command("build b", "build help", lambda name, p: calls.append((name, p)))
    sub.flag("fast")
    parser.option("out", "")
    parser.parse(["--verbose", "b", "--fast", "target"])
    assert parser.command_found()
    assert parser.command_name() == "b"
    assert parser.command_parser() is sub
    assert sub.found("fast")
    assert sub.args == ["target"]
    assert parser.args == []
    assert calls == [("b", sub)]


def test_command_only_recognised_first():
    parser = ArgParser()
    parser.command("run")
    parser.parse(["first", "run"])
    assert not parser.command_found()
    assert parser.args == ["first", "run"]


def test_command_parser_without_command_raises():
    parser = ArgParser()
    parser.parse([])
    with pytest.raises(ArgError):
        parser.command_parser()


def test_help_command_prints_command_help(capsys):
    parser = ArgParser()
    parser.command("run", "run help")
    with pytest.raises(SystemExit) as exc:
        parser.parse(["help", "run"])
    assert exc.value.code == 0
    assert capsys.readouterr().out == "run help\n"


@pytest.mark.parametrize("argv", [["help"], ["help", "missing"]])
def test_help_command_errors(argv):
    parser = ArgParser()
    parser.command("run", "run help")
    with pytest.raises(ArgError):
        parser.parse(argv)


def test_help_is_positional_without_commands():
    parser = ArgParser()
    parser.parse(["help"])
    assert parser.args == ["help"]


def test_dump_empty_parser():
    parser = ArgParser()
    parser.parse([])
    text = parser.dump()
    assert text.count("[none]") == 4
    assert text.startswith("Options:\n")


def test_dump_contents():
    parser = ArgParser()
    parser.option("out o", "fb")
    parser.flag("x")
    parser.command("go")
    parser.parse(["-o", "v1", "--out", "v2", "-x", "go", "arg"])
    text = parser.dump()
    assert "  o: (fb) [v1, v2]\n" in text
    assert "  out: (fb) [v1, v2]\n" in text
    assert "  x: 1\n" in text
    assert text.endswith("Command:\n  go\n")
    assert text.index("  o:") < text.index("  out:")