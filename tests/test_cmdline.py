from .fixtures import runner
from qname.cmdline import main


def test_valid_name(runner):
    result = runner.invoke(main, ["prefix:name"])
    assert result.exit_code == 0
    assert " name: prefix:name" in result.output
    assert "  - prefix: prefix" in result.output
    assert "  - localname: name" in result.output


def test_simple_name(runner):
    result = runner.invoke(main, ["justAname"])
    assert result.exit_code == 0
    assert "  - localname: justAname" in result.output
    assert "prefix" not in result.output


def test_invalid_name(runner):
    result = runner.invoke(main, ["prefix:name", "xmlfoo:bar"])
    assert result.exit_code == 1
    assert "  - localname: name" in result.output
    assert '  - error: Prefix cannot start with "xml"' in result.output


def test_quiet(runner):
    result = runner.invoke(main, ["-q", "-l", "ERROR", "a:b:c"])
    assert result.exit_code == 1
    assert result.output == ""

    result = runner.invoke(main, ["--quiet", "-l", "ERROR", "a:b"])
    assert result.exit_code == 0
    assert result.output == ""


def test_missing_names(runner):
    result = runner.invoke(main, [])
    assert result.exit_code == 2


def test_help(runner):
    result = runner.invoke(main, ["-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output
