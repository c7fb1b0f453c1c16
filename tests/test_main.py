import json
import sys
import types

import pytest
import yaml

from argspect import Argument, CommandConfiguration, Flag, Option, ParsableCommand
from argspect.__main__ import get_parser, import_command, main


class Deploy(ParsableCommand):
    configuration = CommandConfiguration(abstract="Deploy a release.", aliases=["d"])

    force: bool = Flag("-f", "--force", help="Skip checks.")
    target: str = Argument()


class Tool(ParsableCommand):
    configuration = CommandConfiguration(super_command_name="ops", subcommands=[Deploy])

    region: str = Option(default="eu-west-1")


@pytest.fixture(autouse=True)
def fake_module(monkeypatch):
    """Expose the sample commands as an importable module."""
    module = types.ModuleType("fake_cli")
    module.Tool = Tool
    module.Deploy = Deploy
    module.not_a_command = 42
    monkeypatch.setitem(sys.modules, "fake_cli", module)
    monkeypatch.delenv("ARGSPECT_LOG_MODE", raising=False)
    yield module


def test_import_command_colon_and_dot_forms():
    assert import_command("fake_cli:Tool") is Tool
    assert import_command("fake_cli.Deploy") is Deploy


@pytest.mark.parametrize(
    "target", ["fake_cli:not_a_command", "fake_cli:Missing", "no_such_module:Tool", "Tool"]
)
def test_import_command_failures(target):
    with pytest.raises(SystemExit) as excinfo:
        import_command(target)
    assert excinfo.value.code == 1


def test_parser_defaults():
    args = get_parser().parse_args(["describe", "fake_cli:Tool"])
    assert args.command == "describe"
    assert args.path == []
    assert args.output_format == "tree"
    assert args.verbose is False


def test_describe_json(capsys):
    info = main(["--log-mode", "cli", "describe", "fake_cli:Tool", "--format", "json"])
    data = json.loads(capsys.readouterr().out)
    assert data == info.model_dump(mode="json")
    assert data["super_commands"] == ["ops"]
    assert data["subcommands"][0]["command_name"] == "deploy"


def test_describe_subcommand_yaml(capsys):
    main(["--log-mode", "cli", "describe", "fake_cli:Tool", "d", "--format", "yaml"])
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["command_name"] == "deploy"
    assert data["super_commands"] == ["ops", "tool"]
    assert [argument["id"] for argument in data["arguments"]] == [".force", ".target"]


def test_describe_tree(capsys):
    main(["--log-mode", "cli", "describe", "fake_cli:Tool"])
    out = capsys.readouterr().out
    assert "ops tool" in out
    assert "--region" in out
    assert "ops tool deploy" in out


def test_describe_unknown_subcommand():
    with pytest.raises(SystemExit) as excinfo:
        main(["--log-mode", "cli", "describe", "fake_cli:Tool", "nope"])
    assert excinfo.value.code == 1
