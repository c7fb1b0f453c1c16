from typing import Optional

import pytest

from argspect.exceptions import ArgumentDeclarationError
from argspect.parser import (
    Argument,
    ArgumentDefinition,
    ArgumentHelp,
    ArgumentSet,
    DefinitionKind,
    Flag,
    FlagInversion,
    InputKey,
    Name,
    NameStyle,
    Option,
    ParsingStrategy,
    UpdateArity,
    Value,
)


def long(value: str) -> Name:
    return Name(NameStyle.LONG, value)


def test_flag_default_name_from_key():
    argument_set = Flag().argument_set(InputKey("dry_run"))
    assert len(argument_set) == 1
    definition = argument_set.first()
    assert definition.kind is DefinitionKind.NAMED
    assert definition.update is UpdateArity.NULLARY
    assert definition.names == (long("dry-run"),)
    assert definition.simulate_initial().value is False


def test_flag_explicit_names_and_help():
    definition = Flag("-v", "--verbose", help="Print more.").argument_set(
        InputKey("verbose")
    ).first()
    assert definition.names == (Name(NameStyle.SHORT, "v"), long("verbose"))
    assert definition.preferred_name == long("verbose")
    assert definition.help.abstract == "Print more."


def test_flag_default_value():
    definition = Flag(default=True).argument_set(InputKey("color")).first()
    assert definition.simulate_initial().value is True


def test_counting_flag():
    assert Flag(counting=True).argument_set(InputKey("v")).first().simulate_initial().value == 0
    counted = Flag(counting=True, default=2).argument_set(InputKey("v")).first()
    assert counted.simulate_initial().value == 2
    assert Flag(counting=True).value_type() is int
    assert Flag().value_type() is bool


def test_prefixed_no_inversion():
    argument_set = Flag("--color", inversion="prefixed_no").argument_set(InputKey("color"))
    enable, disable = argument_set
    assert enable.names == (long("color"),)
    assert disable.names == (long("no-color"),)
    assert argument_set.names() == [long("color"), long("no-color")]


def test_inverted_flag_without_default_has_no_initial_value():
    argument_set = Flag(inversion=FlagInversion.PREFIXED_NO).argument_set(InputKey("color"))
    assert argument_set.first().simulate_initial() is None


def test_inverted_flag_with_default():
    argument_set = Flag(inversion="prefixed_no", default=False).argument_set(
        InputKey("color")
    )
    assert argument_set.first().simulate_initial().value is False


def test_enable_disable_inversion():
    enable, disable = Flag(
        "-c", "--color", inversion=FlagInversion.PREFIXED_ENABLE_DISABLE
    ).argument_set(InputKey("color"))
    assert enable.names == (long("enable-color"), Name(NameStyle.SHORT, "c"))
    assert disable.names == (long("disable-color"),)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"counting": True, "inversion": "prefixed_no"},
        {"counting": True, "default": "many"},
        {"inversion": "sideways"},
    ],
)
def test_invalid_flags(kwargs):
    with pytest.raises(ArgumentDeclarationError):
        Flag(**kwargs)


def test_inverted_short_only_flag_rejected():
    with pytest.raises(ArgumentDeclarationError):
        Flag("-c", inversion="prefixed_no")


def test_duplicate_flag_names_rejected():
    with pytest.raises(ArgumentDeclarationError):
        Flag("-v", "-v")


def test_option_defaults():
    definition = Option().argument_set(InputKey("output_dir")).first()
    assert definition.kind is DefinitionKind.NAMED
    assert definition.update is UpdateArity.UNARY
    assert definition.names == (long("output-dir"),)
    assert definition.value_name == "output-dir"
    assert definition.parsing_strategy is ParsingStrategy.DEFAULT


def test_option_value_name_sources():
    explicit = Option(value_name="dir").argument_set(InputKey("out")).first()
    assert explicit.value_name == "dir"
    from_help = Option(help=ArgumentHelp("Output.", value_name="path")).argument_set(
        InputKey("out")
    ).first()
    assert from_help.value_name == "path"


def test_option_string_default_is_coerced():
    definition = Option(type=int, default="8").argument_set(InputKey("jobs")).first()
    assert definition.simulate_initial().value == 8


def test_option_bad_default_has_no_initial_value():
    definition = Option(type=int, default="eight").argument_set(InputKey("jobs")).first()
    assert definition.simulate_initial() is None


def test_required_option_has_no_initial_value():
    definition = Option().argument_set(InputKey("name")).first()
    assert definition.simulate_initial() is None


def test_optional_option_initial_value_is_none():
    parsed = Option(optional=True).argument_set(InputKey("name")).first().simulate_initial()
    assert parsed is not None
    assert parsed.value is None
    assert parsed.origin.is_default


def test_multiple_option():
    empty = Option(multiple=True).argument_set(InputKey("tag")).first()
    assert empty.simulate_initial().value == []
    numbers = Option(type=int, multiple=True, default=["1", 2]).argument_set(
        InputKey("n")
    ).first()
    assert numbers.simulate_initial().value == [1, 2]


def test_value_types():
    assert Option(type=int).value_type() is int
    assert Option(type=int, multiple=True).value_type() == list[int]
    assert Option(type=int, optional=True).value_type() == Optional[int]


def test_option_strategies():
    definition = Option(
        multiple=True, parsing=ParsingStrategy.UP_TO_NEXT_OPTION
    ).argument_set(InputKey("files")).first()
    assert definition.parsing_strategy is ParsingStrategy.UP_TO_NEXT_OPTION
    scanning = Option(parsing="scan").argument_set(InputKey("x")).first()
    assert scanning.parsing_strategy is ParsingStrategy.SCANNING_FOR_VALUE


@pytest.mark.parametrize(
    "kwargs",
    [
        {"parsing": ParsingStrategy.POST_TERMINATOR, "multiple": True},
        {"parsing": ParsingStrategy.UP_TO_NEXT_OPTION},
        {"parsing": "sideways"},
        {"type": lambda value: value},
    ],
)
def test_invalid_options(kwargs):
    with pytest.raises(ArgumentDeclarationError):
        Option(**kwargs)


def test_positional_argument():
    definition = Argument(help="Where to look.").argument_set(InputKey("path")).first()
    assert definition.kind is DefinitionKind.POSITIONAL
    assert definition.is_positional
    assert definition.names == ()
    assert definition.preferred_name is None
    assert definition.value_name == "path"
    assert definition.simulate_initial() is None


def test_positional_strategies():
    definition = Argument(
        multiple=True, parsing=ParsingStrategy.ALL_UNRECOGNIZED
    ).argument_set(InputKey("rest")).first()
    assert definition.parsing_strategy is ParsingStrategy.ALL_UNRECOGNIZED
    with pytest.raises(ArgumentDeclarationError):
        Argument(parsing=ParsingStrategy.SCANNING_FOR_VALUE)


def test_value_placeholder():
    definition = Value(default=3).argument_set(InputKey("retries")).first()
    assert definition.kind is DefinitionKind.DEFAULT
    assert definition.simulate_initial().value == 3
    assert Value(default=3).value_type() is int


def test_named_definition_requires_a_name():
    with pytest.raises(ArgumentDeclarationError):
        ArgumentDefinition(
            key=InputKey("x"), kind=DefinitionKind.NAMED, update=UpdateArity.NULLARY
        )


def test_positional_definition_rejects_names():
    with pytest.raises(ArgumentDeclarationError):
        ArgumentDefinition(
            key=InputKey("x"),
            kind=DefinitionKind.POSITIONAL,
            update=UpdateArity.UNARY,
            names=(long("x"),),
        )


def test_failing_initial_is_contained():
    def initial(origin, values):
        raise RuntimeError("boom")

    definition = ArgumentDefinition(
        key=InputKey("x"),
        kind=DefinitionKind.POSITIONAL,
        update=UpdateArity.UNARY,
        initial=initial,
    )
    assert definition.simulate_initial() is None


def test_argument_set_names_are_unique():
    key = InputKey("x")
    argument_set = ArgumentSet(
        (
            ArgumentDefinition(key, DefinitionKind.NAMED, UpdateArity.NULLARY, (long("x"),)),
            ArgumentDefinition(
                key, DefinitionKind.NAMED, UpdateArity.NULLARY, (long("x"), long("y"))
            ),
        )
    )
    assert argument_set.names() == [long("x"), long("y")]
    assert not ArgumentSet()
    assert ArgumentSet().first() is None
