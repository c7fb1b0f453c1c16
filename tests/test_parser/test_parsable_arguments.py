from typing import ClassVar

import pytest

from argspect.exceptions import ArgumentDeclarationError
from argspect.parser import (
    Argument,
    FieldShape,
    Flag,
    Option,
    OptionGroup,
    ParsableArguments,
    Value,
)


class Shared(ParsableArguments):
    verbose: bool = Flag("-v")


class Build(ParsableArguments):
    shared: Shared = OptionGroup(Shared)
    _target: str = Argument()
    jobs = Option(type=int, default=1)
    cache: dict = {}
    notes: str
    retries: int = Value(default=3)
    registry: ClassVar[dict] = {}

    def helper(self):
        return None


class Release(Build):
    jobs: int = Option(type=int, default=4)
    channel: str = Option(default="stable")


def test_fields_in_declaration_order():
    assert [field.name for field in Build.argument_fields()] == [
        "shared",
        "_target",
        "jobs",
        "cache",
        "retries",
        "notes",
    ]


def test_field_shapes():
    shapes = {field.name: field.shape for field in Build.argument_fields()}
    assert shapes["shared"] is FieldShape.GROUP
    assert shapes["_target"] is FieldShape.LEAF
    assert shapes["jobs"] is FieldShape.LEAF
    assert shapes["retries"] is FieldShape.LEAF
    assert shapes["cache"] is FieldShape.OPAQUE
    assert shapes["notes"] is FieldShape.OPAQUE


def test_group_field_points_at_nested_type():
    shared = Build.argument_fields()[0]
    assert shared.group_type is Shared
    assert shared.provider is None


def test_storage_prefix_is_stripped():
    fields = {field.name: field for field in Build.argument_fields()}
    assert fields["_target"].coding_key == "target"
    assert fields["jobs"].coding_key == "jobs"


def test_value_type_from_annotation_or_declaration():
    fields = {field.name: field for field in Build.argument_fields()}
    assert fields["_target"].value_type is str
    assert fields["jobs"].value_type is int
    assert fields["cache"].value_type is dict


def test_methods_and_class_vars_are_not_fields():
    names = {field.name for field in Build.argument_fields()}
    assert "helper" not in names
    assert "registry" not in names


def test_inherited_fields_keep_position():
    names = [field.name for field in Release.argument_fields()]
    assert names == ["shared", "_target", "jobs", "cache", "retries", "notes", "channel"]
    jobs = Release.argument_fields()[2]
    assert jobs.provider is Release.__dict__["jobs"]


def test_parent_registry_is_untouched():
    assert "channel" not in {field.name for field in Build.argument_fields()}


def test_option_group_must_wrap_parsable_arguments():
    with pytest.raises(ArgumentDeclarationError):

        class Broken(ParsableArguments):
            group = OptionGroup(dict)


def test_declaration_knows_its_attribute_name():
    assert Shared.__dict__["verbose"].name == "verbose"


class Quiet(Shared):
    verbose = None


class Pinned(Shared):
    verbose: ClassVar[Flag] = Flag("-v")
    mode: ClassVar[Flag] = Flag()


def test_plain_value_shadows_inherited_argument():
    fields = {field.name: field for field in Quiet.argument_fields()}
    assert fields["verbose"].shape is FieldShape.OPAQUE
    assert fields["verbose"].provider is None
    assert Shared.argument_fields()[0].shape is FieldShape.LEAF


def test_class_var_declarations_are_not_fields():
    assert Pinned.argument_fields() == ()
