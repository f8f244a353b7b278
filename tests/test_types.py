"""Tests for cppmod.core.types."""

from __future__ import annotations

from pathlib import PurePath

import pytest

from cppmod.core.errors import ModuleNameError
from cppmod.core.types import (
    TEMPLATE_FILE_NAMES,
    TemplateRole,
    check_module_name,
    validate_module_name,
)


class TestTemplateRole:
    def test_five_roles(self) -> None:
        assert len(TemplateRole) == 5
        assert len(TEMPLATE_FILE_NAMES) == 5

    def test_template_names(self) -> None:
        assert TEMPLATE_FILE_NAMES == {
            "template.header.hpp",
            "template.src.cpp",
            "template.test.cpp",
            "template.CMakeLists.txt",
            "template.test.CMakeLists.txt",
        }

    def test_output_paths(self) -> None:
        paths = {role: role.output_path("foo") for role in TemplateRole}
        assert paths == {
            TemplateRole.HEADER: PurePath("include/foo/foo.hpp"),
            TemplateRole.SOURCE: PurePath("src/foo.cpp"),
            TemplateRole.TEST_SOURCE: PurePath("tests/test_foo.cpp"),
            TemplateRole.BUILD_FILE: PurePath("CMakeLists.txt"),
            TemplateRole.TEST_BUILD_FILE: PurePath("tests/CMakeLists.txt"),
        }

    @pytest.mark.parametrize("role", list(TemplateRole))
    def test_from_template_name_round_trips(self, role: TemplateRole) -> None:
        assert TemplateRole.from_template_name(role.template_name) is role

    def test_from_template_name_unknown(self) -> None:
        assert TemplateRole.from_template_name("README.md") is None


class TestModuleName:
    @pytest.mark.parametrize("name", ["a", "sensor_driver", "Net-Stack2", "X_1-y"])
    def test_valid(self, name: str) -> None:
        assert validate_module_name(name) is None
        assert check_module_name(name) == name

    def test_empty(self) -> None:
        assert validate_module_name("") == "Module name cannot be empty!"

    @pytest.mark.parametrize("name", ["1abc", "_abc", "-abc", "a b", "a/b", "a.b", "ä"])
    def test_invalid(self, name: str) -> None:
        message = validate_module_name(name)
        assert message is not None
        assert "must start with a letter" in message

    def test_check_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            check_module_name("9lives")
        with pytest.raises(ModuleNameError):
            check_module_name("")
