"""Tests for the Python dataclass generator."""

import ast

import pytest

from model_forge.codegen import generate_model_code, get_language_info
from model_forge.codegen.core.generator import InvalidInputError
from model_forge.codegen.languages.python import (
    PythonGenerator,
    create_frozen_generator,
    generate_python_code,
)

from helpers import SAMPLE_USER


def parse(code: str) -> ast.Module:
    """Generated code must always be valid Python."""
    return ast.parse(code)


def class_names(code: str):
    return [node.name for node in parse(code).body if isinstance(node, ast.ClassDef)]


class TestPythonGenerator:
    def test_valid_python(self):
        parse(generate_python_code(SAMPLE_USER, "User"))

    def test_classes_dependencies_first(self):
        code = generate_python_code(SAMPLE_USER, "User")
        assert class_names(code) == ["Post", "Profile", "User"]

    def test_imports(self):
        code = generate_python_code(SAMPLE_USER, "User")
        assert code.startswith(
            "from dataclasses import dataclass\n"
            "from datetime import datetime\n"
            "from typing import Any, Dict, List, Optional\n"
        )

    def test_dataclass_fields(self):
        code = generate_python_code(SAMPLE_USER, "User")
        assert "@dataclass()\nclass User:" in code
        assert "    id: Optional[int]\n" in code
        assert "    is_active: Optional[bool]\n" in code
        assert "    created_at: Optional[datetime]\n" in code
        assert "    tags: Optional[List[str]]\n" in code
        assert "    profile: Optional[Profile]\n" in code
        assert "    posts: Optional[List[Post]]\n" in code

    def test_from_dict_and_to_dict(self):
        code = generate_python_code(SAMPLE_USER, "User")
        assert 'def from_dict(cls, data: Dict[str, Any]) -> "User":' in code
        assert 'is_active=data.get("isActive"),' in code
        assert (
            'profile=Profile.from_dict(data["profile"]) '
            'if data.get("profile") is not None else None,'
        ) in code
        assert '"isActive": self.is_active,' in code
        assert '"createdAt": self.created_at.isoformat() if self.created_at is not None else None,' in code

    def test_generated_code_round_trips(self):
        code = generate_python_code({"userName": "bob", "meta": {"count": 2}}, "Account")
        namespace = {}
        exec(compile(code, "<generated>", "exec"), namespace)
        account = namespace["Account"].from_dict({"userName": "bob", "meta": {"count": 2}})
        assert account.user_name == "bob"
        assert account.meta.count == 2
        assert account.to_dict() == {"userName": "bob", "meta": {"count": 2}}

    def test_frozen_uses_tuples(self):
        code = create_frozen_generator().generate(SAMPLE_USER, "User")
        parse(code)
        assert "@dataclass(frozen=True, unsafe_hash=True)" in code
        assert "    tags: Optional[Tuple[str]]\n" in code
        assert "    posts: Optional[Tuple[Post]]\n" in code
        assert "from typing import Any, Dict, Optional, Tuple" in code

    def test_dataclass_arguments(self):
        code = generate_python_code(
            {"a": 1},
            "Root",
            {"slots": True, "include_repr": False, "include_eq": False},
        )
        assert "@dataclass(slots=True, repr=False, eq=False)" in code

    def test_default_values(self):
        code = generate_python_code({"a": 1}, "Root", {"default_values": True})
        assert "    a: Optional[int] = None\n" in code

    def test_plain_class(self):
        code = generate_python_code({"a": 1}, "Root", {"dataclass": False})
        parse(code)
        assert "from dataclasses" not in code
        assert "        a: Optional[int] = None," in code
        assert "        self.a = a" in code

    def test_without_type_hints(self):
        code = generate_python_code(
            {"a": 1}, "Root", {"type_hints": False, "from_dict": False, "to_dict": False}
        )
        parse(code)
        assert "        a=None," in code
        assert "Optional" not in code

    def test_keep_original_names(self):
        code = generate_python_code(
            {"userName": "x", "class": 1, "2fa": True},
            "Root",
            {"camel_case_to_snake_case": False},
        )
        parse(code)
        assert "    userName: Optional[str]\n" in code
        assert "    class_: Optional[int]\n" in code
        assert "    _2fa: Optional[bool]\n" in code

    def test_flat_dicts(self):
        code = generate_python_code(SAMPLE_USER, "User", {"nested_classes": False})
        assert class_names(code) == ["User"]
        assert "    profile: Optional[Dict[str, Any]]\n" in code

    def test_sample_instance(self):
        code = generate_python_code({"a": 1, "b": "x"}, "Root", {"sample_instance": True})
        parse(code)
        assert "SAMPLE_DATA = {'a': 1, 'b': 'x'}" in code
        assert 'if __name__ == "__main__":' in code

    def test_empty_object_class(self):
        code = generate_python_code({"meta": {}}, "Root")
        parse(code)
        assert "class Meta:\n    pass" in code

    def test_rejects_empty(self):
        with pytest.raises(InvalidInputError):
            PythonGenerator().generate({})


class TestPythonOptions:
    def test_helper_switches_keep_options_api(self):
        options = PythonGenerator({"fromDict": False, "to_dict": False}).options
        assert options.include_from_dict is False
        assert options.include_to_dict is False
        assert options.to_dict()["include_from_dict"] is False

    def test_without_helpers(self):
        code = generate_python_code({"id": 1}, "User", {"from_dict": False, "toDict": False})
        parse(code)
        assert "def from_dict" not in code
        assert "def to_dict" not in code

    def test_language_info(self):
        info = get_language_info("python")
        assert info["options"]["include_from_dict"] is True
        assert "class User:" in generate_model_code({"id": 1, "name": "x"}, "python", "User")
