"""Tests for the Ruby class generator."""

import pytest

from model_forge.codegen.core.generator import InvalidInputError
from model_forge.codegen.languages.ruby import generate_ruby_code, to_ruby_snake_case

from helpers import SAMPLE_USER


class TestRubyGenerator:
    def test_snake_case(self):
        assert to_ruby_snake_case("userName") == "user_name"
        assert to_ruby_snake_case("first-name") == "first_name"
        assert to_ruby_snake_case("zip code") == "zip_code"

    def test_class_with_accessors(self):
        code = generate_ruby_code({"id": 1, "userName": "x"}, "User")
        assert code == (
            "class User\n"
            "  attr_accessor :id, :user_name\n"
            "\n"
            "  def initialize(id, user_name)\n"
            "    @id = id\n"
            "    @user_name = user_name\n"
            "  end\n"
            "end\n"
        )

    def test_dependencies_first(self):
        code = generate_ruby_code(SAMPLE_USER, "User")
        assert code.index("class Post") < code.index("class Profile")
        assert code.index("class Profile") < code.index("class User")
        assert "end\n\nclass Profile" in code

    def test_default_values(self):
        code = generate_ruby_code({"id": 1}, "User", {"default_values": True})
        assert "  def initialize(id = nil)\n" in code
        assert "    @id = id || nil\n" in code

    def test_struct(self):
        code = generate_ruby_code({"id": 1, "isActive": True}, "User", {"use_struct": True})
        assert code == "User = Struct.new(:id, :is_active)\n"

    def test_original_names(self):
        code = generate_ruby_code({"userName": "x"}, "User", {"snake_case": False})
        assert "  attr_accessor :userName\n" in code

    def test_without_accessors_or_initialize(self):
        code = generate_ruby_code(
            {"id": 1}, "User", {"attr_accessor": False, "initialize": False}
        )
        assert code == "class User\nend\n"

    def test_rejects_empty(self):
        with pytest.raises(InvalidInputError, match="Invalid or empty JSON object"):
            generate_ruby_code({})
