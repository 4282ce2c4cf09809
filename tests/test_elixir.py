"""Tests for the Elixir struct generator."""

from model_forge.codegen.languages.elixir import generate_elixir_code

from helpers import SAMPLE_USER


class TestElixirGenerator:
    def test_module(self):
        code = generate_elixir_code({"userName": "x", "age": 3}, "User")
        assert code == (
            "defmodule User do\n"
            "  @type user_name :: String.t()\n"
            "  @type age :: integer\n"
            "\n"
            "  defstruct [\n"
            "    user_name: nil,\n"
            "    age: nil\n"
            "  ]\n"
            "end"
        )

    def test_nested_modules(self):
        code = generate_elixir_code(SAMPLE_USER, "User")
        assert code.startswith("defmodule UserPost do\n")
        assert "end\n\ndefmodule UserProfile do\n" in code
        assert "  @type profile :: map\n" in code
        assert "  @type tags :: list\n" in code
        assert "  @type score :: float\n" in code

    def test_default_comments(self):
        code = generate_elixir_code({"name": "x", "n": 3}, "Row", {"default_values": True})
        assert '    name: nil, # default: "x"\n' in code
        assert "    n: nil # default: 3\n" in code

    def test_without_types(self):
        code = generate_elixir_code({"id": 1}, "Row", {"include_types": False})
        assert code == "defmodule Row do\n  defstruct [\n    id: nil\n  ]\nend"

    def test_without_struct(self):
        code = generate_elixir_code({"id": 1}, "Row", {"include_struct": False})
        assert code == "defmodule Row do\n  @type id :: integer\nend"

    def test_camel_case_names(self):
        code = generate_elixir_code({"user_name": None}, "Row", {"use_snake_case": False})
        assert "  @type userName :: any\n" in code
        assert "    userName: nil\n" in code

    def test_empty_object(self):
        assert generate_elixir_code({}) == "defmodule DataModel do\nend"
