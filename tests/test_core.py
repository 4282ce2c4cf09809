"""Tests for the base generator, options handling and the registry."""

import json

import pytest

from model_forge.codegen import (
    ConfigError,
    GeneratorError,
    InvalidInputError,
    RegistryError,
    generate_code,
    generate_from_json,
    generate_model_code,
    get_generator,
    get_language_info,
    list_supported_languages,
)
from model_forge.codegen.core.config import (
    ConfigManager,
    camel_to_snake_key,
    parse_option_overrides,
)
from model_forge.codegen.core.templates import TemplateError, create_template_engine
from model_forge.codegen.languages.go import GoGenerator, GoOptions
from model_forge.codegen.languages.kotlin import KotlinOptions
from model_forge.codegen.languages.javascript import JavaScriptOptions
from model_forge.codegen.registry import GeneratorRegistry

ALL_LANGUAGES = [
    "cpp",
    "csharp",
    "dart",
    "elixir",
    "erlang",
    "go",
    "java",
    "javascript",
    "kotlin",
    "objc",
    "php",
    "python",
    "r",
    "ruby",
    "rust",
    "scala",
    "sql",
    "swift",
    "typescript",
    "vbnet",
]


class TestOptions:
    """Option dataclasses built from dictionaries."""

    def test_camel_case_keys(self):
        assert camel_to_snake_key("useArrayOfPointers") == "use_array_of_pointers"
        assert camel_to_snake_key("package_name") == "package_name"

        options = GoOptions.from_dict({"usePointers": False, "packageName": "models"})
        assert options.use_pointers is False
        assert options.package_name == "models"

    def test_missing_keys_keep_defaults(self):
        options = GoOptions.from_dict({"package_name": "x"})
        assert options.use_pointers is True
        assert options.use_array_of_pointers is False

    def test_unknown_key_rejected(self):
        with pytest.raises(ConfigError, match="Unknown option 'nope'"):
            GoOptions.from_dict({"nope": True})

    def test_explicit_aliases(self):
        options = JavaScriptOptions.from_dict({"includeJSDoc": False})
        assert options.include_js_doc is False

    def test_invalid_enum_value(self):
        with pytest.raises(ConfigError):
            KotlinOptions(serialization_library="jackson")

    def test_parse_overrides(self):
        overrides = parse_option_overrides(
            ["package_name=models", "use_pointers=false", "cpp_version=20"]
        )
        assert overrides == {
            "package_name": "models",
            "use_pointers": False,
            "cpp_version": 20,
        }

    def test_parse_overrides_requires_equals(self):
        with pytest.raises(ConfigError):
            parse_option_overrides(["package_name"])

    def test_config_file_keyed_by_language(self, tmp_path):
        config_file = tmp_path / "options.json"
        config_file.write_text(json.dumps({"go": {"package_name": "models"}}))

        options = ConfigManager().load(
            "go", GoOptions, config_file, overrides={"usePointers": False}
        )
        assert options.package_name == "models"
        assert options.use_pointers is False

    def test_config_file_must_be_json(self, tmp_path):
        config_file = tmp_path / "options.yaml"
        config_file.write_text("package_name: x")
        with pytest.raises(ConfigError, match="must be JSON"):
            ConfigManager().load("go", GoOptions, config_file)


class TestCodeGenerator:
    """Behavior shared by every generator."""

    def test_rejects_non_objects(self):
        generator = GoGenerator()
        for bad in (None, [], "text", 42):
            with pytest.raises(InvalidInputError, match="Invalid or empty JSON object provided."):
                generator.generate(bad)

    def test_rejects_empty_object(self):
        with pytest.raises(InvalidInputError):
            GoGenerator().generate({})

    def test_invalid_input_is_generator_error(self):
        assert issubclass(InvalidInputError, GeneratorError)

    @pytest.mark.parametrize("language", ALL_LANGUAGES)
    def test_repeated_calls_are_independent(self, language):
        generator = get_generator(language)
        first = generator.generate({"a": {"x": 1}, "items": [{"n": 2}]}, "Root")
        generator.generate({"a": {"y": "z"}, "items": [{"m": True}]}, "Root")
        assert generator.generate({"a": {"x": 1}, "items": [{"n": 2}]}, "Root") == first

    def test_max_depth_option(self):
        nested = {"a": {"b": {"c": 1}}}
        with pytest.raises(GeneratorError, match="maximum depth of 1"):
            GoGenerator({"max_depth": 1}).generate(nested)
        assert "type B struct" in GoGenerator({"maxDepth": 2}).generate(nested)

    def test_max_depth_failure_in_result(self):
        result = generate_code(get_generator("python", {"max_depth": 0}), {"a": {"b": 1}}, "Root")
        assert not result.success
        assert "maximum depth" in result.error_message

    def test_generate_code_result(self):
        result = generate_code(GoGenerator(), {"a": 1, "b": None, "c": []}, "Root")
        assert result.success
        assert result.metadata["language"] == "go"
        assert result.metadata["schemas"] == ["Root"]
        assert any("b" in warning for warning in result.warnings)
        assert any("c" in warning for warning in result.warnings)

    def test_generate_code_never_raises(self):
        result = generate_code(GoGenerator(), [], "Root")
        assert not result.success
        assert result.error_message == "Invalid or empty JSON object provided."
        assert isinstance(result.exception, InvalidInputError)


class TestRegistry:
    """Language registration and lookup."""

    def test_all_languages_registered(self):
        assert list_supported_languages() == sorted(ALL_LANGUAGES)

    @pytest.mark.parametrize(
        "alias,language",
        [
            ("ts", "typescript"),
            ("py", "python"),
            ("golang", "go"),
            ("c#", "csharp"),
            ("C++", "cpp"),
            ("objective-c", "objc"),
            ("vb.net", "vbnet"),
            ("js", "javascript"),
        ],
    )
    def test_aliases(self, alias, language):
        assert get_generator(alias).language_name == language

    def test_unknown_language(self):
        with pytest.raises(RegistryError, match="No generator registered"):
            get_generator("cobol")

    def test_invalid_options_wrapped(self):
        with pytest.raises(RegistryError):
            get_generator("go", {"bogus": 1})

    def test_language_info(self):
        info = get_language_info("rs")
        assert info["name"] == "rust"
        assert info["file_extension"] == ".rs"
        assert info["aliases"] == ["rs"]
        assert "use_serde_default" in info["options"]

    def test_register_requires_generator_class(self):
        registry = GeneratorRegistry()
        with pytest.raises(RegistryError):
            registry.register("thing", object)

    def test_alias_conflict(self):
        registry = GeneratorRegistry()
        registry.register("go", GoGenerator, aliases=["golang"])
        with pytest.raises(RegistryError):
            registry.register("other", GoGenerator, aliases=["golang"])

    def test_unregister_removes_aliases(self):
        registry = GeneratorRegistry()
        registry.register("go", GoGenerator, aliases=["golang"])
        registry.unregister("go")
        assert not registry.is_supported("golang")

    @pytest.mark.parametrize("language", ALL_LANGUAGES)
    def test_every_language_generates(self, language):
        code = generate_model_code({"id": 1, "name": "x"}, language, "Item")
        assert code.strip()


class TestConvenience:
    def test_generate_from_json(self):
        result = generate_from_json('{"id": 1}', "typescript", "Thing")
        assert result.success
        assert "Thing" in result.code

    def test_generate_from_json_invalid(self):
        result = generate_from_json("{oops", "typescript")
        assert not result.success
        assert result.error_message.startswith("Invalid JSON")


class TestTemplateEngine:
    def test_filters(self):
        engine = create_template_engine(
            {"t.j2": "{{ name | pascal_case }} {{ name | camel_case }} {{ body | indent_lines(2) }}"}
        )
        result = engine.render_template("t.j2", {"name": "user_name", "body": "a\n\nb"})
        assert result == "UserName userName   a\n\n  b"

    def test_missing_variable(self):
        engine = create_template_engine({"t.j2": "{{ missing }}"})
        with pytest.raises(TemplateError, match="t.j2"):
            engine.render_template("t.j2", {})

    def test_unknown_template(self):
        with pytest.raises(TemplateError):
            create_template_engine().render_template("nope.j2", {})
