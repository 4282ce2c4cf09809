"""Tests for the Dart generator."""

import pytest

from model_forge.codegen.core.generator import InvalidInputError
from model_forge.codegen.languages.dart import DartGenerator, DartOptions, generate_dart_code

from helpers import SAMPLE_USER, contains


class TestDartGenerator:
    def test_fields_and_constructor(self):
        code = generate_dart_code(SAMPLE_USER, "User")
        assert "class User {" in code
        assert "  final int? id;" in code
        assert "  final bool? isActive;" in code
        assert "  final double? score;" in code
        assert "  final String? createdAt;" in code
        assert "  final List<String>? tags;" in code
        assert "  final Profile? profile;" in code
        assert contains(code, "User({ this.id, this.name,")

    def test_root_first(self):
        code = generate_dart_code(SAMPLE_USER, "User")
        assert code.index("class User") < code.index("class Profile")
        assert code.index("class Profile") < code.index("class Post")

    def test_from_json(self):
        code = generate_dart_code(SAMPLE_USER, "User")
        assert "  factory User.fromJson(Map<String, dynamic> json) {" in code
        assert "      id: json['id']," in code
        assert (
            "      profile: json['profile'] != null ? Profile.fromJson(json['profile']) : null,"
        ) in code
        assert (
            "      posts: json['posts'] != null ? List<Post>.from("
            "json['posts'].map((x) => Post.fromJson(x))) : null,"
        ) in code
        assert "      tags: json['tags'] != null ? List<String>.from(json['tags']) : null," in code

    def test_to_json(self):
        code = generate_dart_code(SAMPLE_USER, "User")
        assert "      'isActive': isActive," in code
        assert "      'profile': profile?.toJson()," in code
        assert "      'posts': posts?.map((x) => x.toJson()).toList()," in code

    def test_date_time_support(self):
        code = generate_dart_code(SAMPLE_USER, "User", {"supportDateTime": True})
        assert "  final DateTime? createdAt;" in code
        assert (
            "      createdAt: json['createdAt'] != null ? "
            "DateTime.tryParse(json['createdAt']) : null,"
        ) in code
        assert "      'createdAt': createdAt?.toIso8601String()," in code

    def test_required_fields_are_not_nullable(self):
        options = DartOptions(required_fields=True)
        assert options.nullable_fields is False
        code = DartGenerator(options).generate({"a": 1}, "Root")
        assert "  final int a;" in code
        assert "    required this.a," in code

    def test_original_field_names(self):
        code = generate_dart_code({"user_name": "x"}, "Root", {"camel_case_fields": False})
        assert "  final String? user_name;" in code

    def test_default_values(self):
        code = generate_dart_code({"a": 1, "b": "x"}, "Root", {"default_values": True})
        assert "      a: json['a'] ?? 0," in code
        assert "      b: json['b'] ?? ''," in code

    def test_values_as_defaults(self):
        code = generate_dart_code(
            {"a": 7, "b": "it's"},
            "Root",
            {"use_values_as_defaults": True, "default_values": True},
        )
        assert "      a: json['a'] ?? 7," in code
        assert "      b: json['b'] ?? 'it\\'s'," in code

    def test_values_as_defaults_needs_default_values(self):
        code = generate_dart_code({"count": 3}, "M", {"useValuesAsDefaults": True})
        assert "      count: json['count'],\n" in code
        assert "??" not in code

    def test_dynamic_is_never_nullable(self):
        code = generate_dart_code({"x": None}, "Root")
        assert "  final dynamic x;" in code

    def test_to_string_and_copy_with(self):
        code = generate_dart_code(
            {"a": 1, "b": "x"}, "Root", {"to_string": True, "copy_with": True}
        )
        assert "    return 'Root(a: $a, b: $b)';" in code
        assert contains(
            code,
            "Root copyWith({ int? a, String? b, }) { return Root( a: a ?? this.a, b: b ?? this.b, ); }",
        )

    def test_empty_object_is_degenerate(self):
        code = generate_dart_code({}, "Root", {"copy_with": True})
        assert "class Root {" in code
        assert "  Root();" in code
        assert contains(code, "Root copyWith() { return Root(); }")

    def test_rejects_non_object(self):
        with pytest.raises(InvalidInputError, match="Invalid JSON object provided."):
            generate_dart_code([1, 2])
