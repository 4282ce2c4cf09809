"""Tests for the Swift generator."""

import pytest

from model_forge.codegen.core.config import ConfigError
from model_forge.codegen.languages.swift import SwiftGenerator, generate_swift_code

from helpers import SAMPLE_USER, contains


class TestSwiftStructs:
    def test_codable_struct(self):
        code = generate_swift_code(SAMPLE_USER, "User")
        assert "struct User: Codable {" in code
        assert "    let id: Int?\n" in code
        assert "    let isActive: Bool?\n" in code
        assert "    let score: Double?\n" in code
        assert "    let createdAt: Date?\n" in code
        assert "    let tags: [String]?\n" in code
        assert "    let profile: Profile?\n" in code
        assert "    let posts: [Post]?\n" in code

    def test_root_first(self):
        code = generate_swift_code(SAMPLE_USER, "User")
        assert code.index("struct User") < code.index("struct Profile")
        assert code.index("struct Profile") < code.index("struct Post")

    def test_iso8601_date_comment(self):
        code = generate_swift_code(SAMPLE_USER, "User")
        assert code.startswith("import Foundation\n\n// To decode dates automatically")
        assert "decoder.dateDecodingStrategy = .iso8601" in code

    def test_formatted_date_strategy(self):
        code = generate_swift_code(SAMPLE_USER, "User", {"dateStrategy": "formatted"})
        assert 'formatter.dateFormat = "yyyy-MM-dd\'T\'HH:mm:ssZ"' in code

    def test_no_date_strategy(self):
        code = generate_swift_code(SAMPLE_USER, "User", {"date_strategy": "none"})
        assert "    let createdAt: String?\n" in code
        assert "dateDecodingStrategy" not in code

    def test_invalid_date_strategy(self):
        with pytest.raises(ConfigError):
            SwiftGenerator({"date_strategy": "epoch"})

    def test_coding_keys_for_renamed_fields(self):
        code = generate_swift_code({"user_name": "x", "age": 3}, "User")
        assert contains(
            code,
            'enum CodingKeys: String, CodingKey { case userName = "user_name" case age }',
        )

    def test_coding_keys_disabled(self):
        code = generate_swift_code(
            {"user_name": "x"}, "User", {"generate_coding_keys": False}
        )
        assert "CodingKeys" not in code

    def test_protocols(self):
        code = generate_swift_code(
            {"a": 1},
            "User",
            {"is_equatable": True, "is_hashable": True, "is_custom_string_convertible": True},
        )
        assert "struct User: Codable, Equatable, Hashable, CustomStringConvertible {" in code
        assert contains(
            code,
            'var description: String { return "User(a: \\(String(describing: a)))" }',
        )

    def test_custom_init(self):
        code = generate_swift_code({"a": 1, "b": "x"}, "User", {"generate_custom_init": True})
        assert contains(
            code, "init(a: Int? = nil, b: String? = nil) { self.a = a self.b = b }"
        )

    def test_sample_data(self):
        code = generate_swift_code(
            {"a": 1, "b": "x", "c": [1.5], "p": {"q": True}},
            "User",
            {"generate_sample_data": True},
        )
        assert contains(
            code,
            'static var sample: User { return User( a: 1, b: "x", c: [1.5], p: P.sample ) }',
        )
        assert contains(code, "static var sample: P { return P( q: true ) }")

    def test_any_codable_helper(self):
        code = generate_swift_code({"extra": None}, "User")
        assert "    let extra: AnyCodable?\n" in code
        assert "struct AnyCodable: Codable, Equatable, Hashable {" in code

    def test_keyword_property(self):
        code = generate_swift_code({"default": 1}, "User")
        assert "    let `default`: Int?\n" in code


class TestSwiftClasses:
    def test_observable_class(self):
        code = generate_swift_code({"a": 1}, "User", {"use_struct": False})
        assert "class User: Codable, ObservableObject {" in code
        assert "    var a: Int?\n" in code

    def test_published_class(self):
        code = generate_swift_code(
            {"user_name": "x"},
            "User",
            {"use_struct": False, "is_published": True, "is_main_actor": True},
        )
        assert code.startswith("import Foundation\nimport Combine\n\n")
        assert "@MainActor\nclass User: Codable, ObservableObject {" in code
        assert "    @Published var userName: String?\n" in code
        assert contains(
            code,
            "required init(from decoder: Decoder) throws { "
            "let container = try decoder.container(keyedBy: CodingKeys.self) "
            "userName = try container.decodeIfPresent(String.self, forKey: .userName) }",
        )
        assert "try container.encodeIfPresent(userName, forKey: .userName)" in code

    def test_class_equatable_sorted(self):
        code = generate_swift_code(
            {"zeta": 1, "alpha": 2},
            "User",
            {"use_struct": False, "is_equatable": True, "is_hashable": True},
        )
        assert "        return lhs.alpha == rhs.alpha && lhs.zeta == rhs.zeta" in code
        assert contains(
            code,
            "func hash(into hasher: inout Hasher) { hasher.combine(zeta) hasher.combine(alpha) }",
        )
