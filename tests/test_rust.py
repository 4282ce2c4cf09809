"""Tests for the Rust serde struct generator."""

from model_forge.codegen.languages.rust import generate_rust_code

from helpers import SAMPLE_USER, contains


class TestRustGenerator:
    def test_header_and_derives(self):
        code = generate_rust_code(SAMPLE_USER, "User")
        assert code.startswith("use serde::{Serialize, Deserialize};\n\n")
        assert "#[derive(Debug, Clone, PartialEq, Serialize, Deserialize)]" in code
        assert "use serde_json;" not in code

    def test_fields_renamed_and_optional(self):
        code = generate_rust_code(SAMPLE_USER, "User")
        assert contains(code, '#[serde(rename = "isActive")] pub is_active: Option<bool>,')
        assert contains(code, '#[serde(rename = "id")] pub id: Option<i64>,')
        assert contains(code, '#[serde(rename = "score")] pub score: Option<f64>,')
        assert contains(code, '#[serde(rename = "createdAt")] pub created_at: Option<String>,')
        assert contains(code, '#[serde(rename = "posts")] pub posts: Option<Vec<Post>>,')
        assert contains(code, '#[serde(rename = "profile")] pub profile: Option<Profile>,')

    def test_struct_order(self):
        code = generate_rust_code(SAMPLE_USER, "User")
        # Keys are visited alphabetically, so posts precede profile
        assert code.index("pub struct Profile") < code.index("pub struct Post ")
        assert code.index("pub struct Post ") < code.index("pub struct User")

    def test_serde_default(self):
        code = generate_rust_code({"a": 1}, "Root", {"useSerdeDefault": True})
        assert contains(
            code,
            "#[derive(Debug, Clone, PartialEq, Default, Serialize, Deserialize)] "
            "#[serde(default)] pub struct Root {",
        )

    def test_derive_default_only(self):
        code = generate_rust_code({"a": 1}, "Root", {"derive_default": True})
        assert "Default" in code
        assert "#[serde(default)]" not in code

    def test_json_value_import(self):
        code = generate_rust_code({"anything": None, "list": []}, "Root")
        assert "use serde_json;\n" in code
        assert "pub anything: Option<serde_json::Value>," in code
        assert "pub list: Option<Vec<serde_json::Value>>," in code

    def test_keyword_fields(self):
        code = generate_rust_code({"type": "x"}, "Root")
        assert contains(code, '#[serde(rename = "type")] pub r#type: Option<String>,')
