"""Tests for the JavaScript class generator."""

import pytest

from model_forge.codegen.core.generator import InvalidInputError
from model_forge.codegen.languages.javascript import generate_javascript_code

from helpers import SAMPLE_USER, contains


class TestJavaScriptGenerator:
    def test_class_order(self):
        code = generate_javascript_code(SAMPLE_USER, "User")
        assert code.index("class Profile {") < code.index("class Post {")
        assert code.index("class Post {") < code.index("class User {")

    def test_jsdoc_fields(self):
        code = generate_javascript_code(SAMPLE_USER, "User")
        assert "    /** @type {Date|null} */\n    createdAt;" in code
        assert "    /** @type {number|null} */\n    id;" in code
        assert "    /** @type {Post[]|null} */\n    posts;" in code
        assert "    /** @type {Profile|null} */\n    profile;" in code
        assert "    /** @type {string[]|null} */\n    tags;" in code

    def test_constructor_hydrates(self):
        code = generate_javascript_code(SAMPLE_USER, "User")
        assert "        this.createdAt = data.createdAt ? new Date(data.createdAt) : null;" in code
        assert "        this.id = data.id ?? null;" in code
        assert (
            "        this.posts = Array.isArray(data.posts) ? "
            "data.posts.map(item => new Post(item)) : null;"
        ) in code
        assert "        this.profile = data.profile ? new Profile(data.profile) : null;" in code

    def test_from_and_to_json(self):
        code = generate_javascript_code(SAMPLE_USER, "User")
        assert contains(code, "static fromJSON(data) { return new User(data); }")
        assert "            'createdAt': this.createdAt?.toISOString()," in code
        assert "            'posts': this.posts?.map(item => item.toJSON())," in code
        assert "            'profile': this.profile?.toJSON()," in code
        assert "            'isActive': this.isActive," in code

    def test_fields_sorted(self):
        code = generate_javascript_code({"zeta": 1, "Beta": 2, "alpha": 3}, "Root")
        assert code.index("this.alpha") < code.index("this.beta") < code.index("this.zeta")

    def test_non_identifier_keys(self):
        code = generate_javascript_code({"first-name": "x"}, "Root")
        assert '        this.firstName = data["first-name"] ?? null;' in code
        assert "            'first-name': this.firstName," in code

    def test_options_off(self):
        code = generate_javascript_code(
            SAMPLE_USER,
            "User",
            {"includeJSDoc": False, "include_from_to_json": False, "convert_dates": False},
        )
        assert "@type" not in code
        assert "fromJSON" not in code
        assert "toJSON" not in code
        assert "        this.createdAt = data.createdAt ?? null;" in code

    def test_empty_object(self):
        code = generate_javascript_code({}, "Root")
        assert code == (
            "class Root {\n"
            "    constructor(data = {}) {}\n\n"
            "    static fromJSON(data) {\n"
            "        return new Root(data);\n"
            "    }\n\n"
            "    toJSON() {\n"
            "        return {};\n"
            "    }\n"
            "}\n"
        )

    def test_rejects_non_object(self):
        with pytest.raises(InvalidInputError, match="Invalid JSON object provided."):
            generate_javascript_code("text")
