"""Tests for the R S3 constructor generator."""

import pytest

from model_forge.codegen.core.generator import InvalidInputError
from model_forge.codegen.languages.r import generate_r_code

from helpers import SAMPLE_USER


class TestRGenerator:
    def test_constructor(self):
        code = generate_r_code({"userName": "x", "age": 3}, "User")
        assert code == (
            "new_user <- function(age = NULL, user_name = NULL) {\n"
            '  structure(list(age = age, user_name = user_name), class = "User")\n'
            "}"
        )

    def test_dependencies_first(self):
        code = generate_r_code(SAMPLE_USER, "User")
        assert code.index("new_profile") < code.index("new_post")
        assert code.index("new_post") < code.index("new_user")
        assert '}\n\nnew_post <- function(likes = NULL, title = NULL) {' in code

    def test_snake_case_function_name(self):
        code = generate_r_code({"a": 1}, "DataModel")
        assert code.startswith("new_data_model <- function(a = NULL) {")
        assert 'class = "DataModel")' in code

    def test_default_values(self):
        code = generate_r_code(
            {"flag": True, "label": "x", "count": 2, "items": [1], "nested": {"a": 1}, "none": None},
            "Root",
            {"default_values": True},
        )
        assert (
            "new_root <- function(count = 0, flag = FALSE, items = list(), "
            'label = "", nested = list(), none = NULL) {'
        ) in code

    def test_reserved_words(self):
        code = generate_r_code({"if": 1}, "Root")
        assert "new_root <- function(`if` = NULL) {" in code
        assert "structure(list(`if` = `if`)" in code

    def test_rejects_empty(self):
        with pytest.raises(InvalidInputError, match="Invalid JSON object"):
            generate_r_code({})
