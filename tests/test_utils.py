"""Tests for JSON loading and input validation."""

import json

import pytest
import requests

from model_forge import utils
from model_forge.utils import (
    InputValidationError,
    JSONLoaderError,
    has_empty_keys,
    load_json,
    load_json_from_file,
    load_json_from_string,
    load_json_from_url,
    validate_model_input,
)


class FakeResponse:
    def __init__(self, payload, status_code=200, content_type="application/json"):
        self.payload = payload
        self.status_code = status_code
        self.headers = {"content-type": content_type}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)

    def json(self):
        if isinstance(self.payload, str):
            return json.loads(self.payload)
        return self.payload


class TestValidation:
    def test_valid_object(self):
        validate_model_input({"a": 1})

    def test_non_object(self):
        with pytest.raises(InputValidationError, match="JSON input must be an object."):
            validate_model_input([1, 2])

    def test_empty_object(self):
        with pytest.raises(InputValidationError, match="JSON object cannot be empty."):
            validate_model_input({})

    def test_empty_keys(self):
        with pytest.raises(InputValidationError, match="JSON cannot contain empty keys."):
            validate_model_input({"a": [{"": 1}]})

    def test_empty_keys_allowed(self):
        validate_model_input({"": 1, "a": 2}, allow_empty_keys=True)

    def test_has_empty_keys(self):
        assert has_empty_keys({"a": {"b": {"": None}}})
        assert has_empty_keys([{"x": 1}, {"": 2}])
        assert not has_empty_keys({"a": ["", {"b": ""}]})


class TestLoaders:
    def test_from_string(self):
        assert load_json_from_string('{"a": 1}') == ("<string>", {"a": 1})

    def test_from_string_invalid(self):
        with pytest.raises(JSONLoaderError, match="Invalid JSON in <stdin>"):
            load_json_from_string("{oops", "<stdin>")

    def test_from_file(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text('{"name": "Alice"}', encoding="utf-8")
        source, data = load_json_from_file(path)
        assert source == str(path)
        assert data == {"name": "Alice"}

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_json_from_file(tmp_path / "missing.json")

    def test_from_invalid_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(JSONLoaderError, match="Invalid JSON in file"):
            load_json_from_file(path)

    def test_from_url(self, monkeypatch):
        monkeypatch.setattr(utils.requests, "get", lambda url, timeout: FakeResponse({"a": 1}))
        assert load_json_from_url("https://example.com/data") == (
            "https://example.com/data",
            {"a": 1},
        )

    def test_from_url_http_error(self, monkeypatch):
        monkeypatch.setattr(
            utils.requests, "get", lambda url, timeout: FakeResponse({}, status_code=404)
        )
        with pytest.raises(JSONLoaderError, match="HTTP error 404"):
            load_json_from_url("https://example.com/data.json")

    def test_from_url_invalid_body(self, monkeypatch):
        monkeypatch.setattr(utils.requests, "get", lambda url, timeout: FakeResponse("<html>"))
        with pytest.raises(JSONLoaderError, match="Invalid JSON response"):
            load_json_from_url("https://example.com/data.json")

    def test_invalid_url(self):
        with pytest.raises(JSONLoaderError, match="Invalid URL"):
            load_json_from_url("not-a-url")

    def test_load_json_requires_one_source(self, tmp_path):
        with pytest.raises(JSONLoaderError, match="Either file_path or url"):
            load_json()
        with pytest.raises(JSONLoaderError, match="Cannot specify both"):
            load_json(file_path=tmp_path / "a.json", url="https://example.com")
