"""Tests for the VB.NET generator."""

import pytest

from model_forge.codegen.core.generator import InvalidInputError
from model_forge.codegen.languages.vbnet import generate_vbnet_code

from helpers import SAMPLE_USER


class TestVBNetGenerator:
    def test_module_layout(self):
        code = generate_vbnet_code(SAMPLE_USER, "User")
        assert code.startswith(
            "Imports Newtonsoft.Json\n"
            "Imports System.Collections.Generic\n\n"
            "Public Module DataModels\n\n"
            "    Public Class Post\n"
        )
        assert code.endswith("    End Class\n\nEnd Module\n")
        assert code.index("Public Class Profile") < code.index("Public Class User")

    def test_properties(self):
        code = generate_vbnet_code(SAMPLE_USER, "User")
        assert '        <JsonProperty("id")>\n        Public Property Id As Integer?' in code
        assert "        Public Property Name As String" in code
        assert "        Public Property IsActive As Boolean?" in code
        assert "        Public Property Score As Double?" in code
        assert "        Public Property CreatedAt As Date?" in code
        assert "        Public Property Tags As List(Of String)" in code
        assert "        Public Property Profile As Profile" in code
        assert "        Public Property Posts As List(Of Post)" in code

    def test_nullable_element_unwrapped(self):
        code = generate_vbnet_code({"ids": [1, 2], "empty": []}, "Root")
        assert "Public Property Ids As List(Of Integer)" in code
        assert "Public Property Empty As List(Of Object)" in code

    def test_keyword_escaped(self):
        code = generate_vbnet_code({"end": True}, "Root")
        assert '        <JsonProperty("end")>\n        Public Property [End] As Boolean?' in code

    def test_plain_names(self):
        code = generate_vbnet_code({"id": 1}, "Root", {"pascal_case": False, "module_name": "Models"})
        assert code == (
            "Public Module Models\n\n"
            "    Public Class Root\n"
            "        Public Property id As Integer?\n"
            "    End Class\n\n"
            "End Module\n"
        )

    def test_without_annotations(self):
        code = generate_vbnet_code({"id": 1}, "Root", {"json_annotations": False})
        assert "JsonProperty" not in code
        assert "Imports" not in code

    def test_rejects_empty(self):
        with pytest.raises(InvalidInputError):
            generate_vbnet_code({})
