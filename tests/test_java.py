"""Tests for the Java class generator."""

from model_forge.codegen.languages.java import generate_java_code

from helpers import SAMPLE_USER, contains


class TestJavaGenerator:
    def test_imports(self):
        code = generate_java_code(SAMPLE_USER, "User")
        assert code.startswith(
            "import com.fasterxml.jackson.annotation.JsonProperty;\n"
            "import java.util.List;\n"
            "import java.util.Objects;\n"
            "import java.util.StringJoiner;\n\n"
            "public class User {\n"
        )

    def test_fields(self):
        code = generate_java_code(SAMPLE_USER, "User")
        assert '    @JsonProperty("id")\n    private final Integer id;' in code
        assert "    private final Boolean isActive;" in code
        assert "    private final Double score;" in code
        assert "    private final String createdAt;" in code
        assert "    private final List<String> tags;" in code
        assert "    private final Profile profile;" in code
        assert "    private final List<Post> posts;" in code

    def test_constructor_and_getters(self):
        code = generate_java_code({"id": 1, "user_name": "x"}, "User")
        assert (
            '    public User(@JsonProperty("id") Integer id, '
            '@JsonProperty("user_name") String userName) {'
        ) in code
        assert "        this.userName = userName;" in code
        assert contains(code, "public String getUserName() { return userName; }")

    def test_nested_static_classes(self):
        code = generate_java_code(SAMPLE_USER, "User")
        assert "\n    public static class Post {\n" in code
        assert "\n    public static class Profile {\n" in code
        assert '        @JsonProperty("bio")\n        private final String bio;' in code
        assert code.index("public static class Post") < code.index("public static class Profile")
        assert code.rstrip().endswith("}\n}")

    def test_to_string_equals_hash_code(self):
        code = generate_java_code({"id": 1, "name": "x"}, "User")
        assert contains(
            code,
            'return new StringJoiner(", ", User.class.getSimpleName() + "[", "]") '
            '.add("id=" + id) .add("name=" + name) .toString();',
        )
        assert "        return Objects.equals(id, that.id) && Objects.equals(name, that.name);" in code
        assert "        return Objects.hash(id, name);" in code

    def test_builder(self):
        code = generate_java_code({"id": 1}, "User")
        assert "    public static final class Builder {" in code
        assert contains(code, "public Builder id(Integer val) { id = val; return this; }")
        assert "            return new User(this.id);" in code

    def test_mutable_fields_with_setters(self):
        code = generate_java_code(
            {"id": 1},
            "User",
            {
                "final_fields": False,
                "setters": True,
                "no_args_constructor": True,
                "constructor": False,
            },
        )
        assert "    private Integer id;" in code
        assert "    public User() {}" in code
        assert contains(code, "public void setId(Integer id) { this.id = id; }")
        assert "            instance.setId(this.id);" in code

    def test_no_args_constructor_with_final_fields(self):
        code = generate_java_code({"id": 1}, "User", {"no_args_constructor": True})
        assert contains(code, "public User() { this.id = null; }")

    def test_minimal_class(self):
        code = generate_java_code(
            {"id": 1},
            "User",
            {
                "json_annotations": False,
                "builder": False,
                "to_string": False,
                "equals_hash_code": False,
                "getters": False,
                "constructor": False,
            },
        )
        assert code == "public class User {\n    private final Integer id;\n}\n"

    def test_flat_objects(self):
        code = generate_java_code(SAMPLE_USER, "User", {"nested": False})
        assert "static class" not in code.replace("static final class Builder", "")
        assert "    private final Object profile;" in code
        assert "    private final List<Object> posts;" in code

    def test_original_names_and_keywords(self):
        code = generate_java_code({"user_name": "x", "class": 1}, "User", {"snake_case": False})
        assert "    private final String user_name;" in code
        assert "    private final Integer class_;" in code
        assert "    public Integer getClass() {" not in code
