import pytest

from tmplgen.template_values import (
    TemplateValuesError,
    load_args_template_values,
    load_env_and_args_template_values,
    load_env_template_values,
    read_template_values_file,
    read_template_values_from_definitions,
)


@pytest.mark.parametrize("definition", ["0key=42", "$key=42", "-key=42", "_key=42"])
def test_names_must_start_with_word_char(definition):
    with pytest.raises(TemplateValuesError):
        read_template_values_from_definitions([definition])


def test_names_may_contain_digits():
    result = read_template_values_from_definitions(["my0123456789key=42"])
    assert result["my0123456789key"] == "42"


def test_names_may_contain_dash():
    assert read_template_values_from_definitions(["my-key=42"])["my-key"] == "42"


def test_names_may_contain_underscore():
    assert read_template_values_from_definitions(["my_key=42"])["my_key"] == "42"


def test_spaces_are_not_allowed_in_names():
    with pytest.raises(TemplateValuesError):
        read_template_values_from_definitions(["my key=42"])


def test_spaces_around_assignment_is_ok():
    assert read_template_values_from_definitions(["key   =      42"])["key"] == "42"


def _values_file(tmp_path, body):
    path = tmp_path / "values.toml"
    path.write_text(body, encoding="utf-8")
    return path


def test_file_values_keep_types(tmp_path):
    path = _values_file(tmp_path, '[values]\nv1 = true\nv2 = "true"\n')
    assert read_template_values_file(path) == {"v1": True, "v2": "true"}


def test_missing_file_raises(tmp_path):
    with pytest.raises(TemplateValuesError, match="Values File Error"):
        read_template_values_file(tmp_path / "absent.toml")


def test_file_without_values_table_raises(tmp_path):
    with pytest.raises(TemplateValuesError):
        read_template_values_file(_values_file(tmp_path, 'other = "x"\n'))


def test_env_values_override_env_file(tmp_path):
    path = _values_file(tmp_path, '[values]\nmy_value = "env-file-value"\n')
    environ = {
        "CARGO_GENERATE_TEMPLATE_VALUES_FILE": str(path),
        "CARGO_GENERATE_VALUE_MY_VALUE": "env-def-value",
        "UNRELATED": "x",
    }
    assert load_env_template_values(environ) == {"my_value": "env-def-value"}


def test_env_file_alone(tmp_path):
    path = _values_file(tmp_path, '[values]\nmy_value = "env-file-value"\n')
    environ = {"CARGO_GENERATE_TEMPLATE_VALUES_FILE": str(path)}
    assert load_env_template_values(environ) == {"my_value": "env-file-value"}


def test_definitions_override_file(tmp_path):
    path = _values_file(tmp_path, '[values]\nmy_value = "file-value"\n')
    result = load_args_template_values(path, ["my_value=def-value"])
    assert result == {"my_value": "def-value"}


def test_args_file_overrides_environment(tmp_path):
    path = _values_file(tmp_path, '[values]\nmy_value = "file-value"\n')
    environ = {"CARGO_GENERATE_VALUE_MY_VALUE": "env-def-value"}
    result = load_env_and_args_template_values(path, [], environ)
    assert result["my_value"] == "file-value"


def test_cli_value_overrides_others(tmp_path):
    path = _values_file(tmp_path, '[values]\nmy_value = "content of file-value"\n')
    result = load_env_and_args_template_values(
        path, ['my_value="content of cli-value"'], {}
    )
    assert "content of cli-value" in result["my_value"]