import pytest

from tmplgen import casing


@pytest.mark.parametrize(
    ("func", "expected"),
    [
        (casing.to_kebab_case, "some-text"),
        (casing.to_lower_camel_case, "someText"),
        (casing.to_pascal_case, "SomeText"),
        (casing.to_shouty_kebab_case, "SOME-TEXT"),
        (casing.to_shouty_snake_case, "SOME_TEXT"),
        (casing.to_snake_case, "some_text"),
        (casing.to_title_case, "Some Text"),
        (casing.to_upper_camel_case, "SomeText"),
    ],
)
def test_filters_on_some_text(func, expected):
    assert func("some text") == expected


@pytest.mark.parametrize(
    ("func", "text", "expected"),
    [
        (casing.to_kebab_case, "kebab case", "kebab-case"),
        (casing.to_lower_camel_case, "lower camel case", "lowerCamelCase"),
        (casing.to_pascal_case, "pascal case", "PascalCase"),
        (casing.to_shouty_kebab_case, "shouty kebab case", "SHOUTY-KEBAB-CASE"),
        (casing.to_shouty_snake_case, "shouty snake case", "SHOUTY_SNAKE_CASE"),
        (casing.to_snake_case, "snake case", "snake_case"),
        (casing.to_title_case, "title case", "Title Case"),
        (casing.to_upper_camel_case, "upper camel case", "UpperCamelCase"),
    ],
)
def test_change_case_from_scripts(func, text, expected):
    assert func(text) == expected


def test_project_name_is_kebab_cased():
    assert casing.to_kebab_case("foobar_project") == "foobar-project"
    assert casing.to_kebab_case("foobar-project") == "foobar-project"


def test_crate_name_is_snake_cased():
    assert casing.to_snake_case("foobar-project") == "foobar_project"


def test_camel_case_input_is_split():
    assert casing.to_kebab_case("ProjectBar") == "project-bar"
    assert casing.to_snake_case("ProjectBar") == "project_bar"


def test_empty_and_separator_only_input():
    assert casing.to_snake_case("") == ""
    assert casing.to_lower_camel_case("--__  ") == ""


@pytest.mark.parametrize("text", ["some text", "ProjectBar", "foo_bar-baz qux"])
def test_conversions_are_idempotent(text):
    for func in (
        casing.to_kebab_case,
        casing.to_snake_case,
        casing.to_shouty_snake_case,
        casing.to_upper_camel_case,
        casing.to_lower_camel_case,
        casing.to_title_case,
    ):
        once = func(text)
        assert func(once) == once