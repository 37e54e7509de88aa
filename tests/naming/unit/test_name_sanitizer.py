"""Name sanitizer tests."""

from __future__ import annotations

import pytest
from wsdl_codegen.core.errors import InvalidIdentifierError
from wsdl_codegen.core.naming import NameSanitizer
from wsdl_codegen.languages.php import create_php_sanitizer
from wsdl_codegen.languages.python import PYTHON_RESERVED_WORDS, create_python_sanitizer


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Order", "Order"),
        ("order_id", "order_id"),
        ("_private", "_private"),
        ("class", "class_"),
        ("None", "None_"),
        ("1abc", "_1abc_"),
        ("-red", "Red_"),
        ("ab-c", "abc_"),
        ("with space", "withspace_"),
        ("", "_"),
        ("---", "_"),
        ("\u00b2abc", "Abc_"),
        ("a\u00b2b", "ab_"),
    ],
)
def test_sanitize_identifier_repairs_names(raw: str, expected: str) -> None:
    sanitizer = create_python_sanitizer()

    assert sanitizer.sanitize_identifier(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["Order", "class", "1abc", "-red", "ab-c", "", "a.b.c", "9", "yield", "données", "x y z", "\u00b2abc", "x\u00b2"],
)
def test_sanitize_identifier_is_idempotent(raw: str) -> None:
    sanitizer = create_python_sanitizer()

    once = sanitizer.sanitize_identifier(raw)

    assert sanitizer.sanitize_identifier(once) == once
    assert sanitizer.is_legal(once)


def test_sanitize_variable_name_replaces_whitespace() -> None:
    sanitizer = create_python_sanitizer()

    assert sanitizer.sanitize_variable_name("light blue") == "light_blue"
    assert sanitizer.sanitize_variable_name("tab\there") == "tab_here"


def test_sanitize_constant_name_applies_both_passes() -> None:
    sanitizer = create_python_sanitizer()

    assert sanitizer.sanitize_constant_name("light blue") == "light_blue"
    assert sanitizer.sanitize_constant_name("pass") == "pass_"
    assert sanitizer.sanitize_constant_name("RED") == "RED"


def test_php_reserved_words_are_case_insensitive() -> None:
    sanitizer = create_php_sanitizer()

    assert sanitizer.is_reserved("Class")
    assert sanitizer.sanitize_identifier("LIST") == "LIST_"
    assert sanitizer.sanitize_identifier("Order") == "Order"


def test_python_reserved_words_are_case_sensitive() -> None:
    sanitizer = create_python_sanitizer()

    assert sanitizer.sanitize_identifier("Class") == "Class"
    assert sanitizer.sanitize_identifier("class") == "class_"


def test_strict_mode_rejects_names_needing_repair() -> None:
    sanitizer = NameSanitizer(PYTHON_RESERVED_WORDS, strict=True)

    assert sanitizer.sanitize_identifier("Order") == "Order"
    with pytest.raises(InvalidIdentifierError) as excinfo:
        sanitizer.sanitize_identifier("class")
    assert excinfo.value.identifier == "class"

    with pytest.raises(InvalidIdentifierError):
        sanitizer.sanitize_identifier("1abc")


def test_custom_suffix_is_used_for_repairs() -> None:
    sanitizer = NameSanitizer({"type"}, suffix="Type")

    assert sanitizer.sanitize_identifier("type") == "typeType"


def test_clear_cache_forgets_names() -> None:
    sanitizer = create_python_sanitizer()
    sanitizer.sanitize_identifier("class")

    sanitizer.clear_cache()

    assert sanitizer._name_cache == {}


@pytest.mark.parametrize("raw", ["²abc", "½", "aⅠb", "٠x", "x³y"])
def test_repaired_names_are_python_identifiers(raw: str) -> None:
    sanitizer = create_python_sanitizer()

    name = sanitizer.sanitize_identifier(raw)

    assert name.isidentifier()
    assert sanitizer.is_legal(name)
