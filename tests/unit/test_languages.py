"""Unit tests for language normalization and file extensions."""

import pytest

from domain.languages import FILE_EXTENSIONS, LANGUAGE_ALIASES, extension_for, normalize


@pytest.mark.parametrize(
    "alias, canonical",
    [
        ("js", "javascript"),
        ("ts", "typescript"),
        ("py", "python"),
        ("py3", "python3"),
        ("c++", "cpp"),
        ("cs", "csharp"),
        ("c#", "csharp"),
        ("kt", "kotlin"),
        ("rkt", "racket"),
        ("go", "golang"),
        ("rb", "ruby"),
        ("rs", "rust"),
        ("exs", "elixir"),
        ("erl", "erlang"),
    ],
)
def test_aliases_normalize_to_canonical(alias, canonical):
    assert normalize(alias) == canonical


def test_normalize_is_case_insensitive():
    assert normalize("PY3") == "python3"
    assert normalize("C#") == "csharp"


def test_unknown_language_passes_through_lowercased():
    assert normalize("Java") == "java"
    assert normalize("Brainfuck") == "brainfuck"


@pytest.mark.parametrize("value", [*LANGUAGE_ALIASES, *FILE_EXTENSIONS, "Haskell", "PY"])
def test_normalize_is_idempotent(value):
    assert normalize(normalize(value)) == normalize(value)


@pytest.mark.parametrize(
    "language, extension",
    [
        ("c", "c"),
        ("cpp", "cpp"),
        ("csharp", "cs"),
        ("golang", "go"),
        ("java", "java"),
        ("python3", "py"),
        ("python", "py"),
        ("javascript", "js"),
        ("typescript", "ts"),
        ("ruby", "rb"),
        ("swift", "swift"),
        ("scala", "scala"),
        ("kotlin", "kt"),
        ("racket", "rkt"),
        ("rust", "rs"),
        ("php", "php"),
        ("sql", "sql"),
        ("erlang", "erl"),
        ("elixir", "exs"),
        ("dart", "dart"),
    ],
)
def test_extension_for_known_languages(language, extension):
    assert extension_for(language) == extension


@pytest.mark.parametrize("language", ["haskell", "", "py3", "PYTHON3"])
def test_extension_for_unknown_language_is_txt(language):
    assert extension_for(language) == "txt"
