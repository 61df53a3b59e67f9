"""Language aliases and file extensions."""

LANGUAGE_ALIASES: dict[str, str] = {
    "js": "javascript",
    "ts": "typescript",
    "py": "python",
    "py3": "python3",
    "c++": "cpp",
    "cs": "csharp",
    "c#": "csharp",
    "kt": "kotlin",
    "rkt": "racket",
    "go": "golang",
    "rb": "ruby",
    "rs": "rust",
    "exs": "elixir",
    "erl": "erlang",
}

FILE_EXTENSIONS: dict[str, str] = {
    "c": "c",
    "cpp": "cpp",
    "csharp": "cs",
    "golang": "go",
    "java": "java",
    "python3": "py",
    "python": "py",
    "javascript": "js",
    "typescript": "ts",
    "ruby": "rb",
    "swift": "swift",
    "scala": "scala",
    "kotlin": "kt",
    "racket": "rkt",
    "rust": "rs",
    "php": "php",
    "sql": "sql",
    "erlang": "erl",
    "elixir": "exs",
    "dart": "dart",
}

DEFAULT_EXTENSION = "txt"


def normalize(language: str) -> str:
    """Map an alias such as ``py3`` or ``C++`` to LeetCode's language slug."""
    key = language.lower()
    return LANGUAGE_ALIASES.get(key, key)


def extension_for(language: str) -> str:
    return FILE_EXTENSIONS.get(language, DEFAULT_EXTENSION)
