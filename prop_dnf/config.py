"""
Settings shared by the lexer, parser and table builders.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Limits and output vocabulary for one pipeline run."""

    max_tokens: int = 256  # bounds parser recursion depth
    max_variables: int = 20  # 2^n rows
    and_separator: str = " & "
    or_separator: str = " || "
    negation: str = "!"


DEFAULT_SETTINGS = Settings()
