from __future__ import annotations


class Text:
    """A string literal. Never equal to a Symbol with the same characters."""

    __slots__ = ("value",)

    def __init__(self, value: str):
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Text) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Text, self.value))

    def __repr__(self):
        return f"Text({self.value!r})"

    def __str__(self):
        return self.value
