from __future__ import annotations

"""Small text helpers shared by every part of the parser."""

# Characters stripped from heading text, attribute names/values and description lines.
DECORATION = "_*` "


def clean(text: str) -> str:
    return (text or "").strip().strip(DECORATION).strip()


def only_repeats(text: str, char: str) -> bool:
    """True when `text` is non-empty and made up of `char` only."""
    return bool(text) and text.count(char) == len(text)


def split_values(raw: str) -> list[str]:
    out: list[str] = []
    for part in raw.split(","):
        value = clean(part)
        if value:
            out.append(value)
    return out
