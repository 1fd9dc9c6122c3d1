import re
from enum import Enum
from typing import Iterable, Optional, Set


class EditKind(str, Enum):
    STYLE = "style"
    CONTENT = "content"


# Presentation vocabulary; anything else is treated as a copy change.
STYLE_KEYWORDS = frozenset({
    "bigger", "smaller", "larger", "taller", "wider", "narrower",
    "bold", "bolder", "lighter", "thinner",
    "spacing", "padding", "margin", "space", "gap",
    "color", "colour", "background", "bg",
    "rounded", "shadow", "border",
    "animate", "animation", "fade", "slide",
    "font", "size", "weight",
    "align", "alignment", "center", "centre", "left", "right",
    "dark", "light", "gradient", "opacity", "transparent", "blur",
    "scale", "transform", "hover", "transition",
    "underline", "uppercase", "lowercase", "italic",
    "tracking", "leading", "line-height",
    "width", "height", "tall", "wide", "narrow",
})

_WORD = re.compile(r"[a-z]+(?:-[a-z]+)*")


def _folded(word: str) -> Set[str]:
    """A word plus its stems under light suffix folding (-ed, -ing, -s)."""
    forms = {word}

    if word.endswith("ed") and len(word) > 4:
        forms.update({word[:-2], word[:-1]})
    if word.endswith("ing") and len(word) > 5:
        forms.update({word[:-3], word[:-3] + "e"})
    if word.endswith("es") and len(word) > 4:
        forms.add(word[:-2])
    if word.endswith("s") and not word.endswith("ss") and len(word) > 3:
        forms.add(word[:-1])

    return forms


def tokens(comment: str) -> Iterable[str]:
    return _WORD.findall((comment or "").lower())


def style_terms(comment: str) -> Set[str]:
    """Presentation keywords found in a comment."""
    found = set()
    for word in tokens(comment):
        found.update(_folded(word) & STYLE_KEYWORDS)
    return found


def is_style_request(comment: str) -> bool:
    return bool(style_terms(comment))


def classify(comment: str, force: Optional[str] = None) -> EditKind:
    """
    Decide whether a comment asks for a style or a content change.

    `force` overrides the heuristic when the user already told us which
    kind they meant.
    """
    if force:
        return EditKind(force)
    return EditKind.STYLE if is_style_request(comment) else EditKind.CONTENT
