"""
Utility-class merging with conflict resolution.

merge_classes("text-4xl font-bold", "text-6xl") -> "font-bold text-6xl"

Conflicts are resolved by tailwind-merge: a later class replaces earlier
classes of the same property family under the same variant prefixes, and
shorthands drop the longhands they cover. Unknown classes pass through.
"""

from typing import Optional

from tailwind_merge import TailwindMerge

_twm = TailwindMerge()


def merge_classes(*class_lists: Optional[str]) -> str:
    parts = [classes.strip() for classes in class_lists if classes and classes.strip()]
    if not parts:
        return ""
    return _twm.merge(" ".join(parts))
