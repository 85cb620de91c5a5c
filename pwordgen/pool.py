"""
pwordgen.pool
Build the character pool and the per-class pools from normalized options.
"""

from typing import Iterable, List, NamedTuple

from .options import CHARACTER_CLASSES, CLASS_ORDER, SIMILAR_CHARACTERS, PasswordOptions


class OrderedCharSet:
    """Distinct characters kept in first-seen order."""

    def __init__(self, chars: Iterable[str] = ""):
        self._order: List[str] = []
        self._seen = set()
        self.update(chars)

    def add(self, char: str) -> None:
        if char not in self._seen:
            self._seen.add(char)
            self._order.append(char)

    def update(self, chars: Iterable[str]) -> None:
        for c in chars:
            self.add(c)

    def __contains__(self, char) -> bool:
        return char in self._seen

    def __len__(self) -> int:
        return len(self._order)

    def __str__(self) -> str:
        return "".join(self._order)


class PoolSummary(NamedTuple):
    pool: str
    class_pools: List[str]


def filter_characters(chars: str, exclude_similar: bool = False, exclude: str = "") -> str:
    """Drop similar-looking characters (when asked) and explicitly excluded ones."""
    if not chars:
        return ""
    if not exclude_similar and not exclude:
        return chars

    excluded = set(exclude)
    if exclude_similar:
        excluded.update(SIMILAR_CHARACTERS)
    return "".join(c for c in chars if c not in excluded)


def _selected_sources(options: PasswordOptions) -> List[str]:
    sources = [CHARACTER_CLASSES[name] for name in CLASS_ORDER if getattr(options, name)]
    if options.custom:
        sources.append(options.custom)
    return sources


def build_character_pool(options: PasswordOptions) -> str:
    """Union of the selected classes and custom characters, filtered and deduplicated."""
    raw = "".join(_selected_sources(options))
    filtered = filter_characters(raw, options.exclude_similar, options.exclude)
    return str(OrderedCharSet(filtered))


def selected_class_pools(options: PasswordOptions) -> List[str]:
    """
    One pool per selected class, in declared order, after exclusions.
    Classes with nothing left after filtering are left out.
    """
    pools = []
    for chars in _selected_sources(options):
        filtered = filter_characters(chars, options.exclude_similar, options.exclude)
        if filtered:
            pools.append(str(OrderedCharSet(filtered)))
    return pools


def describe_pool(options: PasswordOptions) -> PoolSummary:
    return PoolSummary(build_character_pool(options), selected_class_pools(options))
