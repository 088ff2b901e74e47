"""
Immutable lookup table mapping known misspellings to canonical names.

The table is built once from configuration and only read afterwards, so a
single instance can be shared by any number of rewrite passes.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Iterator, Mapping, Optional, Tuple, Union

from ..errors import ConfigError
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CanonicalEntry:
    """A canonical identifier name and the misspellings that map to it."""
    canonical_name: str
    typos: FrozenSet[str]

    @classmethod
    def of(cls, canonical_name: str, typos: Iterable[str]) -> "CanonicalEntry":
        """Create an entry from any iterable of typos, dropping repeats."""
        return cls(canonical_name, frozenset(typos))


EntryLike = Union[CanonicalEntry, Tuple[str, Iterable[str]]]


def _coerce_entries(
    entries: Union[Mapping[str, Iterable[str]], Iterable[EntryLike]]
) -> Tuple[CanonicalEntry, ...]:
    if isinstance(entries, Mapping):
        items: Iterable[EntryLike] = entries.items()
    else:
        items = entries

    try:
        items = list(items)
    except TypeError as exc:
        raise ConfigError(f"Expected a mapping or a list of entries, got {entries!r}") from exc

    coerced = []
    for item in items:
        if isinstance(item, CanonicalEntry):
            canonical_name, typos = item.canonical_name, item.typos
        else:
            try:
                canonical_name, typos = item
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"Expected a (canonical, typos) pair, got {item!r}") from exc

        if isinstance(typos, str):
            raise ConfigError(
                f"Typos for '{canonical_name}' must be a list of strings, got a single string"
            )
        try:
            coerced.append(CanonicalEntry.of(canonical_name, typos))
        except TypeError as exc:
            raise ConfigError(
                f"Typos for '{canonical_name}' must be a list of strings, got {typos!r}"
            ) from exc
    return tuple(coerced)


class LookupTable:
    """
    Read-only mapping from misspelled identifier to canonical identifier.

    Use LookupTable.build() to construct one; it validates that every
    correction is unambiguous and that no canonical name is also a typo,
    which keeps rewriting idempotent.
    """

    __slots__ = ("_entries", "_index")

    def __init__(self, entries: Tuple[CanonicalEntry, ...], index: Dict[str, str]):
        self._entries = entries
        self._index = index

    @classmethod
    def build(
        cls,
        entries: Union[Mapping[str, Iterable[str]], Iterable[EntryLike]],
    ) -> "LookupTable":
        """
        Validate configuration entries and build a table.

        Args:
            entries: CanonicalEntry values, (canonical, typos) pairs, or a
                mapping of canonical name to typos

        Returns:
            A new LookupTable

        Raises:
            ConfigError: if an entry has no typos, a typo is empty or equals
                its canonical name, a typo is listed under two canonical
                names, a canonical name repeats, or a canonical name is also
                listed as a typo
        """
        coerced = _coerce_entries(entries)

        index: Dict[str, str] = {}
        canonical_names = set()

        for entry in coerced:
            name = entry.canonical_name
            if not isinstance(name, str) or not name:
                raise ConfigError(f"Canonical name must be a non-empty string, got {name!r}")
            if name in canonical_names:
                raise ConfigError(f"Canonical name '{name}' is configured more than once")
            canonical_names.add(name)

            if not entry.typos:
                raise ConfigError(f"Canonical name '{name}' has no typos")

            for typo in sorted(entry.typos, key=str):
                if not isinstance(typo, str) or not typo:
                    raise ConfigError(f"Typo for '{name}' must be a non-empty string, got {typo!r}")
                if typo == name:
                    raise ConfigError(f"Typo '{typo}' is identical to its canonical name")
                owner = index.get(typo)
                if owner is not None:
                    raise ConfigError(
                        f"Ambiguous correction: typo '{typo}' is listed for both '{owner}' and '{name}'"
                    )
                index[typo] = name

        clashes = sorted(canonical_names.intersection(index))
        if clashes:
            details = ", ".join(f"'{c}' (typo of '{index[c]}')" for c in clashes)
            raise ConfigError(f"Canonical names also listed as typos: {details}")

        logger.debug(f"Lookup table built: {len(coerced)} entries, {len(index)} typos")
        return cls(coerced, index)

    def lookup(self, name: str) -> Optional[str]:
        """Return the canonical name for a known typo, or None."""
        return self._index.get(name)

    @property
    def entries(self) -> Tuple[CanonicalEntry, ...]:
        return self._entries

    @property
    def canonical_names(self) -> Tuple[str, ...]:
        return tuple(entry.canonical_name for entry in self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CanonicalEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"LookupTable({len(self._entries)} entries, {len(self._index)} typos)"
