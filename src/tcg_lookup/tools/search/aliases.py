"""Property alias resolution for the query language."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from ...utils.text import normalize

AliasConfig = Mapping[str, str | Sequence[str]]


@dataclass(frozen=True)
class AliasResolver:
    """Maps normalized property aliases to normalized canonical names."""

    aliases: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: AliasConfig | None) -> AliasResolver:
        """Build a resolver from ``{canonical: alias | [aliases]}``.

        Every canonical name resolves to itself. Blank names are ignored and a
        later alias overrides an earlier one that normalizes the same way.
        """
        lookup: dict[str, str] = {}
        for canonical_raw, aliases_raw in (config or {}).items():
            canonical = normalize(canonical_raw)
            if not canonical:
                continue
            lookup[canonical] = canonical

            if isinstance(aliases_raw, str) or not isinstance(aliases_raw, Sequence):
                aliases_raw = [aliases_raw]
            for alias_raw in aliases_raw:
                alias = normalize(alias_raw)
                if alias:
                    lookup[alias] = canonical
        return cls(aliases=lookup)

    def resolve(self, prop: str) -> str:
        """Canonical name for an already-normalized property, or ``prop`` itself."""
        return self.aliases.get(prop) or prop
