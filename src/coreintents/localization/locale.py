"""Locale tags and the fallback chain used to resolve translations."""

from __future__ import annotations

import re
from dataclasses import dataclass

_SEPARATORS = re.compile(r"[_-]")

# Locale suffix of a resource file name: ``en``, ``en_US``, ``es_419``, ``en_US_POSIX``.
_RESOURCE_LOCALE = re.compile(r"[a-z]{2,3}(?:[_-](?:[A-Z]{2}|[0-9]{3})(?:[_-][A-Z0-9]{1,8})?)?")


@dataclass(frozen=True, order=True)
class LocaleTag:
    """Language plus optional region and variant, e.g. ``en_US`` or ``cat``."""

    language: str
    region: str = ""
    variant: str = ""

    def __post_init__(self) -> None:
        if not self.language or not self.language.isalpha():
            raise ValueError(f"Invalid locale language: {self.language!r}")
        if self.region and not self.region.isalnum():
            raise ValueError(f"Invalid locale region: {self.region!r}")
        if self.variant and not self.region:
            raise ValueError("Locale variants require a region")
        object.__setattr__(self, "language", self.language.lower())
        object.__setattr__(self, "region", self.region.upper())

    @classmethod
    def parse(cls, value: str | LocaleTag) -> LocaleTag:
        """Parse ``en_US``, ``en-US``, ``cat`` or ``en_US_POSIX`` into a tag."""

        if isinstance(value, LocaleTag):
            return value
        text = (value or "").strip()
        if not text:
            raise ValueError("Locale identifiers must not be empty")

        parts = _SEPARATORS.split(text, maxsplit=2)
        language = parts[0]
        region = parts[1] if len(parts) > 1 else ""
        variant = parts[2] if len(parts) > 2 else ""
        return cls(language=language, region=region, variant=variant)

    def language_only(self) -> LocaleTag:
        """Return the tag with region and variant stripped."""

        return LocaleTag(self.language)

    def without_variant(self) -> LocaleTag:
        return LocaleTag(self.language, self.region)

    def is_more_specific_than(self, other: LocaleTag) -> bool:
        """Whether ``other`` is a strict generalisation of this tag."""

        if self == other or self.language != other.language:
            return False
        if not other.region:
            return True
        return self.region == other.region and not other.variant and bool(self.variant)

    def fallback_chain(self, default: LocaleTag) -> tuple[LocaleTag, ...]:
        """Return the ordered, de-duplicated tiers consulted for a lookup.

        The chain is the exact tag, then ``language_REGION`` when a variant is
        present, then the bare language when a region is present, and finally
        ``default``.
        """

        candidates = [self]
        if self.variant:
            candidates.append(self.without_variant())
        if self.region:
            candidates.append(self.language_only())
        candidates.append(default)

        chain: list[LocaleTag] = []
        for candidate in candidates:
            if candidate not in chain:
                chain.append(candidate)
        return tuple(chain)

    def __str__(self) -> str:
        return "_".join(part for part in (self.language, self.region, self.variant) if part)


def is_resource_locale(text: str) -> bool:
    """Whether ``text`` is a well-formed locale suffix of a resource file name."""

    return _RESOURCE_LOCALE.fullmatch(text) is not None


__all__ = ["LocaleTag", "is_resource_locale"]
