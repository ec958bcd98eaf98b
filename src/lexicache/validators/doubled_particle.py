"""Detect a Japanese case particle (助詞) used twice in one sentence.

Sentences such as 「私は彼は好きだ」 repeat the same particle and usually
read better rephrased. Particles listed in the ``list`` attribute, or in the
word list file named by the ``dict`` attribute, are never reported.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import AbstractSet, Optional

from lexicache.dictionary.cache import DictionaryCache
from lexicache.dictionary.parsers import WORD
from lexicache.dictionary.resolver import ResourceSource
from lexicache.models import Finding, Sentence
from lexicache.utils.logging import configure_module_logger
from lexicache.validators.base import RuleAttributes, Validator

logger = configure_module_logger(__name__, level=logging.INFO)

PARTICLE_TAG = "助詞"
MIN_REPEAT = 2

SKIP_LIST_ATTRIBUTE = "list"
SKIP_DICT_ATTRIBUTE = "dict"


def find_repeated_markers(
    sentence: Sentence,
    exclusions: AbstractSet[str] = frozenset(),
    marker_tag: str = PARTICLE_TAG,
    validator_name: str = "DoubledParticle",
) -> list[Finding]:
    """Report every *marker_tag* surface occurring at least twice.

    Only a token's first tag is compared. Findings come out in the order
    each surface first appears in the sentence.

    Args:
        sentence: Tokenized sentence to scan.
        exclusions: Surfaces that are never reported.
        marker_tag: Tag identifying the tokens to count.
        validator_name: Name recorded on each finding.

    Returns:
        One :class:`Finding` per repeated, non-excluded surface.
    """
    counts: Counter[str] = Counter(
        token.surface for token in sentence.tokens if token.primary_tag == marker_tag
    )
    return [
        Finding(
            validator=validator_name,
            surface=surface,
            count=count,
            sentence=sentence,
        )
        for surface, count in counts.items()
        if count >= MIN_REPEAT and surface not in exclusions
    ]


class DoubledParticleValidator(Validator):
    """Flag repeated particles; Japanese only.

    Args:
        skip_cache: Cache used to read the optional ``dict`` word list from
            the filesystem. One is created if omitted.
    """

    name = "DoubledParticle"

    def __init__(self, skip_cache: Optional[DictionaryCache[set[str]]] = None) -> None:
        self.skip_cache = skip_cache or DictionaryCache(
            WORD, source=ResourceSource.FILESYSTEM
        )

    def supported_languages(self) -> set[str]:
        return {"ja"}

    def exclusions(self, attributes: RuleAttributes) -> frozenset[str]:
        """Combine the ``list`` attribute with the ``dict`` word list file.

        Raises:
            DictionaryLoadError: If ``dict`` names a file that cannot be loaded.
        """
        skip = attributes.get_set(SKIP_LIST_ATTRIBUTE)
        dict_path = attributes.get_str(SKIP_DICT_ATTRIBUTE)
        if dict_path:
            words = self.skip_cache.get_or_load(dict_path, f"{self.name} skip list")
            skip = skip | frozenset(words)
        return skip

    def validate(
        self,
        sentence: Sentence,
        attributes: Optional[RuleAttributes] = None,
    ) -> list[Finding]:
        skip = self.exclusions(attributes or RuleAttributes())
        findings = find_repeated_markers(
            sentence, skip, marker_tag=PARTICLE_TAG, validator_name=self.name
        )
        if findings:
            logger.debug(
                f"{len(findings)} repeated particle(s) on line {sentence.line_number}"
            )
        return findings
