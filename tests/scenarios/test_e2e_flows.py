"""End-to-end flows: resource on disk to validator findings."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from lexicache import (
    KEY_VALUE,
    DictionaryCache,
    DictionaryLoadError,
    DoubledParticleValidator,
    RuleAttributes,
    Sentence,
    TaggedToken,
)


def _sentence(*pairs: tuple[str, str], line: int = 1) -> Sentence:
    tokens = [TaggedToken(surface=s, tags=[t]) for s, t in pairs]
    return Sentence(content="".join(s for s, _ in pairs), tokens=tokens, line_number=line)


def test_skip_dictionary_appears_after_failed_load(tmp_path: Path) -> None:
    """A missing skip list fails loudly, then works once the file exists."""
    skip_file = tmp_path / "skip.txt"
    validator = DoubledParticleValidator()
    attributes = RuleAttributes(values={"dict": str(skip_file)})
    sentence = _sentence(("で", "助詞"), ("は", "助詞"), ("で", "助詞"), ("走る", "動詞"))

    with pytest.raises(DictionaryLoadError):
        validator.validate(sentence, attributes)

    skip_file.write_text("で\n", encoding="utf-8")

    assert validator.validate(sentence, attributes) == []


def test_many_documents_share_one_load(tmp_path: Path) -> None:
    """Validators running in a pool read the skip list once."""
    skip_file = tmp_path / "skip.txt"
    skip_file.write_text("の\n", encoding="utf-8")
    validator = DoubledParticleValidator()
    attributes = RuleAttributes(values={"dict": str(skip_file), "list": "が"})

    sentences = [
        _sentence(("の", "助詞"), ("の", "助詞"), ("に", "助詞"), ("に", "助詞"), line=i)
        for i in range(1, 33)
    ]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda s: validator.validate(s, attributes), sentences))

    assert all([f.surface for f in findings] == ["に"] for findings in results)
    assert [r[0].sentence.line_number for r in results] == list(range(1, 33))
    assert len(validator.skip_cache) == 1


def test_key_value_file_with_bad_lines(tmp_path: Path) -> None:
    """Malformed lines are dropped without failing the dictionary."""
    path = tmp_path / "pairs.tsv"
    path.write_text("a\tb\nbroken\nx\ty\tz\nc\td", encoding="utf-8")
    cache = DictionaryCache(KEY_VALUE, source="filesystem")

    assert cache.get_or_load(str(path), "pairs") == {"a": "b", "c": "d"}
