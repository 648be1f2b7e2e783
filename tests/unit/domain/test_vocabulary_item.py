"""Tests for the VocabularyItem entity and VocabId."""

from datetime import timedelta

import pytest

from tests.conftest import NOW, make_item
from vocab_trainer.domain.common.exceptions import DomainError
from vocab_trainer.domain.vocabulary.entities import VocabId, VocabularyItem


class TestVocabId:
    def test_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            VocabId(0)

    def test_value_semantics(self) -> None:
        assert VocabId(3) == VocabId(3)
        assert hash(VocabId(3)) == hash(VocabId(3))
        assert int(VocabId(3)) == 3
        assert VocabId(3).to_primitive() == 3


class TestVocabularyItem:
    @pytest.mark.parametrize(
        ("term", "translation"),
        [("", "gato"), ("cat", "  "), ("\u3000", "gato"), ("cat", "\ufeff\u00a0")],
    )
    def test_term_and_translation_required(self, term: str, translation: str) -> None:
        with pytest.raises(DomainError):
            VocabularyItem(
                id=VocabId(1),
                term=term,
                translation=translation,
                knowledge_level=0,
                practice_at=NOW,
            )

    def test_control_characters_are_not_whitespace(self) -> None:
        item = make_item(1, term="\x1c", translation="gato")
        assert item.term == "\x1c"

    def test_knowledge_level_not_negative(self) -> None:
        with pytest.raises(DomainError):
            make_item(1, knowledge_level=-1)

    def test_equality_by_identity(self) -> None:
        assert make_item(1, term="cat") == make_item(1, term="dog")
        assert make_item(1) != make_item(2)

    @pytest.mark.parametrize(
        ("offset", "expected"),
        [
            (timedelta(days=3), 3),
            (timedelta(days=2, hours=1), 3),
            (timedelta(0), 0),
            (timedelta(hours=-5), 0),
            (timedelta(days=-2), -2),
        ],
    )
    def test_days_until_practice_rounds_up(self, offset: timedelta, expected: int) -> None:
        due = VocabularyItem(
            id=VocabId(1),
            term="cat",
            translation="gato",
            knowledge_level=1,
            practice_at=NOW + offset,
        )
        assert due.days_until_practice(NOW) == expected
