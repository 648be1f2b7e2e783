"""Confirmed deletion of vocab items, shared by the list and add views."""

import structlog

from vocab_trainer.application.protocols.navigation import Confirmer
from vocab_trainer.application.protocols.vocab_store import VocabStoreProtocol
from vocab_trainer.domain.vocabulary.entities import VocabularyItem
from vocab_trainer.exceptions import VocabStoreError

logger = structlog.get_logger(__name__)


def delete_confirmation_message(item: VocabularyItem) -> str:
    return (
        "Do you really want to delete this vocab?\n\n"
        f"term: {item.term}\ntranslation: {item.translation}"
    )


async def confirm_and_delete(
    store: VocabStoreProtocol, confirmer: Confirmer, item: VocabularyItem
) -> bool:
    """
    Ask the user, then delete the item.

    Store failures are logged, not raised; callers refresh their view
    either way.

    Returns:
        False if the user declined and no request was sent, True otherwise
    """
    if not confirmer.confirm(delete_confirmation_message(item)):
        return False

    try:
        await store.delete_vocab(item.id)
    except VocabStoreError as e:
        logger.error("vocab_delete_failed", vocab_id=item.id.value, error=str(e), exc_info=True)
    else:
        logger.info("deleted_vocab", vocab_id=item.id.value)
    return True
