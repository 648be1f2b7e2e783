"""
Request sequencing.

Store requests are not cancelled when superseded, so responses can arrive
out of order. Tag each request with a ticket and only apply the response
if its ticket is still the latest one.

Example:
    ticket = self._sequencer.next()
    page = await store.list_vocab(query)
    if not self._sequencer.is_current(ticket):
        return  # a newer query was issued meanwhile
"""


class RequestSequencer:
    """Monotonic ticket counter for one kind of request."""

    def __init__(self) -> None:
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def next(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, ticket: int) -> bool:
        return ticket == self._latest
