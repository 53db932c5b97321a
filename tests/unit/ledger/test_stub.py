"""
Unit tests for the chaincode stub, state iterator and transaction context.
"""

import pytest

from medichain.ledger.stub import KV, LedgerError, StateIterator, TransactionContext


def _iterator(pairs, closed_log=None):
    on_close = (lambda: closed_log.append(True)) if closed_log is not None else None
    return StateIterator(iter(pairs), on_close=on_close)


def test_iterator_has_next_and_next():
    """Entries come back in the order supplied by the backend"""
    iterator = _iterator([("A", b"1"), ("B", b"2")])

    assert iterator.has_next()
    assert iterator.has_next()  # Repeated calls do not consume entries
    assert iterator.next() == KV("A", b"1")
    assert iterator.next() == KV("B", b"2")
    assert not iterator.has_next()

    with pytest.raises(LedgerError):
        iterator.next()


def test_iterator_close_is_idempotent():
    """The close callback runs once however many times close is called"""
    closed = []
    iterator = _iterator([("A", b"1")], closed)

    iterator.close()
    iterator.close()

    assert closed == [True]
    assert iterator.closed
    with pytest.raises(LedgerError):
        iterator.has_next()


def test_iterator_context_manager_closes_on_error():
    """Leaving a with block through an exception still releases the scan"""
    closed = []
    with pytest.raises(RuntimeError):
        with _iterator([("A", b"1")], closed) as iterator:
            iterator.next()
            raise RuntimeError("abort scan")
    assert closed == [True]


def test_iterator_is_iterable():
    """Python iteration walks the remaining entries"""
    iterator = _iterator([("A", b"1"), ("B", b"2")])
    assert [kv.key for kv in iterator] == ["A", "B"]


def test_put_state_rejects_empty_key(ctx):
    """An empty key is never written"""
    with pytest.raises(LedgerError, match="key must not be an empty string"):
        ctx.get_stub().put_state("", b"{}")


def test_put_state_requires_bytes(ctx):
    """Values must be bytes"""
    with pytest.raises(LedgerError, match="must be bytes"):
        ctx.get_stub().put_state("MEDICINE0", "text")


def test_stub_reads_and_writes_world_state(ctx, storage):
    """get_state returns written bytes and None for absent keys"""
    stub = ctx.get_stub()
    stub.put_state("MEDICINE0", b'{"name":"x"}')

    assert storage.get("MEDICINE0") == b'{"name":"x"}'
    assert stub.get_state("MEDICINE0") == b'{"name":"x"}'
    assert stub.get_state("MEDICINE9") is None


def test_transaction_context_ids(storage):
    """Contexts carry a transaction id, generated when not supplied"""
    generated = TransactionContext(storage)
    explicit = TransactionContext(storage, tx_id="tx-42")

    assert generated.tx_id
    assert generated.get_stub().get_tx_id() == generated.tx_id
    assert explicit.get_stub().get_tx_id() == "tx-42"
    assert TransactionContext(storage).tx_id != generated.tx_id
