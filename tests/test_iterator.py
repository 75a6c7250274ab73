import pytest

from patternkit.iterator import ConcreteAggregate, ConcreteIterator, main


def _walk(iterator):
    seen = []
    iterator.first()
    while not iterator.is_done():
        seen.append(iterator.current_item())
        iterator.next()
    return seen


@pytest.fixture
def aggregate():
    agg = ConcreteAggregate()
    for item in (4, 8, 15):
        agg.add_item(item)
    return agg


def test_walk_yields_items_in_order(aggregate):
    assert _walk(aggregate.create_iterator()) == [4, 8, 15]


def test_len_and_indexing(aggregate):
    assert len(aggregate) == 3
    assert aggregate[0] == 4
    assert aggregate[2] == 15


def test_current_item_past_end_raises(aggregate):
    iterator = aggregate.create_iterator()
    for _ in range(3):
        iterator.next()
    assert iterator.is_done()
    with pytest.raises(IndexError, match="Iterator out of range"):
        iterator.current_item()


def test_next_does_not_move_past_end(aggregate):
    iterator = aggregate.create_iterator()
    for _ in range(10):
        iterator.next()
    iterator.first()
    assert iterator.current_item() == 4


def test_empty_aggregate_is_done_at_once():
    iterator = ConcreteAggregate().create_iterator()
    assert iterator.is_done()
    with pytest.raises(IndexError):
        iterator.current_item()


def test_iterator_sees_items_added_later(aggregate):
    iterator = aggregate.create_iterator()
    aggregate.add_item(16)
    assert _walk(iterator) == [4, 8, 15, 16]


def test_iterator_over_plain_list():
    assert _walk(ConcreteIterator([1, 2])) == [1, 2]


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == ["Item: 1", "Item: 2", "Item: 3"]