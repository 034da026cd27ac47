import pytest

from smallmem.rlist import RList

ITEMS = 7


class Item:
    def __init__(self, no):
        self.no = no
        self.link = RList(self)


@pytest.fixture
def items():
    return [Item(i) for i in range(ITEMS)]


def make_tail_list(items):
    head = RList()
    for item in items:
        head.add_tail(item.link)
    return head


def test_new_list_is_empty():
    head = RList()
    assert head.is_empty()
    assert head.first() is None
    assert head.last() is None


def test_swap_of_empty_lists_keeps_them_empty():
    head2 = RList()
    empty = RList()
    head2.swap(empty)
    assert empty.is_empty()
    assert head2.is_empty()


def test_swap_moves_content(items):
    head = make_tail_list(items)
    head2 = RList()
    head.swap(head2)
    assert head.is_empty()
    assert head2.first() is items[0].link
    assert head2.last() is items[-1].link
    assert list(head2) == [item.link for item in items]
    assert list(reversed(head2)) == [item.link for item in reversed(items)]

    head2.swap(head)
    assert head2.is_empty()
    assert head.first() is items[0].link
    assert head.first() is not items[-1].link
    assert head.last() is items[-1].link
    assert head.last() is not items[0].link
    assert head.next is items[0].link
    assert head.prev is items[-1].link
    assert list(head) == [item.link for item in items]
    assert list(reversed(head)) == [item.link for item in reversed(items)]


def test_swap_two_non_empty_lists(items):
    head = make_tail_list(items[:3])
    head2 = make_tail_list(items[3:])
    head.swap(head2)
    assert list(head.entries()) == items[3:]
    assert list(head2.entries()) == items[:3]
    assert list(head.entries_reversed()) == list(reversed(items[3:]))


def test_entries(items):
    head = make_tail_list(items)
    assert items[0].link.entry is items[0]
    assert head.first().entry is items[0]
    assert items[0].link.next.entry is items[1]
    assert items[2].link.prev.entry is items[1]
    assert list(head.entries()) == items
    assert list(head.entries_reversed()) == list(reversed(items))


def test_delete_and_move(items):
    head = make_tail_list(items)
    head2 = RList()
    items[2].link.delete()
    assert head2.is_empty()
    assert items[2].link.is_empty()
    head2.move(items[3].link)
    assert not head2.is_empty()
    assert head2.first().entry is items[3]
    head2.move_tail(items[4].link)
    expected = [items[0], items[1], items[5], items[6]]
    assert list(head.entries()) == expected
    assert list(head.entries_reversed()) == list(reversed(expected))
    assert list(head2.entries()) == [items[3], items[4]]


def test_add_inserts_at_head(items):
    head = RList()
    for item in items:
        head.add(item.link)
    assert list(head.entries_reversed()) == items
    assert list(head.entries()) == list(reversed(items))


def test_prev_entry_or_none(items):
    head = RList()
    head.add(items[0].link)
    assert items[0].link.prev_entry_or_none(head) is None
    head.add_tail(items[1].link)
    assert items[1].link.prev_entry_or_none(head) is items[0]


def test_reverse_iteration_is_safe_against_removal(items):
    head = RList()
    assert list(head.entries_reversed()) == []
    for item in items:
        head.add(item.link)
    seen = []
    for entry in head.entries_reversed():
        entry.link.delete()
        seen.append(entry)
    assert seen == items
    assert head.is_empty()


def test_forward_iteration_is_safe_against_removal(items):
    head = make_tail_list(items)
    seen = []
    for entry in head.entries():
        entry.link.delete()
        seen.append(entry.no)
    assert seen == list(range(ITEMS))
    assert head.is_empty()


def test_cut_before(items):
    head = RList()
    head2 = RList()
    head.add(items[0].link)
    head2.cut_before(head, head.next)
    assert head2.is_empty()
    for item in items[1:]:
        head.add_tail(item.link)
    head2.cut_before(head, head.next)
    assert head2.is_empty()
    head2.cut_before(head, items[ITEMS // 2].link)
    assert list(head2.entries()) == items[: ITEMS // 2]
    assert list(head.entries()) == items[ITEMS // 2 :]


def test_shift_and_shift_tail(items):
    head = make_tail_list(items[:3])
    first = head.shift()
    assert first is items[0].link
    assert first.is_empty()
    last = head.shift_tail()
    assert last is items[2].link
    assert last.is_empty()
    assert list(head.entries()) == [items[1]]


def test_shift_from_empty_raises():
    head = RList()
    with pytest.raises(IndexError):
        head.shift()
    with pytest.raises(IndexError):
        head.shift_tail()


def test_splice(items):
    head = make_tail_list(items[:2])
    other = make_tail_list(items[2:4])
    head.splice(other)
    assert other.is_empty()
    assert list(head.entries()) == [items[2], items[3], items[0], items[1]]
    assert list(head.entries_reversed()) == [
        items[1], items[0], items[3], items[2]
    ]


def test_splice_tail(items):
    head = make_tail_list(items[:2])
    other = make_tail_list(items[2:4])
    head.splice_tail(other)
    assert other.is_empty()
    assert list(head.entries()) == items[:4]
    assert list(head.entries_reversed()) == list(reversed(items[:4]))


def test_splice_empty_is_noop(items):
    head = make_tail_list(items[:2])
    head.splice(RList())
    head.splice_tail(RList())
    assert list(head.entries()) == items[:2]