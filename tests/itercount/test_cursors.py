from __future__ import annotations

from array import array
from copy import copy

import pytest

from itercount.cursors import (
    IterCursor,
    SeqCursor,
    SeqRef,
    ValueRef,
    begin,
    distance,
    end,
    endpoints,
    rbegin,
    rend,
)
from itercount.defaults import Step


class Node:
    def __init__(self, value: str, next: Node | None = None) -> None:
        self.value = value
        self.next = next


class NodeRef:
    def __init__(self, node: Node) -> None:
        self.node = node

    def get(self) -> str:
        return self.node.value

    def set(self, value: str, /) -> None:
        self.node.value = value


class NodeCursor:
    """Forward-only cursor with nothing but advance, dereference and equality."""

    def __init__(self, node: Node | None) -> None:
        self.node = node

    def advance(self) -> NodeCursor:
        assert self.node is not None
        self.node = self.node.next
        return self

    def get(self) -> str:
        return self.ref().get()

    def ref(self) -> NodeRef:
        assert self.node is not None
        return NodeRef(self.node)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NodeCursor) and self.node is other.node


def walk(cursor: SeqCursor[str] | IterCursor[str], last: object) -> list[str]:
    values: list[str] = []
    while cursor != last:
        values.append(cursor.get())
        _ = cursor.advance()
    return values


def test_seq_cursor_forward_and_reverse():
    letters = list("ABCD")
    assert walk(begin(letters), end(letters)) == ["A", "B", "C", "D"]
    assert walk(rbegin(letters), rend(letters)) == ["D", "C", "B", "A"]
    assert begin(letters).step is Step.FORWARD
    assert rend(letters).step is Step.REVERSE


def test_seq_cursor_out_of_range():
    letters = list("AB")
    with pytest.raises(IndexError):
        _ = end(letters).get()
    # position -1 must not wrap around to the last element
    with pytest.raises(IndexError):
        _ = rend(letters).get()
    with pytest.raises(IndexError):
        SeqRef(letters, 5).set("Z")


def test_seq_cursor_arithmetic():
    letters = list("ABCDEFG")
    first = begin(letters)
    assert isinstance(first, SeqCursor)
    assert (first + 3).get() == "D"
    assert (first + 3) - 2 == first + 1
    assert (first + 3) - first == 3
    assert first - (first + 3) == -3

    last = rbegin(letters)
    assert isinstance(last, SeqCursor)
    assert (last + 1).get() == "F"
    assert rend(letters) - last == len(letters)

    with pytest.raises(ValueError, match="different sequences"):
        _ = first - SeqCursor(list("ABCDEFG"), 0)


def test_seq_cursor_equality_needs_same_sequence():
    letters = list("AB")
    assert SeqCursor(letters, 1) == SeqCursor(letters, 1)
    assert SeqCursor(letters, 1) != SeqCursor(list("AB"), 1)
    assert SeqCursor(letters, 0) != SeqCursor(letters, 1)


def test_seq_cursor_copy_is_independent():
    letters = list("ABC")
    cursor = SeqCursor(letters, 0)
    clone = copy(cursor).advance()
    assert cursor.get() == "A"
    assert clone.get() == "B"


def test_seq_ref_writes_through():
    numbers = [1, 2, 3]
    SeqCursor(numbers, 1).ref().set(20)
    assert numbers == [1, 20, 3]

    block = array("i", [1, 2, 3])
    SeqCursor(block, 2).ref().set(30)
    assert block.tolist() == [1, 2, 30]

    with pytest.raises(TypeError):
        SeqCursor((1, 2, 3), 0).ref().set(10)


def test_seq_cursor_rejects_unknown_step():
    with pytest.raises(ValueError):
        _ = SeqCursor([1], 0, 2)


def test_iter_cursor_walks_any_iterable():
    assert walk(IterCursor({"x": 1, "y": 2}), IterCursor.end()) == ["x", "y"]
    assert walk(IterCursor({"x": 1, "y": 2}, reverse=True), IterCursor.end()) == [
        "y",
        "x",
    ]
    assert sorted(walk(IterCursor({"p", "q"}), IterCursor.end())) == ["p", "q"]


def test_iter_cursor_rejects_reverse_of_unordered():
    with pytest.raises(TypeError, match="not reversible"):
        _ = IterCursor({1, 2}, reverse=True)


def test_iter_cursor_past_the_end():
    cursor = IterCursor(["only"])
    assert cursor.pos == 0
    _ = cursor.advance()
    assert cursor.pos == 1
    assert cursor.exhausted
    assert cursor == IterCursor.end()
    with pytest.raises(IndexError):
        _ = cursor.get()
    with pytest.raises(IndexError):
        _ = cursor.advance()


def test_iter_cursor_empty_source_equals_end():
    assert IterCursor(set[int]()) == IterCursor.end()
    assert IterCursor({1}) != IterCursor.end()


def test_iter_cursor_copy_of_started_cursor():
    cursor = IterCursor([1, 2, 3])
    _ = cursor.advance()
    clone = copy(cursor)
    _ = clone.advance()
    assert cursor.get() == 2
    assert clone.get() == 3
    assert cursor != clone
    _ = cursor.advance()
    assert cursor == clone


def test_iter_cursor_ref_is_read_only():
    ref = IterCursor({"k": "v"}.items()).ref()
    assert isinstance(ref, ValueRef)
    assert ref.get() == ("k", "v")
    with pytest.raises(TypeError, match="read-only"):
        ref.set(("k", "w"))


def test_endpoints():
    letters = "ABC"
    first, last = endpoints(letters, Step.REVERSE)
    assert walk(first, last) == ["C", "B", "A"]
    first, last = endpoints({"a": 1}.keys())
    assert isinstance(first, IterCursor)
    assert walk(first, last) == ["a"]


def test_distance():
    letters = list("ABCDEFG")
    assert distance(begin(letters), begin(letters) + 3) == 3
    assert distance(begin(letters) + 3, begin(letters)) == 3
    assert distance(rbegin(letters), rend(letters)) == 7
    assert distance(IterCursor(letters), IterCursor.end()) == 7
    assert distance(begin(letters), begin(letters)) == 0


def test_distance_walks_plain_cursors_without_moving_them():
    tail = Node("C")
    head = Node("A", Node("B", tail))
    first = NodeCursor(head)
    assert distance(first, NodeCursor(None)) == 3
    assert distance(first, NodeCursor(tail)) == 2
    assert first.node is head
