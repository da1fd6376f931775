import pytest
from hypothesis import given
from hypothesis import strategies as st

from structkit.linked_queue import LinkedQueue, LinkedQueueEmptyError, main


def test_fifo_order():
    queue = LinkedQueue()
    for item in ["x", "y", "z"]:
        queue.enqueue(item)
    assert list(queue) == ["x", "y", "z"]
    assert queue.dequeue() == "x"
    assert len(queue) == 2


def test_dequeue_empty_raises():
    with pytest.raises(LinkedQueueEmptyError):
        LinkedQueue().dequeue()


def test_empty_after_draining():
    queue = LinkedQueue()
    queue.enqueue("only")
    assert queue.dequeue() == "only"
    assert not queue
    assert queue.format() == "[QUEUE IS EMPTY]\n"


def test_format():
    queue = LinkedQueue()
    queue.enqueue("WAITER 1")
    queue.enqueue("WAITER 2")
    assert queue.format() == (
        "[QUEUE SIZE: 2]\n>>>[QUEUE START]\n'WAITER 1' -> 'WAITER 2' -> \n>>>[QUEUE END]\n"
    )


@given(st.lists(st.text(max_size=5)))
def test_round_trip(items):
    queue = LinkedQueue()
    for item in items:
        queue.enqueue(item)
    assert len(queue) == len(items)
    assert [queue.dequeue() for _ in items] == items
    assert len(queue) == 0


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("[ERROR DEQUEUING - QUEUE IS EMPTY]") == 5
    assert "[DEQUEUED] WAITER 17" in out
    assert out.endswith("'WAITER 1' -> 'WAITER 2' -> \n>>>[QUEUE END]\n")