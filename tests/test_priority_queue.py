from floorpath.nav.coordinate import Coordinate
from floorpath.nav.priority_queue import PriorityQueue


def test_get_returns_elements_in_non_decreasing_priority() -> None:
    queue: PriorityQueue[str] = PriorityQueue()
    priorities = [5.0, 1.5, 3.2, 0.0, 9.9, 3.2, 2.7, 7.1, 0.5]
    for index, priority in enumerate(priorities):
        queue.put(f"item-{index}", priority)

    popped = []
    while not queue.is_empty:
        item = queue.get()
        popped.append(priorities[int(item.split("-")[1])])

    assert popped == sorted(priorities)


def test_get_on_empty_queue_returns_none() -> None:
    queue: PriorityQueue[int] = PriorityQueue()
    assert queue.get() is None

    queue.put(1, 1.0)
    assert queue.get() == 1
    assert queue.get() is None
    assert len(queue) == 0


def test_elements_need_not_be_comparable() -> None:
    queue: PriorityQueue[Coordinate] = PriorityQueue()
    queue.put(Coordinate(1, 1), 2.0)
    queue.put(Coordinate(0, 0), 2.0)
    queue.put(Coordinate(2, 2), 1.0)

    assert len(queue) == 3
    assert queue.get() == Coordinate(2, 2)
    assert queue.get() == Coordinate(1, 1)
    assert queue.get() == Coordinate(0, 0)


def test_equal_priorities_come_back_in_insertion_order() -> None:
    queue: PriorityQueue[str] = PriorityQueue()
    for name in ("c", "a", "b"):
        queue.put(name, 1.0)
    queue.put("first", 0.5)

    assert [queue.get() for _ in range(4)] == ["first", "c", "a", "b"]
