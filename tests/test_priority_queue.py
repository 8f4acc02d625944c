# pylint: disable=missing-function-docstring
from concurrent.futures import ThreadPoolExecutor

import pytest

from task_queue import PriorityQueue, Task, TaskPriority


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("high", TaskPriority.HIGH),
        ("medium", TaskPriority.MEDIUM),
        ("low", TaskPriority.LOW),
        (TaskPriority.HIGH, TaskPriority.HIGH),
        (None, TaskPriority.LOW),
        ("", TaskPriority.LOW),
        ("urgent", TaskPriority.LOW),
        ("HIGH", TaskPriority.LOW),
        (3, TaskPriority.LOW),
    ],
)
def test_priority_parse(raw, expected):
    assert TaskPriority.parse(raw) is expected


def test_task_normalizes_priority_on_construction():
    task = Task(body="x", priority="bogus")
    assert task.priority is TaskPriority.LOW
    assert task.to_dict() == {"body": "x", "priority": "low"}


def test_task_defaults_to_low():
    assert Task(body="x").priority is TaskPriority.LOW


def test_task_is_immutable():
    task = Task(body="x", priority="high")
    with pytest.raises(AttributeError):
        task.body = "y"


def test_identical_tasks_are_queued_independently():
    queue = PriorityQueue("dup")
    queue.push(Task("same", "high"))
    queue.push(Task("same", "high"))

    assert len(queue) == 2
    assert queue.pop() == Task("same", "high")
    assert queue.pop() == Task("same", "high")
    assert queue.pop() is None


def test_pop_empty_queue_returns_none_repeatedly():
    queue = PriorityQueue("empty")
    for _ in range(3):
        assert queue.pop() is None
    assert len(queue) == 0


def test_higher_tier_served_first():
    queue = PriorityQueue("q")
    queue.push(Task("l", "low"))
    queue.push(Task("m", "medium"))
    queue.push(Task("u", "unknown"))
    queue.push(Task("h", "high"))

    assert [queue.pop().body for _ in range(4)] == ["h", "m", "l", "u"]
    assert queue.pop() is None


def test_fifo_within_tier():
    queue = PriorityQueue("q")
    queue.push(Task("a", "high"))
    queue.push(Task("b", "high"))

    assert queue.pop().body == "a"
    assert queue.pop().body == "b"


def test_mixed_priorities_scenario():
    queue = PriorityQueue("q")
    queue.push(Task("a", "high"))
    queue.push(Task("b", "low"))
    queue.push(Task("c", "high"))

    assert [queue.pop().body for _ in range(3)] == ["a", "c", "b"]
    assert queue.pop() is None


def test_interleaved_push_pop_keeps_fifo():
    queue = PriorityQueue("q")
    queue.push(Task("a", "medium"))
    queue.push(Task("b", "medium"))
    assert queue.pop().body == "a"
    queue.push(Task("c", "medium"))
    queue.push(Task("z", "high"))

    assert [queue.pop().body for _ in range(3)] == ["z", "b", "c"]


def test_depths_per_tier():
    queue = PriorityQueue("q")
    queue.push(Task("a", "high"))
    queue.push(Task("b", "low"))
    queue.push(Task("c"))

    assert queue.depths() == {"high": 1, "medium": 0, "low": 2}
    assert len(queue) == 3


def test_concurrent_pushes_lose_nothing():
    queue = PriorityQueue("q")
    bodies = [f"task-{i}" for i in range(500)]

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda body: queue.push(Task(body, "medium")), bodies))

    popped = []
    while True:
        task = queue.pop()
        if task is None:
            break
        popped.append(task.body)

    assert sorted(popped) == sorted(bodies)
    assert len(set(popped)) == len(bodies)


def test_concurrent_pops_return_each_task_once():
    queue = PriorityQueue("q")
    for i in range(300):
        queue.push(Task(str(i), "low"))

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(lambda _: queue.pop(), range(400)))

    bodies = [task.body for task in results if task is not None]
    assert sorted(bodies, key=int) == [str(i) for i in range(300)]
    assert results.count(None) == 100
