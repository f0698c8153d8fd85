from pathtrace.algorithms.queue import PriorityQueue


class TestPriorityQueue:
    def test_dequeue_in_priority_order(self):
        pq = PriorityQueue()
        pq.enqueue("b", 2)
        pq.enqueue("c", 3)
        pq.enqueue("a", 1)
        assert [pq.dequeue(), pq.dequeue(), pq.dequeue()] == ["a", "b", "c"]

    def test_equal_priorities_are_fifo(self):
        pq = PriorityQueue()
        pq.enqueue("first", 1)
        pq.enqueue("second", 1)
        pq.enqueue("zero", 0)
        pq.enqueue("third", 1)
        assert pq.peek_all() == ("zero", "first", "second", "third")

    def test_empty_dequeue_returns_none(self):
        pq = PriorityQueue()
        assert pq.is_empty()
        assert pq.dequeue() is None
        assert len(pq) == 0

    def test_duplicates_and_reinsertion(self):
        pq = PriorityQueue()
        pq.enqueue("x", 20)
        pq.enqueue("x", 10)
        assert pq.peek_all() == ("x", "x")
        assert pq.dequeue() == "x"
        # A dequeued element may come back
        pq.enqueue("x", 5)
        assert pq.peek_all() == ("x", "x")
        assert len(pq) == 2

    def test_peek_all_does_not_mutate(self):
        pq = PriorityQueue()
        for i, name in enumerate("dcba"):
            pq.enqueue(name, 10 - i)
        before = pq.peek_all()
        assert pq.peek_all() == before == ("a", "b", "c", "d")
        assert len(pq) == 4
        assert pq.dequeue() == "a"

    def test_float_and_int_priorities_mix(self):
        pq = PriorityQueue()
        pq.enqueue("int", 1)
        pq.enqueue("float", 1.0)
        pq.enqueue("inf", float("inf"))
        assert pq.peek_all() == ("int", "float", "inf")
