from abc import ABC, abstractmethod

from prio.queue.heap import MinimumHeap
from prio.queue.logger import Logger


class PriorityQueue(ABC):
    @abstractmethod
    def is_empty(self):
        pass

    @abstractmethod
    def insert_with_priority(self, priority, item):
        """
        Add an element to the queue with an associated priority.
        """

    @abstractmethod
    def pop(self):
        """
        Remove the element with the highest priority (the lowest key) from
        the queue and return it.
        """

    @abstractmethod
    def peek(self):
        """
        Look at the element with the highest priority without removing it.
        """


class HeapPriorityQueue(PriorityQueue, Logger):
    """
    Priority queue which uses MinimumHeap for the backend.
    """

    def __init__(self, initial_size=None, compare=None):
        super(HeapPriorityQueue, self).__init__()
        self._heap = MinimumHeap(initial_size, compare)

    def is_empty(self):
        return self._heap.is_empty()

    def insert_with_priority(self, priority, item):
        self._heap.insert(priority, item)
        self.debug("Pushed %s -> %s (size %d)",
                   priority, item, self._heap.size())

    def pop(self):
        # remove_min() overwrites the root, so read it first
        item = self._heap.peek_min()
        self._heap.remove_min()
        self.debug("Popped %s (size %d)", item, self._heap.size())
        return item

    def peek(self):
        return self._heap.peek_min()

    def __len__(self):
        return len(self._heap)

    def __str__(self):
        return str(self._heap)
