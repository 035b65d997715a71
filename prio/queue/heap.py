from prio.queue.logger import Logger
from prio.queue.node import HeapNode
from prio.queue.settings import settings


class EmptyHeapError(Exception):
    pass


class MinimumHeap(Logger):
    """
    Binary heap storing arbitrary data with orderable keys. The nodes live in
    a plain list interpreted as a complete binary tree: node i has children
    2i+1 and 2i+2 and parent (i-1)//2.
    """

    def __init__(self, size=None, compare=None):
        """
        :param size: Initial capacity hint, the list grows beyond it as needed.
        Defaults to settings.initial_capacity.
        :param compare: Optional three-way comparison function of two keys
        (negative, zero or positive). Natural key ordering is used if None.
        """
        super(MinimumHeap, self).__init__()
        if size is None:
            size = settings.initial_capacity
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError("size must be an integer (got %s)" % type(size))
        if size < 0:
            raise ValueError("size must not be negative (got %d)" % size)
        if compare is not None and not callable(compare):
            raise TypeError("compare must be callable")
        self._capacity = size
        self._compare = compare
        self._list = []

    @property
    def capacity(self):
        """
        Advisory bookkeeping only: the number doubles once the heap outgrows
        it, but the backing list neither reserves nor limits storage.
        """
        return self._capacity

    def is_empty(self):
        return not self._list

    def size(self):
        return len(self._list)

    def peek_min(self):
        if not self._list:
            raise EmptyHeapError("Heap is empty")
        return self._list[0].data

    def insert(self, key, value):
        if len(self._list) >= self._capacity:
            self._grow()
        self._list.append(HeapNode(key, value))
        self._sift_up(len(self._list) - 1)

    def remove_min(self):
        if not self._list:
            raise EmptyHeapError("Heap is empty")
        last = self._list.pop()
        if self._list:
            self._list[0] = last
            self._sift_down(0)

    def _grow(self):
        capacity = max(1, self._capacity * 2)
        self.debug("Growing capacity %d -> %d", self._capacity, capacity)
        self._capacity = capacity

    def _greater(self, left, right):
        if self._compare is None:
            return left > right
        return self._compare(left, right) > 0

    def _sift_up(self, index):
        nodes = self._list
        while index > 0:
            parent = (index - 1) // 2
            if not self._greater(nodes[parent].key, nodes[index].key):
                break
            nodes[parent], nodes[index] = nodes[index], nodes[parent]
            index = parent

    def _sift_down(self, index):
        nodes = self._list
        count = len(nodes)
        while True:
            left = 2 * index + 1
            right = left + 1
            if left >= count:
                return
            # left wins ties
            if right < count and \
                    self._greater(nodes[left].key, nodes[right].key):
                child = right
            else:
                child = left
            if not self._greater(nodes[index].key, nodes[child].key):
                return
            nodes[index], nodes[child] = nodes[child], nodes[index]
            index = child

    def __len__(self):
        return len(self._list)

    def __iter__(self):
        return (tuple(node) for node in self._list)

    def __str__(self):
        return "[%s]" % ",".join(str(node) for node in self._list)
