from prio.queue.heap import EmptyHeapError, MinimumHeap
from prio.queue.logger import Logger
from prio.queue.node import HeapNode
from prio.queue.priority_queue import HeapPriorityQueue, PriorityQueue
from prio.queue.settings import Settings

__all__ = ["EmptyHeapError", "MinimumHeap", "HeapNode", "PriorityQueue",
           "HeapPriorityQueue", "Logger", "Settings"]
