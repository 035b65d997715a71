class HeapNode(object):
    """
    Contains the data and its key.
    """
    __slots__ = ("key", "data")

    def __init__(self, key, data):
        self.key = key
        self.data = data

    def __iter__(self):
        return iter((self.key, self.data))

    def __repr__(self):
        return "HeapNode(%r, %r)" % (self.key, self.data)

    def __str__(self):
        return "[%s:%s]" % (self.key, self.data)
