from collections.abc import MutableSet


class ArraySet(MutableSet):
    """
    A set backed by a list.

    Elements are kept in insertion order and membership is a linear scan,
    so this is only good for small, more or less immutable collections
    (parents of a node, children of a node, the variables of a small network).
    Elements need not be hashable, duplicates are detected with ==.
    """

    def __init__(self, elements=()):
        """
        elements: an optional iterable, duplicates are dropped
        """
        self._elements = []
        for element in elements:
            self.add(element)

    def __contains__(self, element):
        return any(e == element for e in self._elements)

    def __iter__(self):
        return iter(self._elements)

    def __len__(self):
        return len(self._elements)

    def add(self, element):
        """Append the element unless an equal one is present, return whether it was added"""
        if element in self:
            return False
        self._elements.append(element)
        return True

    def discard(self, element):
        for i, e in enumerate(self._elements):
            if e == element:
                del self._elements[i]
                return

    @classmethod
    def from_distinct(cls, elements):
        """
        Return an ArraySet holding the elements as given, without looking for duplicates.

        elements: an iterable whose elements are already known to be distinct objects
            (e.g. variables, which are told apart by identity even if they compare equal)
        """
        s = cls()
        s._elements = list(elements)
        return s

    def copy(self):
        """Return a shallow copy"""
        return ArraySet.from_distinct(self._elements)

    def __repr__(self):
        return "ArraySet([%s])" % ', '.join(repr(e) for e in self._elements)
