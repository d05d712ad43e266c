"""Qualified name support; see e.g. https://en.wikipedia.org/wiki/QName"""

from .characters import COLON
from .grammar import split


class QName:
    """Qualified name implementation

    Instances are built from their string form, which is validated against
    the qualified name grammar, and cannot be changed afterwards. Two
    instances are equal when their full names are.
    """

    __slots__ = ("_prefix", "_localname")

    def __init__(self, name):
        prefix, localname = split(name)
        object.__setattr__(self, "_prefix", prefix)
        object.__setattr__(self, "_localname", localname)

    @classmethod
    def parse(cls, name):
        "build a QName from NAME, raising IllegalNameException if it is not valid"
        return cls(name)

    def getPrefix(self):
        return self._prefix

    def getLocalname(self):
        return self._localname

    def getFullname(self):
        if self._prefix is None:
            return self._localname
        return self._prefix + COLON + self._localname

    prefix = property(getPrefix)
    localname = property(getLocalname)
    fullname = property(getFullname)

    def __setattr__(self, name, value):
        raise AttributeError("QName objects are immutable")

    def __delattr__(self, name):
        raise AttributeError("QName objects are immutable")

    def __reduce__(self):
        return (self.__class__, (self.getFullname(),))

    def __eq__(self, other):
        if not isinstance(other, QName):
            return NotImplemented
        return self.getFullname() == other.getFullname()

    def __hash__(self):
        return hash(self.getFullname())

    def __str__(self):
        return self.getFullname()

    def __repr__(self):
        return "QName [%s]" % self.getFullname()


parse = QName.parse
