"""Exceptions raised when a string is not a valid qualified name."""


class IllegalNameException(ValueError):
    """Raised when trying to build a QName from an invalid string.

    ``name`` is the whole input, ``fragment`` the part of it that broke a
    grammar rule and ``reason`` says which rule that was.
    """

    def __init__(self, name, reason, fragment=None):
        self.name = name
        self.reason = reason
        self.fragment = name if fragment is None else fragment
        if name:
            message = 'An error occurred while building QName from "%s". %s' % (name, reason)
        else:
            message = reason
        super().__init__(message)
