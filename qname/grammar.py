"""Qualified name grammar.

The rules, top-down::

    name                ::= prefixedname | simplename
    prefixedname        ::= prefix ':' localname
    prefix              ::= (* any valid XML name not starting with 'xml' *)
    simplename          ::= onecharsimplename | twocharsimplename
                          | threeormorecharname
    localname           ::= onecharlocalname | twocharlocalname
                          | threeormorecharname
    onecharsimplename   ::= (* any codepoint except '.', '/', ':', '[', ']',
                               '*', ''', '"', '|' or whitespace *)
    twocharsimplename   ::= '.' onecharsimplename
                          | onecharsimplename '.'
                          | onecharsimplename onecharsimplename
    onecharlocalname    ::= nonspace
    twocharlocalname    ::= nonspace nonspace
    threeormorecharname ::= nonspace string nonspace
    string              ::= char | string char
    char                ::= nonspace | ' '
    nonspace            ::= (* any codepoint except '/', ':', '[', ']', '*',
                               ''', '"', '|' or whitespace *)

The first colon of a name separates prefix and local name. No rule accepts
a colon anywhere else, so a name holds at most one.

Rule checks below return ``None`` when the rule holds, or a
``(fragment, reason)`` tuple describing the first violation found.
"""

from .characters import COLON, RESERVED_PREFIX, XML_NAME_PUNCTUATION, \
                        isAlpha, isAlnum, isNameChar, isNonSpace, isSimpleNameChar
from .exceptions import IllegalNameException

EMPTY_NAME_REASON = "Cannot create QName from None or empty string"


def isOneCharSimpleName(text):
    return len(text) == 1 and isSimpleNameChar(text)


def isTwoCharSimpleName(text):
    if len(text) != 2:
        return False
    first, second = text
    return (first == "." and isSimpleNameChar(second)) \
        or (second == "." and isSimpleNameChar(first)) \
        or (isSimpleNameChar(first) and isSimpleNameChar(second))


def isOneCharLocalName(text):
    return len(text) == 1 and isNonSpace(text)


def isTwoCharLocalName(text):
    return len(text) == 2 and isNonSpace(text[0]) and isNonSpace(text[1])


def isValidXmlName(text):
    "match ``_?[alpha]+[alnum-_.]*`` against the whole of TEXT"
    pos = 1 if text.startswith("_") else 0
    start = pos
    while pos < len(text) and isAlpha(text[pos]):
        pos += 1
    if pos == start:
        return False
    return all(isAlnum(char) or char in XML_NAME_PUNCTUATION for char in text[pos:])


def _threeOrMoreCharNameViolation(text, label):
    first, last = text[0], text[-1]
    if not isNonSpace(first):
        return first, "%s cannot start with '%s'" % (label, first)
    if not isNonSpace(last):
        return last, "%s cannot end with '%s'" % (label, last)
    for char in text[1:-1]:
        if not isNameChar(char):
            return char, "%s cannot contain '%s' symbol" % (label, char)
    return None


def _prefixViolation(prefix):
    start = prefix[:3]
    if len(prefix) > 2 and start.lower() == RESERVED_PREFIX:
        return start, 'Prefix cannot start with "%s"' % start
    if not isValidXmlName(prefix):
        return prefix, 'Prefix "%s" is not a valid XML name' % prefix
    return None


def _localNameViolation(localname):
    if isOneCharLocalName(localname) or isTwoCharLocalName(localname):
        return None
    # short local names only fail on their first or last codepoint
    return _threeOrMoreCharNameViolation(localname, "Localname")


def _simpleNameViolation(name):
    if isOneCharSimpleName(name) or isTwoCharSimpleName(name):
        return None
    if len(name) < 3:
        return name, 'Cannot create QName from "%s"' % name
    return _threeOrMoreCharNameViolation(name, "Name")


def _prefixedNameViolation(name, colon):
    if colon == len(name) - 1:
        return name, "Localname cannot be empty"
    return _prefixViolation(name[:colon]) or _localNameViolation(name[colon + 1:])


def _nameViolation(name):
    colon = name.find(COLON)
    if colon > 0:
        return _prefixedNameViolation(name, colon)
    return _simpleNameViolation(name)


def isValidName(text):
    "tell whether TEXT is a valid qualified name, without raising"
    return bool(text) and _nameViolation(text) is None


def split(text):
    """Validate TEXT and split it into its prefix and local name.

    Returns a ``(prefix, localname)`` tuple where prefix is ``None`` for
    names without one. Raises IllegalNameException naming the first grammar
    rule TEXT breaks.
    """
    if not text:
        raise IllegalNameException(text, EMPTY_NAME_REASON)

    violation = _nameViolation(text)
    if violation is not None:
        fragment, reason = violation
        raise IllegalNameException(text, reason, fragment)

    colon = text.find(COLON)
    if colon > 0:
        return text[:colon], text[colon + 1:]
    return None, text
