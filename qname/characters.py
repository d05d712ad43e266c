"""Character classes the qualified name grammar is built from.

Every predicate takes a single codepoint (a one character ``str``).
Classification follows the Unicode general categories, so letters and
digits outside of ASCII are accepted wherever ASCII ones are.
"""

import unicodedata


#: Codepoints a one character simple name cannot consist of
SIMPLE_NAME_EXCLUDED = frozenset(".:/[]*'\"|")

#: Codepoints excluded from the ``nonspace`` class; '.' is allowed here
NONSPACE_EXCLUDED = SIMPLE_NAME_EXCLUDED - {"."}

#: Punctuation allowed after the leading letters of an XML name
XML_NAME_PUNCTUATION = frozenset("-_.")

#: The only whitespace codepoint a name may contain, and only inside it
SPACE = " "

#: Separator between prefix and local name
COLON = ":"

#: Prefixes may not start with these three letters, in any case
RESERVED_PREFIX = "xml"


def isAlpha(char):
    "letter of any script (general category L*)"
    return unicodedata.category(char).startswith("L")


def isAlnum(char):
    "letter or decimal digit of any script"
    category = unicodedata.category(char)
    return category.startswith("L") or category == "Nd"


def isNonSpace(char):
    return not char.isspace() and char not in NONSPACE_EXCLUDED


def isSimpleNameChar(char):
    return not char.isspace() and char not in SIMPLE_NAME_EXCLUDED


def isNameChar(char):
    """Codepoint allowed strictly inside a name of three or more characters:
    a ``nonspace`` codepoint or the literal space."""
    return char == SPACE or isNonSpace(char)
