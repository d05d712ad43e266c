import pytest
from click.testing import CliRunner


@pytest.fixture
def valid_prefixes():
    "provide prefixes that are valid XML names not starting with 'xml'"
    return ["_param", "ar7-me", "_p7txd", "prefix", "a", "xm", "XmI",
            "ns.v1", "\u00f1and\u00fa", "\u03a9mega"]


@pytest.fixture
def valid_localnames():
    "provide local names of one, two and three or more characters"
    return ["Luis", "A.G.n ag", "na me.", "name", ".", "..", "a", "ab", ".a",
            "x y", "\u00e9", "\u540d\u524d", "v1.0", "_"]


@pytest.fixture
def valid_simplenames():
    "provide names without a prefix"
    return ["justAname", "a", ".a", "a.", "ab", "na me.", "..a", "1", "-",
            "a b", "justAn\u2785\u3370ame"]


@pytest.fixture
def runner():
    "provide a runner for the command line tool"
    return CliRunner()
