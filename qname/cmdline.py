import sys
import logging
import click

from qname.qname import QName
from qname.exceptions import IllegalNameException

DEFAULT_LOGLEVEL = "INFO"

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


def setup_logger(name, loglevel):
    level = getattr(logging, loglevel)
    logging.basicConfig(level=level)
    return logging.getLogger(name)


def showName(qname):
    print(" name: %s" % qname.getFullname())
    if qname.getPrefix() is not None:
        print("  - prefix: %s" % qname.getPrefix())
    print("  - localname: %s\n" % qname.getLocalname())


def showError(name, error):
    print(" name: %s" % name)
    print("  - error: %s\n" % error.reason)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument('names', nargs=-1, required=True)
@click.option('--quiet', '-q', is_flag=True,
              help='Print nothing, only report through the exit status')
@click.option('--loglevel', '-l',  default=DEFAULT_LOGLEVEL, show_default=True,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
              help='Log level')
def main(names, quiet, loglevel):
    "Check & split qualified names of the form [PREFIX:]LOCALNAME"

    logger = setup_logger("qname", loglevel)

    invalid = 0
    for name in names:
        try:
            qname = QName.parse(name)
        except IllegalNameException as ex:
            invalid += 1
            logger.debug("rejected %r: %s", name, ex.reason)
            if not quiet:
                showError(name, ex)
        else:
            if not quiet:
                showName(qname)

    logger.info("%d of %d names valid", len(names) - invalid, len(names))

    if invalid:
        sys.exit(1)
