import argparse
import logging

from . import query
from . import utils
from . import password as pw
from .entry import parse
from .store import default_store_path, open_store
from .template import LIST_FORMAT, render

LOG_FORMAT = "%(levelname)s: %(message)s"
LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def setup_logging(verbose: int):
    level = LOG_LEVELS[min(verbose, len(LOG_LEVELS) - 1)]
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("pwfile").setLevel(level)


def cmd_check(args):
    path = utils.resolve_store_path(args.file, args.default_store)
    with open_store(path) as data:
        counts = query.tally(parse(data))
    print(f"{counts.active} current, {counts.inactive} inactive, "
          f"{counts.pending_change} need changing")


def cmd_gen(args):
    print(pw.generate_password())


def cmd_get(args):
    path = utils.resolve_store_path(args.file, args.default_store)
    with open_store(path) as data:
        found = query.get_entry(parse(data), args.account)
        print(render(args.format, found))


def cmd_ls(args):
    path = utils.resolve_store_path(args.file, args.default_store)
    with open_store(path) as data:
        for found in query.search(parse(data), args.query):
            print(render(LIST_FORMAT, found))


def build_parser(default_store: str | None = None) -> argparse.ArgumentParser:
    default_store = default_store or default_store_path()
    parser = argparse.ArgumentParser(prog="pw", description="Dumb Password Manager")
    parser.set_defaults(default_store=default_store)
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="More logging (-v info, -vv debug)")
    sub = parser.add_subparsers(dest="command", required=True)
    file_help = f"Password file (or set PWFILE). Default: {default_store}"

    # check
    s = sub.add_parser("check", help="Check and print password stats")
    s.add_argument("file", nargs="?", help=file_help)
    s.set_defaults(func=cmd_check)

    # gen
    s = sub.add_parser("gen", help="Generate a password")
    s.set_defaults(func=cmd_gen)

    # get
    s = sub.add_parser("get", help="Retrieve a password")
    s.add_argument("account", metavar="account-name", help="Exact match for an account name")
    s.add_argument("format", help="Format: %%N = Name, %%L = Link, %%U = Username, %%P = Password")
    s.add_argument("file", nargs="?", help=file_help)
    s.set_defaults(func=cmd_get)

    # ls
    s = sub.add_parser("ls", help="Search for passwords")
    s.add_argument("query", help="Query for an account name")
    s.add_argument("file", nargs="?", help=file_help)
    s.set_defaults(func=cmd_ls)

    return parser
