"""Command-line tool for registering with an instance and trying the API."""

import argparse
import logging
import sys

from .client import Mastodon
from .data import Data
from .errors import Error
from .registration import Registration
from .scopes import Scopes
from .streaming import EventHandler


LOG = logging.getLogger(__name__)


def authenticate(registered, stdin=sys.stdin, stdout=sys.stdout) -> Mastodon:
    """Have the user authorize the app in a browser and paste the code back here."""
    stdout.write(f"Click this link to authorize: {registered.authorize_url()}\n")
    stdout.write("Paste the returned authorization code: ")
    stdout.flush()
    code = stdin.readline().strip()
    return registered.complete(code)


def register(options, stdin=sys.stdin, stdout=sys.stdout):
    registration = Registration(options.domain).client_name(options.name).scopes(Scopes.parse(options.scopes))
    if options.website:
        registration.website(options.website)
    registered = registration.build()
    mastodon = authenticate(registered, stdin=stdin, stdout=stdout)
    mastodon.data.to_file(options.output)
    stdout.write(f"Wrote credentials to {options.output}\n")


def whoami(options, stdin=sys.stdin, stdout=sys.stdout):
    mastodon = Mastodon(Data.from_file(options.config))
    account = mastodon.verify_credentials()
    stdout.write(f"{account} ({account.display_name})\n")


def events(options, stdin=sys.stdin, stdout=sys.stdout):
    mastodon = Mastodon(Data.from_file(options.config))
    EventHandler().run(mastodon.stream(options.stream))


def make_parser():
    parser = argparse.ArgumentParser(prog="tusk", description="Talk to a Mastodon instance.")
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Log more (repeat for debugging output).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("register", help="Register an app and authorize it.")
    p.add_argument(
        "domain",
        help="Host name of the instance, such as mastodon.social.",
    )
    p.add_argument(
        "--name",
        "-n",
        default="tusk",
        help="Name of the app as shown to the user.",
    )
    p.add_argument(
        "--website",
        help="Web site of the app.",
    )
    p.add_argument(
        "--scopes",
        "-s",
        default="read",
        help="Space-separated scopes to ask for.",
    )
    p.add_argument(
        "--output",
        "-o",
        default="mastodon-data.json",
        help="File to write credentials to.",
    )
    p.set_defaults(func=register)

    for name, func, help in [
        ("whoami", whoami, "Show the account the credentials belong to."),
        ("events", events, "Log events from a stream."),
    ]:
        p = subparsers.add_parser(name, help=help)
        p.add_argument(
            "--config",
            "-c",
            default="mastodon-data.json",
            help="File written by the register command.",
        )
        p.set_defaults(func=func)
    p.add_argument(
        "--stream",
        default="user",
        help="Stream to follow, such as user, public or public/local.",
    )
    return parser


def main(argv=None, stdin=sys.stdin, stdout=sys.stdout):
    options = make_parser().parse_args(argv)
    level = logging.WARNING - 10 * min(options.verbose, 2)
    if options.command == "events":
        # Events are reported by logging them.
        level = min(level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        options.func(options, stdin=stdin, stdout=stdout)
    except (Error, OSError) as e:
        LOG.debug("%s failed", options.command, exc_info=True)
        sys.stderr.write(f"tusk: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
