"""Pages of results from list endpoints.

Mastodon paginates with `Link` headers: the response to a list call
has `next` and `prev` links that fetch the adjoining pages.
"""

import logging
import uuid

import requests
from requests.utils import parse_header_links

from .errors import Error, LinkHeaderError, UnrecognizedRel
from .http import api_error, read_response, send


LOG = logging.getLogger(__name__)


class Page:
    """One page of results, and the way to the next and previous pages.

    Attributes --
        initial_items -- the entities in the first response
        next, prev -- URLs of the adjoining pages, or None
    """

    def __init__(self, mastodon, response, entity, call_id=None):
        """Create a page from the response to a list call.

        Arguments --
            mastodon -- the client; its session is used to fetch more pages
            response -- the `requests.Response` to the first call
            entity -- type of the items, such as `Status`
            call_id -- identifies the call in log messages
        """
        self.mastodon = mastodon
        self.entity = entity
        self.call_id = call_id or uuid.uuid4()
        if not response.ok:
            raise api_error(response, self.call_id)
        self.prev, self.next = get_links(response, self.call_id)
        self.initial_items = read_response(response, list[entity], self.call_id)
        LOG.debug(
            "%s: first page has %d items (next=%s, prev=%s)",
            self.call_id,
            len(self.initial_items),
            self.next,
            self.prev,
        )

    def next_page(self):
        """Fetch the next page of items.

        Returns None if there is no next page, or if it is empty and has no
        links of its own. Otherwise the page's links replace ours, so that
        calling again goes on to the page after. An empty page that does
        have links does not end things: newer items may turn up later.
        """
        return self._fetch("next")

    def prev_page(self):
        """Fetch the previous page of items. See `next_page`."""
        return self._fetch("prev")

    def _fetch(self, direction):
        url = getattr(self, direction)
        if not url:
            return None
        r = send(self.mastodon.session, "get", url, self.call_id, timeout=self.mastodon.timeout)
        if not r.ok:
            raise api_error(r, self.call_id)
        prev_url, next_url = get_links(r, self.call_id)
        items = read_response(r, list[self.entity], self.call_id)
        if not items and prev_url is None and next_url is None:
            LOG.debug("%s: %s page is empty and has no links", self.call_id, direction)
            return None
        self.next, self.prev = next_url, prev_url
        return items

    def items(self):
        """Generate all the items, fetching further pages as needed.

        Stops at the first empty page. If fetching a page fails the
        error is logged and the items stop.
        """
        if not self.initial_items:
            return
        yield from self.initial_items
        while True:
            try:
                items = self.next_page()
            except (Error, requests.RequestException) as e:
                LOG.warning("%s: error fetching next page: %s", self.call_id, e)
                return
            if not items:
                return
            LOG.debug("%s: next page has %d items", self.call_id, len(items))
            yield from items

    def __iter__(self):
        return self.items()


def get_links(response, call_id=None):
    """Return the prev and next URLs from the `Link` header of this response.

    Links with no `rel` are ignored. Any rel other than `next` or `prev`
    raises `UnrecognizedRel`.
    """
    prev_url = next_url = None
    if link_header := response.headers.get("Link"):
        LOG.debug("%s: parsing link header %r", call_id, link_header)
        for link in parse_header_links(link_header):
            url, rel = link.get("url"), link.get("rel")
            if not url:
                raise LinkHeaderError(f"{link_header!r}: link has no URL")
            if rel == "next":
                next_url = url
            elif rel == "prev":
                prev_url = url
            elif rel is None:
                LOG.debug("%s: link with no rel: %s", call_id, url)
            else:
                raise UnrecognizedRel(rel, link_header)
    return prev_url, next_url
