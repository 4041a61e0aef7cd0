"""Clients for the Mastodon API.

`Mastodon` makes calls on behalf of a user (or an app) that has an access
token. `MastodonUnauthenticated` makes the few calls that need no token.

Each method is one API call. Paths are URI templates expanded with the
method's arguments; the response is decoded to the entity named in the call
and errors raise `tusk.errors.ApiError`.
"""

from contextlib import ExitStack
from functools import cache
import logging
import mimetypes
import os
import time
import uuid

import requests
import requests_oauthlib
from uritemplate import URITemplate

from . import protocol
from .admin import AdminRoutes
from .data import Data
from .entities.account import Account, CredentialAccount
from .entities.announcement import Announcement
from .entities.application import Application
from .entities.attachment import Attachment, ProcessedAttachment
from .entities.card import Card, TrendsLink
from .entities.context import Context, Conversation
from .entities.custom_emoji import CustomEmoji
from .entities.filter import Filter, FilterV1
from .entities.instance import Activity, DomainBlock, ExtendedDescription, Instance, InstanceV1, Rule
from .entities.lists import List
from .entities.marker import Marker
from .entities.notification import Notification
from .entities.preferences import Preferences
from .entities.push import Subscription
from .entities.relationship import FamiliarFollowers, Relationship
from .entities.report import Report
from .entities.search_result import SearchResult
from .entities.status import ScheduledStatus, Status, StatusEdit, StatusSource
from .entities.tag import FeaturedTag
from .entities.token import Token
from .errors import AccessTokenRequired, ClientIdRequired, ClientSecretRequired
from .forms.accounts import AccountSearch, FollowOptions, IdList
from .forms.apps import OOB_REDIRECT
from .forms.reports import AddReportRequest
from .forms.statuses import StatusesRequest
from .http import api_error, read_response, send
from .page import Page
from .streaming import event_stream
from .utils import file_name, normalize_base


LOG = logging.getLogger(__name__)


@cache
def template(path):
    return URITemplate(path)


class Client:
    """Plumbing shared by the authenticated and unauthenticated clients."""

    def __init__(self, base, session, timeout=protocol.DEFAULT_TIMEOUT):
        self.base = normalize_base(base)
        self.session = session
        self.timeout = timeout

    def route(self, path, **kwargs) -> str:
        """Return the URL for this path, expanding the template if there are arguments."""
        if kwargs:
            path = template(path).expand(**kwargs)
        return self.base + path

    def request(self, method, url, target=None, **kwargs):
        """Make a call and decode the response as `target` (or ignore it if None)."""
        call_id = uuid.uuid4()
        r = send(self.session, method, url, call_id, timeout=self.timeout, **kwargs)
        return read_response(r, target, call_id)

    def get(self, path, target, params=None, **kwargs):
        return self.request("get", self.route(path, **kwargs), target, params=params)

    def post(self, path, target=None, json=None, **kwargs):
        return self.request("post", self.route(path, **kwargs), target, json=json)

    def put(self, path, target=None, json=None, **kwargs):
        return self.request("put", self.route(path, **kwargs), target, json=json)

    def delete(self, path, target=None, json=None, **kwargs):
        return self.request("delete", self.route(path, **kwargs), target, json=json)

    def paged(self, path, entity, params=None, **kwargs) -> Page:
        """GET a list and return the first page of it."""
        call_id = uuid.uuid4()
        url = self.route(path, **kwargs)
        r = send(self.session, "get", url, call_id, params=params, timeout=self.timeout)
        return Page(self, r, entity, call_id)

    # Calls that work with or without a token.

    def create_app(self, app) -> Application:
        """Register an app. The result includes its client ID and secret."""
        return self.post(protocol.apps_path, Application, json=app.to_json())

    def get_auth_token(self, token_request) -> Token:
        """Exchange an authorization code or client credentials for an access token."""
        if not token_request.client_id:
            raise ClientIdRequired()
        if not token_request.client_secret:
            raise ClientSecretRequired()
        return self.request("post", self.route(protocol.token_path), Token, data=token_request.to_params())

    def get_status(self, id) -> Status:
        return self.get(protocol.status_path, Status, id=id)

    def get_context(self, id) -> Context:
        """Get the statuses before and after this one in its thread."""
        return self.get("/api/v1/statuses/{id}/context", Context, id=id)

    def get_card(self, id) -> Card:
        return self.get("/api/v1/statuses/{id}/card", Card, id=id)

    def instance(self) -> InstanceV1:
        return self.get("/api/v1/instance", InstanceV1)

    def instance_v2(self) -> Instance:
        return self.get("/api/v2/instance", Instance)


class MastodonUnauthenticated(Client):
    """Client for calls that need no access token.

    Arguments --
        base -- host name or origin of the instance; `https://` is assumed
    """

    def __init__(self, base, session=None, timeout=protocol.DEFAULT_TIMEOUT):
        super().__init__(base, session or requests.Session(), timeout)

    def authorized(self, app, token) -> "Mastodon":
        """Return a client using this token for the app.

        Arguments --
            app -- the `Application` returned by `create_app`, or a `Registered` or `Data`
            token -- a `Token` or the access token string
        """
        if isinstance(token, Token):
            token = token.access_token
        redirect = getattr(app, "redirect_uri", None) or getattr(app, "redirect", None)
        data = Data(
            base=self.base,
            client_id=app.client_id,
            client_secret=app.client_secret,
            redirect=redirect or OOB_REDIRECT,
            token=token,
        )
        return Mastodon(data, timeout=self.timeout)

    def request_oauth_authorization(self, authorization_request) -> str:
        """Fetch the page where the user would authorize the app, and return its text."""
        call_id = uuid.uuid4()
        r = send(
            self.session,
            "get",
            self.route(protocol.authorize_path),
            call_id,
            params=authorization_request.to_params(),
            headers={"Accept": "text/html"},
            timeout=self.timeout,
        )
        if not r.ok:
            raise api_error(r, call_id)
        return r.text


class Mastodon(AdminRoutes, Client):
    """Client acting for the user whose access token is in `data`.

    Arguments --
        data -- a `Data` instance with the instance origin, app credentials and token
        session -- an OAuth2 session to use instead of one made from `data`
        timeout -- seconds to wait for the server
    """

    def __init__(self, data: Data, session=None, timeout=protocol.DEFAULT_TIMEOUT):
        if session is None:
            if not data.token:
                raise AccessTokenRequired()
            session = requests_oauthlib.OAuth2Session(
                data.client_id,
                token={
                    "access_token": data.token,
                    "token_type": "Bearer",
                },
            )
        super().__init__(data.base, session, timeout)
        self.data = data

    def public_api(self) -> MastodonUnauthenticated:
        """Return a client for the same instance that does not send the token."""
        return MastodonUnauthenticated(self.base, timeout=self.timeout)

    # Accounts.

    def verify_credentials(self) -> CredentialAccount:
        """Get the account we are acting for."""
        return self.get(protocol.verify_credentials_path, CredentialAccount)

    def update_credentials(self, request) -> CredentialAccount:
        """Update the profile. `request` is an `UpdateCredentialsRequest`."""
        with ExitStack() as stack:
            files = {
                name: file_part(stack, file)
                for name, file in request.files().items()
            }
            return self.request(
                "patch",
                self.route("/api/v1/accounts/update_credentials"),
                CredentialAccount,
                data=request.to_data(),
                files=files or None,
            )

    def create_account(self, creation) -> Token:
        """Sign up a new account. Needs an app token. Returns the new user's token."""
        return self.post("/api/v1/accounts", Token, json=creation.to_json())

    def get_account(self, id) -> Account:
        return self.get("/api/v1/accounts/{id}", Account, id=id)

    def statuses(self, id, request: StatusesRequest = None) -> Page:
        """List statuses posted by an account."""
        params = request.to_params() if request else None
        return self.paged("/api/v1/accounts/{id}/statuses", Status, params, id=id)

    def followers(self, id) -> Page:
        return self.paged("/api/v1/accounts/{id}/followers", Account, id=id)

    def following(self, id) -> Page:
        return self.paged("/api/v1/accounts/{id}/following", Account, id=id)

    def follows_me(self) -> Page:
        """List the accounts following us."""
        me = self.verify_credentials()
        return self.followers(me.id)

    def followed_by_me(self) -> Page:
        """List the accounts we follow."""
        me = self.verify_credentials()
        return self.following(me.id)

    def follow(self, id, options: FollowOptions = None) -> Relationship:
        """Follow an account, or change the options on an existing follow."""
        params = options.to_params() if options else None
        return self.request("post", self.route("/api/v1/accounts/{id}/follow", id=id), Relationship, params=params)

    def unfollow(self, id) -> Relationship:
        return self.post("/api/v1/accounts/{id}/unfollow", Relationship, id=id)

    def remove_from_followers(self, id) -> Relationship:
        return self.post("/api/v1/accounts/{id}/remove_from_followers", Relationship, id=id)

    def block(self, id) -> Relationship:
        return self.post("/api/v1/accounts/{id}/block", Relationship, id=id)

    def unblock(self, id) -> Relationship:
        return self.post("/api/v1/accounts/{id}/unblock", Relationship, id=id)

    def mute(self, id) -> Relationship:
        return self.post("/api/v1/accounts/{id}/mute", Relationship, id=id)

    def unmute(self, id) -> Relationship:
        return self.post("/api/v1/accounts/{id}/unmute", Relationship, id=id)

    def feature_account(self, id) -> Relationship:
        """Feature (endorse) an account on our profile."""
        return self.post("/api/v1/accounts/{id}/pin", Relationship, id=id)

    def stop_featuring_account(self, id) -> Relationship:
        return self.post("/api/v1/accounts/{id}/unpin", Relationship, id=id)

    endorse_user = feature_account
    unendorse_user = stop_featuring_account

    def add_note_to_account(self, id, comment) -> Relationship:
        """Set our private note on an account."""
        return self.post("/api/v1/accounts/{id}/note", Relationship, json={"comment": comment}, id=id)

    def featured_tags(self, id) -> list[FeaturedTag]:
        return self.get("/api/v1/accounts/{id}/featured_tags", list[FeaturedTag], id=id)

    def in_lists(self, id) -> list[List]:
        """Get our lists that include this account."""
        return self.get("/api/v1/accounts/{id}/lists", list[List], id=id)

    def relationships(self, ids) -> list[Relationship]:
        return self.get("/api/v1/accounts/relationships", list[Relationship], IdList(list(ids)).to_params())

    def familiar_followers(self, ids) -> list[FamiliarFollowers]:
        """For each account, which accounts we follow also follow it."""
        return self.get("/api/v1/accounts/familiar_followers", list[FamiliarFollowers], IdList(list(ids)).to_params())

    def search_accounts(self, q, limit=None, following=False) -> Page:
        params = AccountSearch(q, limit=limit, following=following).to_params()
        return self.paged("/api/v1/accounts/search", Account, params)

    def blocks(self) -> Page:
        return self.paged("/api/v1/blocks", Account)

    def mutes(self) -> Page:
        return self.paged("/api/v1/mutes", Account)

    def follow_requests(self) -> Page:
        return self.paged("/api/v1/follow_requests", Account)

    def authorize_follow_request(self, id) -> Relationship:
        return self.post("/api/v1/follow_requests/{id}/authorize", Relationship, id=id)

    def reject_follow_request(self, id) -> Relationship:
        return self.post("/api/v1/follow_requests/{id}/reject", Relationship, id=id)

    def follows(self, uri) -> Account:
        """Follow a remote account given as `user@domain` (older servers only)."""
        return self.post("/api/v1/follows", Account, json={"uri": uri})

    def get_endorsements(self) -> Page:
        return self.paged("/api/v1/endorsements", Account)

    def get_follow_suggestions(self) -> list[Account]:
        return self.get("/api/v1/suggestions", list[Account])

    def delete_from_suggestions(self, id):
        self.delete("/api/v1/suggestions/{id}", id=id)

    def domain_blocks(self) -> Page:
        """List the domains we have blocked. The items are domain names."""
        return self.paged("/api/v1/domain_blocks", str)

    def block_domain(self, domain):
        self.post("/api/v1/domain_blocks", json={"domain": domain})

    def unblock_domain(self, domain):
        self.delete("/api/v1/domain_blocks", json={"domain": domain})

    def get_preferences(self) -> Preferences:
        return self.get("/api/v1/preferences", Preferences)

    # Statuses.

    def new_status(self, new_status, idempotency_key=None) -> Status:
        """Post a status. `new_status` is made with `StatusBuilder`.

        If an idempotency key is supplied, the server will not post the
        same status twice if the request is repeated.
        """
        headers = {"Idempotency-Key": idempotency_key} if idempotency_key else None
        return self.request(
            "post",
            self.route(protocol.statuses_path),
            Status,
            json=new_status.to_json(),
            headers=headers,
        )

    def update_status(self, id, new_status) -> Status:
        """Edit a status."""
        return self.put(protocol.status_path, Status, json=new_status.to_json(), id=id)

    def delete_status(self, id):
        self.delete(protocol.status_path, id=id)

    def get_status_history(self, id) -> list[StatusEdit]:
        return self.get("/api/v1/statuses/{id}/history", list[StatusEdit], id=id)

    def get_status_source(self, id) -> StatusSource:
        return self.get("/api/v1/statuses/{id}/source", StatusSource, id=id)

    def reblog(self, id) -> Status:
        return self.post("/api/v1/statuses/{id}/reblog", Status, id=id)

    def unreblog(self, id) -> Status:
        return self.post("/api/v1/statuses/{id}/unreblog", Status, id=id)

    def favourite(self, id) -> Status:
        return self.post("/api/v1/statuses/{id}/favourite", Status, id=id)

    def unfavourite(self, id) -> Status:
        return self.post("/api/v1/statuses/{id}/unfavourite", Status, id=id)

    def bookmark(self, id) -> Status:
        return self.post("/api/v1/statuses/{id}/bookmark", Status, id=id)

    def unbookmark(self, id) -> Status:
        return self.post("/api/v1/statuses/{id}/unbookmark", Status, id=id)

    def reblogged_by(self, id) -> Page:
        return self.paged("/api/v1/statuses/{id}/reblogged_by", Account, id=id)

    def favourited_by(self, id) -> Page:
        return self.paged("/api/v1/statuses/{id}/favourited_by", Account, id=id)

    def favourites(self) -> Page:
        return self.paged("/api/v1/favourites", Status)

    def bookmarks(self) -> Page:
        return self.paged("/api/v1/bookmarks", Status)

    def get_scheduled_statuses(self) -> Page:
        return self.paged("/api/v1/scheduled_statuses", ScheduledStatus)

    # Media.

    def media(self, file, description=None, thumbnail=None, focus=None, media_type=None) -> Attachment:
        """Upload media to attach to a status.

        Arguments --
            file -- path to the file, or a file open in binary mode
            description -- alt text
            thumbnail -- path or file of a preview image, for audio and video
            focus -- (x, y) focal point, each from -1.0 to 1.0
            media_type -- MIME type; guessed from the file name if omitted

        Large files may not be processed by the time this returns, in which case
        the attachment's `url` is None. Use `wait_for_processing`.
        """
        data = {}
        if description:
            data["description"] = description
        if focus:
            data["focus"] = f"{focus[0]},{focus[1]}"
        with ExitStack() as stack:
            files = {"file": file_part(stack, file, media_type)}
            if thumbnail is not None:
                files["thumbnail"] = file_part(stack, thumbnail)
            return self.request("post", self.route(protocol.media_path), Attachment, data=data, files=files)

    def attachment(self, id) -> Attachment:
        return self.get(protocol.attachment_path, Attachment, id=id)

    def wait_for_processing(self, attachment, polling_time=protocol.DEFAULT_POLLING_TIME) -> ProcessedAttachment:
        """Poll until the server has finished processing the media."""
        while attachment.url is None:
            attachment = self.attachment(attachment.id)
            if attachment.url is None:
                LOG.debug("Waiting for attachment %s", attachment.id)
                time.sleep(polling_time)
        return ProcessedAttachment.from_attachment(attachment)

    # Timelines.

    def get_home_timeline(self, request=None) -> Page:
        params = request.to_params() if request else None
        return self.paged("/api/v1/timelines/home", Status, params)

    def get_public_timeline(self, local=False, request=None) -> Page:
        params = request.to_params() if request else []
        if local:
            params.append(("local", "true"))
        return self.paged("/api/v1/timelines/public", Status, params)

    def get_hashtag_timeline(self, hashtag, request=None) -> Page:
        params = request.to_params() if request else None
        return self.paged("/api/v1/timelines/tag/{hashtag}", Status, params, hashtag=hashtag.removeprefix("#"))

    def get_tagged_timeline(self, hashtag, local=False) -> list[Status]:
        """Get the first page of statuses with this hashtag."""
        params = {"local": "1"} if local else None
        return self.get("/api/v1/timelines/tag/{hashtag}", list[Status], params, hashtag=hashtag.removeprefix("#"))

    def get_list_timeline(self, list_id, request=None) -> Page:
        params = request.to_params() if request else None
        return self.paged("/api/v1/timelines/list/{id}", Status, params, id=list_id)

    def get_conversations(self) -> Page:
        return self.paged("/api/v1/conversations", Conversation)

    def get_lists(self) -> list[List]:
        return self.get("/api/v1/lists", list[List])

    def get_markers(self, timelines=("home", "notifications")) -> dict[str, Marker]:
        """Get saved positions in timelines, keyed by timeline name."""
        return self.get("/api/v1/markers", dict[str, Marker], [("timeline[]", t) for t in timelines])

    # Notifications.

    def notifications(self) -> Page:
        return self.paged("/api/v1/notifications", Notification)

    def get_notification(self, id) -> Notification:
        return self.get("/api/v1/notifications/{id}", Notification, id=id)

    def clear_notifications(self):
        self.post("/api/v1/notifications/clear")

    def dismiss_notification(self, id):
        self.post("/api/v1/notifications/{id}/dismiss", id=id)

    # Push subscriptions.

    def add_push_subscription(self, request) -> Subscription:
        """Subscribe to web push. `request` is an `AddPushRequest`."""
        return self.post("/api/v1/push/subscription", Subscription, json=request.to_json())

    def update_push_data(self, request) -> Subscription:
        """Change the alerts of the push subscription. `request` is an `UpdatePushRequest`."""
        return self.put("/api/v1/push/subscription", Subscription, json=request.to_json())

    def get_push_subscription(self) -> Subscription:
        return self.get("/api/v1/push/subscription", Subscription)

    def delete_push_subscription(self):
        self.delete("/api/v1/push/subscription")

    # Filters.

    def get_filters(self) -> list[FilterV1]:
        return self.get("/api/v1/filters", list[FilterV1])

    def get_filter(self, id) -> FilterV1:
        return self.get("/api/v1/filters/{id}", FilterV1, id=id)

    def add_filter(self, request) -> FilterV1:
        """Add a filter. `request` is an `AddFilterRequest`."""
        return self.post("/api/v1/filters", FilterV1, json=request.to_json())

    def update_filter(self, id, request) -> FilterV1:
        return self.put("/api/v1/filters/{id}", FilterV1, json=request.to_json(), id=id)

    def delete_filter(self, id):
        self.delete("/api/v1/filters/{id}", id=id)

    def get_filters_v2(self) -> list[Filter]:
        return self.get("/api/v2/filters", list[Filter])

    def add_filter_v2(self, request) -> Filter:
        """Add a filter with keywords. `request` is an `AddFilterV2Request`."""
        return self.post("/api/v2/filters", Filter, json=request.to_json())

    # Reports.

    def reports(self) -> Page:
        return self.paged("/api/v1/reports", Report)

    def report(self, account_id, status_ids, comment) -> Report:
        """Report an account to the moderators."""
        return self.add_report(AddReportRequest(account_id, status_ids=list(status_ids), comment=comment))

    def add_report(self, request) -> Report:
        return self.post("/api/v1/reports", Report, json=request.to_json())

    # Search and instance information.

    def search(self, q, resolve=False) -> SearchResult:
        """Search accounts, statuses and hashtags.

        With `resolve`, the server will look up remote accounts and statuses
        given as URLs or `user@domain`.
        """
        params = {"q": q, "resolve": "true" if resolve else "false"}
        return self.get("/api/v2/search", SearchResult, params)

    def get_emojis(self) -> Page:
        return self.paged("/api/v1/custom_emojis", CustomEmoji)

    def instance_peers(self) -> Page:
        """List domain names of instances this one knows of."""
        return self.paged("/api/v1/instance/peers", str)

    def instance_activity(self) -> Page:
        return self.paged("/api/v1/instance/activity", Activity)

    def instance_rules(self) -> Page:
        return self.paged("/api/v1/instance/rules", Rule)

    def instance_domain_blocks(self) -> Page:
        return self.paged("/api/v1/instance/domain_blocks", DomainBlock)

    def instance_extended_description(self) -> ExtendedDescription:
        return self.get("/api/v1/instance/extended_description", ExtendedDescription)

    def get_announcements(self) -> list[Announcement]:
        return self.get("/api/v1/announcements", list[Announcement])

    def trending_links(self) -> list[TrendsLink]:
        return self.get("/api/v1/trends/links", list[TrendsLink])

    # Apps and tokens.

    def verify_app(self) -> Application:
        """Check the app's credentials work."""
        return self.get("/api/v1/apps/verify_credentials", Application)

    def revoke_auth(self, revocation):
        """Revoke a token. `revocation` is a `Revocation` form."""
        self.request("post", self.route(protocol.revoke_path), None, data=revocation.to_params())

    # Streaming.

    def stream(self, stream, **params):
        """Generate events from a stream.

        Raises ApiError straight away (rather than when iterated over)
        if the server refuses.
        """
        call_id = uuid.uuid4()
        url = self.route(protocol.streaming_path, stream=stream)
        r = send(
            self.session,
            "get",
            url,
            call_id,
            params=params or None,
            headers={"Accept": "text/event-stream"},
            stream=True,
            timeout=(self.timeout, None),
        )
        if not r.ok:
            raise api_error(r, call_id)
        r.encoding = "UTF-8"
        return event_stream(r.iter_lines(decode_unicode=True))

    def stream_user(self):
        """Events for the home timeline and notifications."""
        return self.stream("user")

    def stream_public(self):
        return self.stream("public")

    def stream_public_media(self):
        return self.stream("public/media")

    def stream_local(self, only_media=False):
        return self.stream("public/local", **flag_params(only_media=only_media))

    def stream_remote(self, only_media=False):
        return self.stream("public/remote", **flag_params(only_media=only_media))

    def stream_hashtag(self, tag):
        return self.stream("hashtag", tag=tag.removeprefix("#"))

    def stream_local_hashtag(self, tag):
        return self.stream("hashtag/local", tag=tag.removeprefix("#"))

    def stream_notifications(self):
        return self.stream("user/notification")

    def stream_list(self, list_id):
        return self.stream("list", list=list_id)

    def stream_direct(self):
        return self.stream("direct")


def flag_params(**flags):
    return {name: "true" for name, value in flags.items() if value}


def file_part(stack, file, media_type=None):
    """Return the tuple `requests` uses for a file upload, opening the file if it is a path."""
    name = file_name(file)
    if isinstance(file, (str, os.PathLike)):
        file = stack.enter_context(open(file, "rb"))
    return name, file, media_type or mimetypes.guess_type(name)[0] or "application/octet-stream"
