from datetime import datetime, timezone
import io
import json
import logging
from unittest import TestCase
from unittest.mock import call, patch

import responses
from responses import matchers

from ..client import Mastodon, MastodonUnauthenticated
from ..data import Data
from ..entities.account import CredentialAccount
from ..entities.application import Application
from ..entities.attachment import Attachment, ProcessedAttachment
from ..entities.event import DeleteEvent, UpdateEvent
from ..entities.relationship import Relationship
from ..errors import AccessTokenRequired, ApiError, ClientSecretRequired, DeserializeError
from ..forms.accounts import FollowOptions
from ..forms.admin import AccountAction, AccountActionRequest
from ..forms.apps import Application as ApplicationForm
from ..forms.credentials import UpdateCredentialsRequest
from ..forms.oauth import AuthorizationRequest, GrantType, Revocation, TokenRequest
from ..forms.statuses import StatusBuilder, StatusesRequest
from ..scopes import Scopes
from .factories import (
    AccountFactory,
    ApplicationFactory,
    AttachmentFactory,
    RelationshipFactory,
    StatusFactory,
)


BASE = "https://mastodon.example"


def make_mastodon(**kwargs):
    data = Data(
        base="mastodon.example",
        client_id="id-of-client",
        client_secret="*SECRET*",
        token="*TOKEN*",
    )
    return Mastodon(data, **kwargs)


class TestMastodonSetup(TestCase):
    def test_requires_token(self):
        with self.assertRaises(AccessTokenRequired):
            Mastodon(Data("https://mastodon.example", "id-of-client", "*SECRET*"))

    def test_makes_oauth_session_from_data(self):
        with patch("requests_oauthlib.OAuth2Session") as OAuth2Session:
            mastodon = make_mastodon()

        self.assertEqual(mastodon.base, BASE)
        self.assertIs(mastodon.session, OAuth2Session.return_value)
        OAuth2Session.assert_called_once_with(
            "id-of-client",
            token={"access_token": "*TOKEN*", "token_type": "Bearer"},
        )

    def test_route_expands_templates(self):
        mastodon = make_mastodon()

        self.assertEqual(
            mastodon.route("/api/v1/accounts/{id}/follow", id="123"),
            "https://mastodon.example/api/v1/accounts/123/follow",
        )
        self.assertEqual(
            mastodon.route("/api/v1/streaming/{+stream}", stream="public/local"),
            "https://mastodon.example/api/v1/streaming/public/local",
        )
        self.assertEqual(
            mastodon.route("/api/v1/timelines/tag/{hashtag}", hashtag="café"),
            "https://mastodon.example/api/v1/timelines/tag/caf%C3%A9",
        )


class TestMastodonCalls(TestCase):
    def setUp(self):
        logging.disable(logging.CRITICAL)
        self.mastodon = make_mastodon()

    def tearDown(self):
        logging.disable(logging.NOTSET)

    @responses.activate
    def test_verify_credentials_sends_token(self):
        responses.get(
            BASE + "/api/v1/accounts/verify_credentials",
            json=AccountFactory(acct="alice", source={"privacy": "public", "note": ""}),
        )

        account = self.mastodon.verify_credentials()

        self.assertIsInstance(account, CredentialAccount)
        self.assertEqual(account.acct, "alice")
        request = responses.calls[0].request
        self.assertEqual(request.headers["Authorization"], "Bearer *TOKEN*")
        self.assertEqual(request.headers["Accept"], "application/json")

    @responses.activate
    def test_get_account(self):
        responses.get(BASE + "/api/v1/accounts/42", json=AccountFactory(id="42"))

        account = self.mastodon.get_account("42")

        self.assertEqual(account.id, "42")

    @responses.activate
    def test_statuses_with_request(self):
        responses.get(
            BASE + "/api/v1/accounts/42/statuses",
            json=[StatusFactory()],
            match=[matchers.query_param_matcher({"only_media": "1", "limit": "5"})],
        )

        page = self.mastodon.statuses("42", StatusesRequest(only_media=True, limit=5))

        self.assertEqual(len(page.initial_items), 1)

    @responses.activate
    def test_follow_with_options(self):
        responses.post(
            BASE + "/api/v1/accounts/42/follow",
            json=RelationshipFactory(id="42", following=True),
            match=[matchers.query_param_matcher({"reblogs": "false"})],
        )

        relationship = self.mastodon.follow("42", FollowOptions(reblogs=False, notify=False))

        self.assertIsInstance(relationship, Relationship)
        self.assertTrue(relationship.following)

    @responses.activate
    def test_mute_and_unmute_are_posts(self):
        responses.post(BASE + "/api/v1/accounts/42/mute", json=RelationshipFactory(id="42", muting=True))
        responses.post(BASE + "/api/v1/accounts/42/unmute", json=RelationshipFactory(id="42"))

        self.assertTrue(self.mastodon.mute("42").muting)
        self.assertFalse(self.mastodon.unmute("42").muting)

    @responses.activate
    def test_add_note_to_account(self):
        responses.post(
            BASE + "/api/v1/accounts/42/note",
            json=RelationshipFactory(id="42", note="Met at the conference"),
            match=[matchers.json_params_matcher({"comment": "Met at the conference"})],
        )

        relationship = self.mastodon.add_note_to_account("42", "Met at the conference")

        self.assertEqual(relationship.note, "Met at the conference")

    @responses.activate
    def test_relationships_send_id_list(self):
        responses.get(
            BASE + "/api/v1/accounts/relationships",
            json=[RelationshipFactory(id="1"), RelationshipFactory(id="2")],
        )

        result = self.mastodon.relationships(["1", "2"])

        self.assertEqual([r.id for r in result], ["1", "2"])
        self.assertEqual(
            responses.calls[0].request.url,
            BASE + "/api/v1/accounts/relationships?id%5B%5D=1&id%5B%5D=2",
        )

    @responses.activate
    def test_block_and_unblock_domain(self):
        responses.post(
            BASE + "/api/v1/domain_blocks",
            json={},
            match=[matchers.json_params_matcher({"domain": "spam.example"})],
        )
        responses.delete(
            BASE + "/api/v1/domain_blocks",
            json={},
            match=[matchers.json_params_matcher({"domain": "spam.example"})],
        )

        self.mastodon.block_domain("spam.example")
        self.mastodon.unblock_domain("spam.example")

        self.assertEqual([c.request.method for c in responses.calls], ["POST", "DELETE"])

    @responses.activate
    def test_new_status(self):
        endpoint = responses.post(
            BASE + "/api/v1/statuses",
            json=StatusFactory(id="99", content="<p>Hello</p>"),
            match=[
                matchers.json_params_matcher({"status": "Hello", "visibility": "private"}),
                matchers.header_matcher({"Idempotency-Key": "abc123"}),
            ],
        )
        new_status = StatusBuilder().status("Hello").visibility("private").build()

        status = self.mastodon.new_status(new_status, idempotency_key="abc123")

        self.assertEqual(endpoint.call_count, 1)
        self.assertEqual(status.id, "99")

    @responses.activate
    def test_delete_status(self):
        endpoint = responses.delete(BASE + "/api/v1/statuses/99", json=StatusFactory(id="99"))

        self.mastodon.delete_status("99")

        self.assertEqual(endpoint.call_count, 1)

    @responses.activate
    def test_hashtag_timeline_drops_hash(self):
        endpoint = responses.get(BASE + "/api/v1/timelines/tag/caturday", json=[])

        page = self.mastodon.get_hashtag_timeline("#caturday")

        self.assertEqual(endpoint.call_count, 1)
        self.assertEqual(page.initial_items, [])

    @responses.activate
    def test_public_timeline_local(self):
        responses.get(
            BASE + "/api/v1/timelines/public",
            json=[StatusFactory()],
            match=[matchers.query_param_matcher({"local": "true"})],
        )

        page = self.mastodon.get_public_timeline(local=True)

        self.assertEqual(len(page.initial_items), 1)

    @responses.activate
    def test_search(self):
        responses.get(
            BASE + "/api/v2/search",
            json={"accounts": [AccountFactory(acct="bob@elsewhere.example")], "statuses": [], "hashtags": []},
            match=[matchers.query_param_matcher({"q": "bob@elsewhere.example", "resolve": "true"})],
        )

        result = self.mastodon.search("bob@elsewhere.example", resolve=True)

        self.assertEqual(result.accounts[0].acct, "bob@elsewhere.example")

    @responses.activate
    def test_markers(self):
        responses.get(BASE + "/api/v1/markers", json={
            "home": {"last_read_id": "103194548672408537", "version": 462, "updated_at": "2019-11-24T19:39:39.337Z"},
        })

        markers = self.mastodon.get_markers(["home"])

        self.assertEqual(markers["home"].version, 462)
        self.assertEqual(responses.calls[0].request.url, BASE + "/api/v1/markers?timeline%5B%5D=home")

    @responses.activate
    def test_follows_me(self):
        responses.get(BASE + "/api/v1/accounts/verify_credentials", json=AccountFactory(id="7"))
        responses.get(BASE + "/api/v1/accounts/7/followers", json=[AccountFactory(), AccountFactory()])

        page = self.mastodon.follows_me()

        self.assertEqual(len(page.initial_items), 2)

    @responses.activate
    def test_api_error(self):
        responses.post(
            BASE + "/api/v1/accounts",
            status=422,
            json={
                "error": "Validation failed: Username has already been taken",
                "details": {"username": [{"error": "ERR_TAKEN", "description": "has already been taken"}]},
            },
        )

        with self.assertRaises(ApiError) as cm:
            self.mastodon.post("/api/v1/accounts")

        self.assertEqual(cm.exception.status, 422)
        self.assertEqual(cm.exception.response.details["username"][0].error, "ERR_TAKEN")
        self.assertEqual(str(cm.exception), "422: Validation failed: Username has already been taken")

    @responses.activate
    def test_api_error_without_json(self):
        responses.get(BASE + "/api/v1/instance", status=502, body="<html>Bad Gateway</html>")

        with self.assertRaises(ApiError) as cm:
            self.mastodon.instance()

        self.assertIsNone(cm.exception.response)
        self.assertIn("Bad Gateway", str(cm.exception))

    @responses.activate
    def test_response_not_json(self):
        responses.get(BASE + "/api/v1/preferences", body="<html></html>", content_type="text/html")

        with self.assertRaises(DeserializeError):
            self.mastodon.get_preferences()

    @responses.activate
    def test_update_credentials_sends_form(self):
        responses.patch(
            BASE + "/api/v1/accounts/update_credentials",
            json=AccountFactory(display_name="Alice"),
            match=[matchers.urlencoded_params_matcher({
                "display_name": "Alice",
                "source[privacy]": "unlisted",
            })],
        )

        account = self.mastodon.update_credentials(UpdateCredentialsRequest(display_name="Alice", privacy="unlisted"))

        self.assertEqual(account.display_name, "Alice")

    @responses.activate
    def test_update_credentials_uploads_avatar(self):
        responses.patch(BASE + "/api/v1/accounts/update_credentials", json=AccountFactory())
        avatar = io.BytesIO(b"\x89PNG...")
        avatar.name = "/home/alice/avatar.png"

        self.mastodon.update_credentials(UpdateCredentialsRequest(avatar=avatar))

        body = responses.calls[0].request.body
        self.assertIn(b'name="avatar"; filename="avatar.png"', body)
        self.assertIn(b"Content-Type: image/png", body)
        self.assertNotIn(b'name="header"', body)

    @responses.activate
    def test_media_upload(self):
        responses.post(BASE + "/api/v2/media", json=AttachmentFactory(id="5"))

        attachment = self.mastodon.media(
            io.BytesIO(b"GIF89a..."),
            description="A cat",
            focus=(0.5, -0.25),
            media_type="image/gif",
        )

        self.assertIsInstance(attachment, Attachment)
        self.assertEqual(attachment.id, "5")
        body = responses.calls[0].request.body
        self.assertIn(b'name="file"; filename="file"', body)
        self.assertIn(b"Content-Type: image/gif", body)
        self.assertIn(b'name="description"\r\n\r\nA cat', body)
        self.assertIn(b'name="focus"\r\n\r\n0.5,-0.25', body)

    @responses.activate
    @patch("time.sleep")
    def test_wait_for_processing(self, sleep):
        responses.get(BASE + "/api/v1/media/5", status=206, json=AttachmentFactory(id="5", url=None))
        responses.get(BASE + "/api/v1/media/5", json=AttachmentFactory(id="5", url="https://files.mastodon.example/5.png"))
        attachment = Attachment.from_json(AttachmentFactory(id="5", url=None))

        result = self.mastodon.wait_for_processing(attachment, polling_time=2)

        self.assertIsInstance(result, ProcessedAttachment)
        self.assertEqual(result.url, "https://files.mastodon.example/5.png")
        self.assertEqual(len(responses.calls), 2)
        self.assertEqual(sleep.call_args_list, [call(2)])

    @patch("time.sleep")
    def test_wait_for_processing_when_already_done(self, sleep):
        attachment = Attachment.from_json(AttachmentFactory(id="5"))

        result = self.mastodon.wait_for_processing(attachment)

        self.assertEqual(result.url, attachment.url)
        sleep.assert_not_called()

    @responses.activate
    def test_admin_account_action(self):
        endpoint = responses.post(
            BASE + "/api/v1/admin/accounts/42/action",
            json={},
            match=[matchers.json_params_matcher({"type": "suspend", "text": "Spam"})],
        )

        self.mastodon.admin_account_action("42", AccountActionRequest(AccountAction.SUSPEND, text="Spam"))

        self.assertEqual(endpoint.call_count, 1)

    @responses.activate
    def test_admin_measures(self):
        responses.post(
            BASE + "/api/v1/admin/measures",
            json=[{"key": "active_users", "unit": None, "total": "2", "data": [
                {"date": "2022-09-14T00:00:00.000+00:00", "value": "2"},
            ]}],
            match=[matchers.json_params_matcher({
                "keys": ["active_users"],
                "start_at": "2022-09-14T00:00:00.000Z",
                "end_at": "2022-09-15T00:00:00.000Z",
            })],
        )

        (measure,) = self.mastodon.admin_measures(
            ["active_users"],
            datetime(2022, 9, 14, tzinfo=timezone.utc),
            datetime(2022, 9, 15, tzinfo=timezone.utc),
        )

        self.assertEqual(measure.total, 2)
        self.assertEqual(measure.data[0].value, 2)

    def test_public_api_does_not_send_token(self):
        public = self.mastodon.public_api()

        self.assertIsInstance(public, MastodonUnauthenticated)
        self.assertEqual(public.base, BASE)
        self.assertNotIsInstance(public.session, type(self.mastodon.session))


class TestStreaming(TestCase):
    def setUp(self):
        self.mastodon = make_mastodon()

    @responses.activate
    def test_user_stream(self):
        status = StatusFactory(id="31")
        responses.get(
            BASE + "/api/v1/streaming/user",
            body=f":thump\n\nevent: update\ndata: {json.dumps(status)}\n\nevent: delete\ndata: 30\n\n",
            content_type="text/event-stream",
            match=[matchers.header_matcher({"Accept": "text/event-stream"})],
        )

        events = list(self.mastodon.stream_user())

        self.assertIsInstance(events[0], UpdateEvent)
        self.assertEqual(events[0].status.id, "31")
        self.assertEqual(events[1], DeleteEvent("30"))

    @responses.activate
    def test_local_hashtag_stream(self):
        endpoint = responses.get(
            BASE + "/api/v1/streaming/hashtag/local",
            body="",
            content_type="text/event-stream",
            match=[matchers.query_param_matcher({"tag": "caturday"})],
        )

        self.assertEqual(list(self.mastodon.stream_local_hashtag("#caturday")), [])
        self.assertEqual(endpoint.call_count, 1)

    @responses.activate
    def test_error_raised_before_iterating(self):
        responses.get(BASE + "/api/v1/streaming/list", status=404, json={"error": "Record not found"})

        with self.assertRaises(ApiError):
            self.mastodon.stream_list("17")


class TestMastodonUnauthenticated(TestCase):
    def setUp(self):
        self.client = MastodonUnauthenticated("http://mastodon.example/")

    def test_base_normalized(self):
        self.assertEqual(self.client.base, BASE)

    @responses.activate
    def test_get_status_without_token(self):
        responses.get(BASE + "/api/v1/statuses/99", json=StatusFactory(id="99"))

        status = self.client.get_status("99")

        self.assertEqual(status.id, "99")
        self.assertNotIn("Authorization", responses.calls[0].request.headers)

    @responses.activate
    def test_create_app(self):
        responses.post(
            BASE + "/api/v1/apps",
            json=ApplicationFactory(name="tusk-test", client_id="id-of-client", client_secret="*SECRET*"),
            match=[matchers.json_params_matcher({
                "client_name": "tusk-test",
                "redirect_uris": "urn:ietf:wg:oauth:2.0:oob",
                "scopes": "read write",
            })],
        )

        app = self.client.create_app(ApplicationForm("tusk-test", scopes=Scopes.parse("read write")))

        self.assertIsInstance(app, Application)
        self.assertEqual(app.client_id, "id-of-client")
        self.assertEqual(app.client_secret, "*SECRET*")

    @responses.activate
    def test_get_auth_token(self):
        responses.post(
            BASE + "/oauth/token",
            json={"access_token": "*TOKEN*", "token_type": "Bearer", "scope": "read", "created_at": 1573979017},
            match=[matchers.urlencoded_params_matcher({
                "client_id": "id-of-client",
                "client_secret": "*SECRET*",
                "redirect_uri": "urn:ietf:wg:oauth:2.0:oob",
                "grant_type": "client_credentials",
            })],
        )

        token = self.client.get_auth_token(TokenRequest("id-of-client", "*SECRET*"))

        self.assertEqual(token.access_token, "*TOKEN*")

    def test_get_auth_token_needs_secret(self):
        with self.assertRaises(ClientSecretRequired):
            self.client.get_auth_token(TokenRequest("id-of-client", "", grant_type=GrantType.AUTHORIZATION_CODE))

    def test_authorized(self):
        app = Application.from_json(ApplicationFactory(client_id="id-of-client", client_secret="*SECRET*"))

        mastodon = self.client.authorized(app, "*TOKEN*")

        self.assertIsInstance(mastodon, Mastodon)
        self.assertEqual(mastodon.data.token, "*TOKEN*")
        self.assertEqual(mastodon.data.client_id, "id-of-client")
        self.assertEqual(mastodon.data.base, BASE)


class TestOAuthPages(TestCase):
    @responses.activate
    def test_fetches_authorization_page(self):
        # Given the instance shows an authorization page …
        responses.get(
            BASE + "/oauth/authorize",
            body="<html>Authorize tusk-test?</html>",
            content_type="text/html",
            match=[
                matchers.query_param_matcher(
                    {"client_id": "id-of-client", "response_type": "code"},
                    strict_match=False,
                ),
                matchers.header_matcher({"Accept": "text/html"}),
            ],
        )
        client = MastodonUnauthenticated("mastodon.example")

        # When we fetch it …
        text = client.request_oauth_authorization(AuthorizationRequest("id-of-client", scope=Scopes.read_all()))

        # Then we get the page.
        self.assertEqual(text, "<html>Authorize tusk-test?</html>")

    @responses.activate
    def test_revoke_auth(self):
        responses.post(
            BASE + "/oauth/revoke",
            json={},
            match=[matchers.urlencoded_params_matcher({
                "client_id": "id-of-client",
                "client_secret": "*SECRET*",
                "token": "*TOKEN*",
            })],
        )
        mastodon = make_mastodon()

        mastodon.revoke_auth(Revocation("id-of-client", "*SECRET*", "*TOKEN*"))

        self.assertEqual(len(responses.calls), 1)
