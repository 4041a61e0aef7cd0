"""Mastodon protocol.

Paths used in more than one place. Most routes are written out in full
in `client.Mastodon`; paths with `{…}` in them are URI templates.
"""

authorize_path = "/oauth/authorize"  # GET response_type=code, client_id, redirect_uri, scope, and optional force_login
token_path = "/oauth/token"  # POST authorization_code or client_credentials
revoke_path = "/oauth/revoke"  # POST
apps_path = "/api/v1/apps"  # POST
verify_credentials_path = "/api/v1/accounts/verify_credentials"  # GET
media_path = "/api/v2/media"  # POST multipart
attachment_path = "/api/v1/media/{id}"  # GET
statuses_path = "/api/v1/statuses"  # POST
status_path = "/api/v1/statuses/{id}"  # GET, PUT, DELETE
streaming_path = "/api/v1/streaming/{+stream}"  # GET, server-sent events

DEFAULT_TIMEOUT = 10  # seconds
DEFAULT_POLLING_TIME = 0.5  # seconds between checks on media processing
