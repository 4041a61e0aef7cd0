"""Moderation and administration calls.

These need a token with `admin:read` or `admin:write` scopes, and a user
whose role grants the corresponding permission.
"""

from .entities.admin import (
    AdminAccount,
    AdminDomainBlock,
    AdminReport,
    AdminTag,
    CanonicalEmailBlock,
    Cohort,
    CohortFrequency,
    Dimension,
    DomainAllow,
    EmailDomainBlock,
    IpBlock,
    Measure,
)
from .forms.admin import CanonicalEmailBlocksTestRequest
from .utils import format_datetime


class AdminRoutes:
    """Mixin for `Mastodon` with the `/api/v1/admin` calls."""

    def admin_get_account(self, id) -> AdminAccount:
        return self.get("/api/v1/admin/accounts/{id}", AdminAccount, id=id)

    def admin_account_action(self, id, request):
        """Take moderation action against an account. `request` is an `AccountActionRequest`."""
        self.post("/api/v1/admin/accounts/{id}/action", json=request.to_json(), id=id)

    def admin_canonical_email_blocks(self):
        return self.paged("/api/v1/admin/canonical_email_blocks", CanonicalEmailBlock)

    def admin_add_canonical_email_block(self, request) -> CanonicalEmailBlock:
        return self.post("/api/v1/admin/canonical_email_blocks", CanonicalEmailBlock, json=request.to_json())

    def admin_test_canonical_email_blocks(self, email) -> list[CanonicalEmailBlock]:
        """Get the blocks that would match this e-mail address."""
        return self.post(
            "/api/v1/admin/canonical_email_blocks/test",
            list[CanonicalEmailBlock],
            json=CanonicalEmailBlocksTestRequest(email).to_json(),
        )

    def admin_delete_canonical_email_block(self, id):
        self.delete("/api/v1/admin/canonical_email_blocks/{id}", id=id)

    def admin_domain_allows(self):
        return self.paged("/api/v1/admin/domain_allows", DomainAllow)

    def admin_add_domain_allow(self, request) -> DomainAllow:
        return self.post("/api/v1/admin/domain_allows", DomainAllow, json=request.to_json())

    def admin_delete_domain_allow(self, id):
        self.delete("/api/v1/admin/domain_allows/{id}", id=id)

    def admin_domain_blocks(self):
        return self.paged("/api/v1/admin/domain_blocks", AdminDomainBlock)

    def admin_add_domain_block(self, request) -> AdminDomainBlock:
        return self.post("/api/v1/admin/domain_blocks", AdminDomainBlock, json=request.to_json())

    def admin_delete_domain_block(self, id):
        self.delete("/api/v1/admin/domain_blocks/{id}", id=id)

    def admin_email_domain_blocks(self):
        return self.paged("/api/v1/admin/email_domain_blocks", EmailDomainBlock)

    def admin_add_email_domain_block(self, request) -> EmailDomainBlock:
        return self.post("/api/v1/admin/email_domain_blocks", EmailDomainBlock, json=request.to_json())

    def admin_delete_email_domain_block(self, id):
        self.delete("/api/v1/admin/email_domain_blocks/{id}", id=id)

    def admin_ip_blocks(self):
        return self.paged("/api/v1/admin/ip_blocks", IpBlock)

    def admin_add_ip_block(self, request) -> IpBlock:
        return self.post("/api/v1/admin/ip_blocks", IpBlock, json=request.to_json())

    def admin_update_ip_block(self, id, request) -> IpBlock:
        return self.put("/api/v1/admin/ip_blocks/{id}", IpBlock, json=request.to_json(), id=id)

    def admin_delete_ip_block(self, id):
        self.delete("/api/v1/admin/ip_blocks/{id}", id=id)

    def admin_reports(self):
        return self.paged("/api/v1/admin/reports", AdminReport)

    def admin_get_report(self, id) -> AdminReport:
        return self.get("/api/v1/admin/reports/{id}", AdminReport, id=id)

    def admin_update_report(self, id, request) -> AdminReport:
        return self.put("/api/v1/admin/reports/{id}", AdminReport, json=request.to_json(), id=id)

    def admin_resolve_report(self, id) -> AdminReport:
        return self.post("/api/v1/admin/reports/{id}/resolve", AdminReport, id=id)

    def admin_measures(self, keys, start_at, end_at) -> list[Measure]:
        """Get totals such as `active_users` over a period."""
        return self.post("/api/v1/admin/measures", list[Measure], json={
            "keys": list(keys),
            "start_at": format_datetime(start_at),
            "end_at": format_datetime(end_at),
        })

    def admin_dimensions(self, keys, start_at, end_at) -> list[Dimension]:
        """Get breakdowns such as `languages` over a period."""
        return self.post("/api/v1/admin/dimensions", list[Dimension], json={
            "keys": list(keys),
            "start_at": format_datetime(start_at),
            "end_at": format_datetime(end_at),
        })

    def admin_retention(self, start_at, end_at, frequency=CohortFrequency.DAY) -> list[Cohort]:
        return self.post("/api/v1/admin/retention", list[Cohort], json={
            "start_at": format_datetime(start_at),
            "end_at": format_datetime(end_at),
            "frequency": CohortFrequency(frequency).value,
        })

    def admin_trending_tags(self) -> list[AdminTag]:
        return self.get("/api/v1/admin/trends/tags", list[AdminTag])
