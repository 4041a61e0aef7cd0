from unittest import TestCase

from ..errors import InvalidScope
from ..scopes import Scope, Scopes


class TestScope(TestCase):
    def test_parses_kind(self):
        scope = Scope.parse("follow")

        self.assertEqual(scope.kind, "follow")
        self.assertIsNone(scope.sub)

    def test_parses_subscope(self):
        scope = Scope.parse("write:media")

        self.assertEqual(scope, Scope("write", "media"))

    def test_parses_admin_subscope(self):
        scope = Scope.parse("admin:write:reports")

        self.assertEqual(scope.kind, "admin:write")
        self.assertEqual(scope.sub, "reports")
        self.assertEqual(str(scope), "admin:write:reports")

    def test_rejects_unknown_subscope(self):
        with self.assertRaises(InvalidScope):
            Scope.parse("read:media")  # Only writable.
        with self.assertRaises(InvalidScope):
            Scope.parse("write:search")

    def test_rejects_unknown_kind(self):
        with self.assertRaises(InvalidScope):
            Scope.parse("frobnicate")

    def test_sorts_by_kind_then_subscope(self):
        scopes = sorted(Scope.parse(s) for s in ["push", "write", "read:lists", "read", "admin:read"])

        self.assertEqual(
            [str(s) for s in scopes],
            ["read", "read:lists", "write", "push", "admin:read"],
        )


class TestScopes(TestCase):
    def test_combines_with_or(self):
        scopes = Scopes.read_all() | Scopes.write("statuses") | Scopes.follow()

        self.assertEqual(str(scopes), "read write:statuses follow")
        self.assertEqual(len(scopes), 3)

    def test_all_is_read_write_follow_push(self):
        self.assertEqual(str(Scopes.all()), "read write follow push")

    def test_parses_space_separated(self):
        scopes = Scopes.parse("write:media  read")

        self.assertEqual(scopes, Scopes.read_all() | Scopes.write("media"))
        self.assertIn("write:media", scopes)
        self.assertNotIn("write", scopes)

    def test_duplicates_ignored(self):
        scopes = Scopes.parse("read read")

        self.assertEqual(len(scopes), 1)

    def test_from_json_accepts_list(self):
        self.assertEqual(Scopes.from_json(["read", "push"]), Scopes.read_all() | Scopes.push())

    def test_to_json_is_string(self):
        self.assertEqual((Scopes.push() | Scopes.read_all()).to_json(), "read push")

    def test_to_list(self):
        scopes = Scopes.admin_read() | Scopes.admin_write("accounts")

        self.assertEqual(scopes.to_list(), ["admin:read", "admin:write:accounts"])

    def test_bad_scope_in_list(self):
        with self.assertRaises(InvalidScope):
            Scopes.parse("read wibble")

    def test_usable_as_dict_key(self):
        d = {Scopes.parse("read write"): 1}

        self.assertEqual(d[Scopes.parse("write read")], 1)
