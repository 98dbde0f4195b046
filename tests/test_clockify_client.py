import sys
import os
import json
import unittest
from unittest.mock import MagicMock

import requests

# Add the parent directory to sys.path to import the clockireport package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from clockireport.api.client import ClockifyClient, ClockifyAPIError
from clockireport.api.http_client import HttpClient

BASE = "https://api.clockify.me/api/v1"


class TestClockifyClient(unittest.TestCase):
    """Test the read-only Clockify accessors against a mocked session."""

    def setUp(self):
        self.session = MagicMock()
        self.client = ClockifyClient(HttpClient("test_api_key", session=self.session), BASE)

        self.mock_workspaces = [
            {
                "id": "w1",
                "name": "Acme",
                "hourlyRate": {"amount": 5000, "currency": "EUR"},
                "memberships": [],
                "workspaceSettings": {"timeRoundingInReports": False},
                "imageUrl": "",
                "featureSubscriptionType": "PRO"
            },
            {"id": "w2", "name": "Side Project"}
        ]
        self.mock_user = {
            "id": "u1",
            "email": "jane@example.com",
            "name": "Jane",
            "activeWorkspace": "w1",
            "defaultWorkspace": "w1",
            "settings": {"weekStart": "MONDAY"},
            "status": "ACTIVE"
        }
        self.mock_entries = [
            {
                "id": "e1",
                "description": "Build",
                "tagIds": ["tag1"],
                "userId": "u1",
                "billable": True,
                "projectId": "project1",
                "timeInterval": {
                    "start": "2024-05-15T08:00:00Z",
                    "end": "2024-05-15T09:30:00Z",
                    "duration": "PT1H30M"
                },
                "workspaceId": "w1",
                "isLocked": False,
                "type": "REGULAR"
            },
            {
                "id": "e2",
                "description": "Test",
                "tagIds": None,
                "timeInterval": {"start": "2024-05-15T10:00:00Z", "end": None, "duration": None},
                "workspaceId": "w1"
            }
        ]

    def respond(self, status, body):
        """Make the session answer the next request with status and body."""
        resp = MagicMock()
        resp.status_code = status
        resp.content = body if isinstance(body, bytes) else json.dumps(body).encode()
        resp.headers = {}
        resp.__enter__.return_value = resp
        self.session.request.return_value = resp

    def requested_url(self):
        args, _ = self.session.request.call_args
        self.assertEqual(args[0], "GET")
        return args[1]

    def test_get_all_workspaces(self):
        self.respond(200, self.mock_workspaces)
        workspaces = self.client.get_all_workspaces()

        self.assertEqual(self.requested_url(), f"{BASE}/workspaces")
        self.assertEqual([w.id for w in workspaces], ["w1", "w2"])
        self.assertEqual(workspaces[0].name, "Acme")
        self.assertEqual(workspaces[0].hourly_rate_amount, 5000)
        self.assertEqual(workspaces[0].hourly_rate_currency, "EUR")
        self.assertEqual(workspaces[0].settings, {"timeRoundingInReports": False})
        self.assertEqual(workspaces[1].settings, {})

    def test_get_current_user(self):
        self.respond(200, self.mock_user)
        user = self.client.get_current_user()

        self.assertEqual(self.requested_url(), f"{BASE}/user")
        self.assertEqual(user.id, "u1")
        self.assertEqual(user.email, "jane@example.com")
        self.assertEqual(user.active_workspace, "w1")
        self.assertEqual(user.settings, {"weekStart": "MONDAY"})
        self.assertEqual(user.custom_fields, [])

    def test_get_time_entries(self):
        self.respond(200, self.mock_entries)
        entries = self.client.get_time_entries(
            "w1", "u1", "2024-05-15T00:00:00Z", "2024-05-15T23:59:59Z")

        self.assertEqual(
            self.requested_url(),
            f"{BASE}/workspaces/w1/user/u1/time-entries"
            "?start=2024-05-15T00:00:00Z&end=2024-05-15T23:59:59Z"
        )
        self.assertEqual([e.description for e in entries], ["Build", "Test"])
        self.assertTrue(entries[0].billable)
        self.assertEqual(entries[0].duration, "PT1H30M")
        self.assertEqual(entries[0].tag_ids, ["tag1"])
        self.assertEqual(entries[1].tag_ids, [])
        self.assertEqual(entries[1].end, "")

    def test_trailing_slash_in_base_url(self):
        client = ClockifyClient(HttpClient("k", session=self.session), BASE + "/")
        self.respond(200, [])
        client.get_all_workspaces()
        self.assertEqual(self.requested_url(), f"{BASE}/workspaces")

    def test_non_200_raises_without_parsing(self):
        cases = [
            (self.client.get_all_workspaces, (), 401),
            (self.client.get_current_user, (), 500),
            (self.client.get_time_entries, ("w1", "u1", "s", "e"), 403),
        ]
        for call, args, status in cases:
            with self.subTest(call=call.__name__, status=status):
                # A body that would not even decode as JSON
                self.respond(status, b'<html>error</html>')
                with self.assertRaises(ClockifyAPIError) as ctx:
                    call(*args)
                self.assertEqual(ctx.exception.status_code, status)
                self.assertIn("non 200 status", str(ctx.exception))

    def test_malformed_json_raises_value_error(self):
        for call in (self.client.get_all_workspaces, self.client.get_current_user):
            with self.subTest(call=call.__name__):
                self.respond(200, b'[{"id": ')
                with self.assertRaises(ValueError):
                    call()

    def test_wrong_shape_raises_value_error(self):
        self.respond(200, {"id": "w1"})
        with self.assertRaises(ValueError):
            self.client.get_all_workspaces()

        self.respond(200, [self.mock_user])
        with self.assertRaises(ValueError):
            self.client.get_current_user()

    def test_wrong_element_shape_raises_value_error(self):
        cases = [
            (self.client.get_all_workspaces, (), b'[null]'),
            (self.client.get_all_workspaces, (), b'["w1"]'),
            (self.client.get_all_workspaces, (), b'[{"id": "w1", "name": "Acme", "hourlyRate": 5}]'),
            (self.client.get_all_workspaces, (), b'[{"id": "w1", "name": 7}]'),
            (self.client.get_current_user, (), b'{"id": "u1", "settings": []}'),
            (self.client.get_time_entries, ("w1", "u1", "s", "e"), b'[null]'),
            (self.client.get_time_entries, ("w1", "u1", "s", "e"), b'[{"description": "Build", "timeInterval": "x"}]'),
            (self.client.get_time_entries, ("w1", "u1", "s", "e"), b'[{"description": 5}]'),
            (self.client.get_time_entries, ("w1", "u1", "s", "e"), b'[{"description": "Build", "tagIds": "tag1"}]'),
        ]
        for call, args, body in cases:
            with self.subTest(call=call.__name__, body=body):
                self.respond(200, body)
                with self.assertRaises(ValueError):
                    call(*args)

    def test_null_fields_fall_back_to_empty_values(self):
        self.respond(200, [{"id": "e1", "description": None, "timeInterval": None, "customFieldValues": None}])
        entry = self.client.get_time_entries("w1", "u1", "s", "e")[0]
        self.assertEqual(entry.description, "")
        self.assertEqual(entry.start, "")
        self.assertEqual(entry.custom_field_values, [])

    def test_transport_error_propagates_unchanged(self):
        error = requests.ConnectionError("Name or service not known")
        self.session.request.side_effect = error
        with self.assertRaises(requests.ConnectionError) as ctx:
            self.client.get_current_user()
        self.assertIs(ctx.exception, error)


if __name__ == '__main__':
    unittest.main()
