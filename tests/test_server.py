"""
Unit tests for the modular exponentiation HTTP service.

Requests go through FastAPI's TestClient, so routing, request validation and
error mapping are exercised together.
"""

import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from modular_exponentiation import server


class TestModExpServer(unittest.TestCase):
    """Test cases for the /calculate, /widths and /health endpoints."""

    def setUp(self):
        self.client = TestClient(server.app)

    def test_calculate_success(self):
        response = self.client.post(
            "/calculate", json={"base": 4, "exponent": 13, "modulus": 497, "width": "int64"}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"result": 445, "width": "int64"})

    def test_calculate_uint8(self):
        response = self.client.post(
            "/calculate", json={"base": 5, "exponent": 3, "modulus": 13, "width": "uint8"}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["result"], 8)

    def test_calculate_modulus_one(self):
        response = self.client.post(
            "/calculate", json={"base": 10, "exponent": 20, "modulus": 1, "width": "int32"}
        )

        self.assertEqual(response.json()["result"], 0)

    def test_calculate_large_uint64(self):
        modulus = 1 << 32
        response = self.client.post(
            "/calculate",
            json={"base": modulus - 1, "exponent": 65537, "modulus": modulus, "width": "uint64"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["result"], pow(modulus - 1, 65537, modulus))

    def test_calculate_modulus_zero_is_not_validated(self):
        """Modulus 0 is passed through; numpy's remainder by zero yields 0."""
        response = self.client.post(
            "/calculate", json={"base": 5, "exponent": 3, "modulus": 0, "width": "int64"}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"result": 0, "width": "int64"})

    def test_precondition_violation_returns_400(self):
        response = self.client.post(
            "/calculate", json={"base": 1, "exponent": 1, "modulus": 254, "width": "uint8"}
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("254", response.json()["detail"])

    def test_precondition_violation_logged_once(self):
        with self.assertLogs("modular_exponentiation", level="WARNING") as logs:
            response = self.client.post(
                "/calculate", json={"base": 1, "exponent": 1, "modulus": 254, "width": "uint8"}
            )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(len(logs.records), 1)

    def test_operand_outside_width_returns_422(self):
        response = self.client.post(
            "/calculate", json={"base": 300, "exponent": 1, "modulus": 13, "width": "uint8"}
        )

        self.assertEqual(response.status_code, 422)

    def test_unknown_width_returns_422(self):
        response = self.client.post(
            "/calculate", json={"base": 1, "exponent": 1, "modulus": 13, "width": "int128"}
        )

        self.assertEqual(response.status_code, 422)

    @patch('modular_exponentiation.server.exponentiator')
    def test_unexpected_error_returns_500(self, mock_exponentiator):
        mock_exponentiator.compute.side_effect = RuntimeError("boom")

        response = self.client.post(
            "/calculate", json={"base": 1, "exponent": 1, "modulus": 13, "width": "int64"}
        )

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"], "Internal server error")

    def test_widths(self):
        response = self.client.get("/widths")

        self.assertEqual(response.status_code, 200)
        widths = {item["name"]: item for item in response.json()}
        self.assertEqual(len(widths), 8)
        self.assertEqual(widths["uint8"]["max_value"], 255)
        self.assertEqual(widths["int8"]["min_value"], -128)

    def test_health(self):
        with TestClient(server.app) as client:
            response = client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})


if __name__ == '__main__':
    unittest.main()
