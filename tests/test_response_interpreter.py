"""Tests for tolerant decoding of webhook replies."""

import pytest

from adapters.response_interpreter import (
    decode_success_body,
    extract_error_message,
    parse_donation_response,
    rejection_message,
)
from core.domain.models import DonationResponse
from core.exceptions import ResponseFormatError
from helpers import DEEPLY_NESTED_BODY, HUGE_INTEGER_BODY


class TestParseDonationResponse:

    def test_full_body(self):
        response = parse_donation_response(
            {"success": True, "message": "thanks", "donation_id": "d1", "error": None}
        )
        assert response == DonationResponse(success=True, message="thanks", donation_id="d1")

    def test_missing_success_defaults_to_false(self):
        assert parse_donation_response({}).success is False

    def test_wrong_types_fall_back_to_defaults(self):
        response = parse_donation_response({"success": "yes", "message": 3, "error": ["x"]})
        assert response.success is False
        assert response.message is None
        assert response.error is None

    def test_camel_case_id_is_accepted(self):
        assert parse_donation_response({"donationId": "abc"}).donation_id == "abc"

    def test_snake_case_id_wins_when_both_present(self):
        response = parse_donation_response({"donation_id": "snake", "donationId": "camel"})
        assert response.donation_id == "snake"

    def test_falls_back_to_camel_case_when_snake_case_is_unusable(self):
        response = parse_donation_response({"donation_id": None, "donationId": "camel"})
        assert response.donation_id == "camel"

    def test_numeric_id_is_stringified(self):
        assert parse_donation_response({"donation_id": 42}).donation_id == "42"


class TestDecodeSuccessBody:

    def test_decodes_object(self):
        response = decode_success_body('{"success": true, "donation_id": "d1"}')
        assert response.success is True
        assert response.donation_id == "d1"

    @pytest.mark.parametrize("body", ["not json", "", "   ", "[1, 2]", '"text"', "null"])
    def test_rejects_non_object_bodies(self, body):
        with pytest.raises(ResponseFormatError):
            decode_success_body(body)

    @pytest.mark.parametrize("body", [HUGE_INTEGER_BODY, DEEPLY_NESTED_BODY], ids=["huge-integer", "deep-nesting"])
    def test_undecodable_json_is_a_format_error(self, body):
        with pytest.raises(ResponseFormatError):
            decode_success_body(body)


class TestExtractErrorMessage:

    def test_error_field_first(self):
        assert extract_error_message('{"error": "card declined", "message": "nope"}', 402) == "card declined"

    def test_message_field_second(self):
        assert extract_error_message('{"message": "try later"}', 503) == "try later"

    def test_blank_fields_are_skipped(self):
        assert extract_error_message('{"error": "  ", "message": "bad email"}', 400) == "bad email"

    @pytest.mark.parametrize("body", [None, "", "<html>oops</html>", "[]", '{"detail": "x"}'])
    def test_synthesizes_status_message(self, body):
        assert extract_error_message(body, 500) == "Server returned status 500"

    @pytest.mark.parametrize("body", [HUGE_INTEGER_BODY, DEEPLY_NESTED_BODY], ids=["huge-integer", "deep-nesting"])
    def test_undecodable_json_falls_back_to_status(self, body):
        assert extract_error_message(body, 402) == "Server returned status 402"


class TestRejectionMessage:

    def test_prefers_error(self):
        assert rejection_message(DonationResponse(error="limit reached", message="m")) == "limit reached"

    def test_uses_message(self):
        assert rejection_message(DonationResponse(message="declined")) == "declined"

    def test_generic_fallback(self):
        assert rejection_message(DonationResponse()) == "Donation request failed"
