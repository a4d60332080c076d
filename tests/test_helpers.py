"""Tests for the util helpers, models and context."""

from datetime import datetime, timedelta, timezone

import pytest

from krakenspot import Context, KrakenResponse, Model
from krakenspot.errors import ContextExpired, InvalidOTP, KrakenAPIError, UnknownAssetPair, ValidationException
from krakenspot.market import AssetInfoResponse
from krakenspot.util.enums import ErrorCodes, Paths
from krakenspot.util.helpers import (
    encode_params, encode_value, flatten_params, parse_media_type, raise_errors_in, to_snake_case,
    validate_timestamp
)
from krakenspot.util.mappings import Mappings


class TestEncoding:

    @pytest.mark.parametrize("value, expected", [
        (True, "true"),
        (False, "false"),
        (0, "0"),
        ("1.25", "1.25"),
        (["XBTUSD", "ETHUSD"], "XBTUSD,ETHUSD"),
        (("post", "fciq"), "post,fciq"),
        (Paths.BALANCE, "/private/Balance"),
        (datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc), "2024-01-02T03:04:05Z"),
        (datetime(2024, 1, 2, 4, 4, 5, tzinfo=timezone(timedelta(hours=1))), "2024-01-02T03:04:05Z"),
        (datetime(2024, 1, 2, 3, 4, 5), "2024-01-02T03:04:05Z"),
    ])
    def test_encode_value(self, value, expected):
        assert encode_value(value) == expected

    def test_encode_params_keeps_order_and_falsy_values(self):
        params = {"nonce": 1, "trades": False, "userref": None, "ofs": 0}

        assert list(encode_params(params).items()) == [("nonce", "1"), ("trades", "false"), ("ofs", "0")]

    def test_flatten_params(self):
        params = {
            "pair": "XBTUSD",
            "orders": [{"type": "buy", "close": {"price": "1"}}],
            "oflags": ["post"]
        }

        assert flatten_params(params) == {
            "pair": "XBTUSD",
            "orders[0][type]": "buy",
            "orders[0][close][price]": "1",
            "oflags": ["post"]
        }


class TestParseMediaType:

    @pytest.mark.parametrize("header, expected", [
        ("application/json", "application/json"),
        ("application/json; charset=utf-8", "application/json"),
        ("Application/ZIP", "application/zip"),
        ("application/octet-stream;", "application/octet-stream"),
    ])
    def test_valid(self, header, expected):
        assert parse_media_type(header) == expected

    @pytest.mark.parametrize("header", [None, "", "json", "application/", "a b/c", "text/plain; =x"])
    def test_invalid(self, header):
        with pytest.raises(ValueError):
            parse_media_type(header)


class TestRaiseErrorsIn:

    def test_no_errors(self):
        raise_errors_in(KrakenResponse(error=[], result={}))

    def test_mapped_error(self):
        with pytest.raises(UnknownAssetPair):
            raise_errors_in(KrakenResponse(error=["EQuery:Unknown asset pair"]))

    def test_first_error_after_warnings(self):
        resp = KrakenResponse(error=["WGeneral:Something", "EAuth:Invalid OTP"])

        with pytest.raises(InvalidOTP) as exc_info:
            raise_errors_in(resp)

        assert str(exc_info.value) == "EAuth:Invalid OTP"
        assert isinstance(exc_info.value, KrakenAPIError)

    @pytest.mark.parametrize("code", list(ErrorCodes))
    def test_every_code_raises_its_own_error(self, code):
        with pytest.raises(KrakenAPIError) as exc_info:
            raise_errors_in(KrakenResponse(error=[code.value + ":details"]))

        assert type(exc_info.value) is Mappings.ERROR_MAPPINGS[code]

    def test_unknown_code(self):
        with pytest.raises(KrakenAPIError) as exc_info:
            raise_errors_in(KrakenResponse(error=["ENew:Something else"]))

        assert type(exc_info.value) is KrakenAPIError


class TestModels:

    def test_model_snake_cases_keys(self):
        model = Model(triggerTime="now", **{"status-prop": "ok"})

        assert model.trigger_time == "now"
        assert model.status_prop == "ok"

    def test_response_mapping(self):
        resp = AssetInfoResponse(error=[], result={
            "XXBT": {"aclass": "currency", "altname": "XBT", "decimals": 10, "display_decimals": 5}
        })

        assert str(resp.result["XXBT"]) == "XBT"
        assert resp.result["XXBT"].decimals == 10

    def test_response_rejects_non_list_errors(self):
        with pytest.raises(TypeError):
            KrakenResponse(error="EGeneral:Internal error")

    @pytest.mark.parametrize("camel, snake", [
        ("triggerTime", "trigger_time"),
        ("vol_exec", "vol_exec"),
        ("status-prop", "status_prop"),
    ])
    def test_to_snake_case(self, camel, snake):
        assert to_snake_case(camel) == snake


class TestValidateTimestamp:

    def test_values(self):
        assert validate_timestamp(None) is None
        assert validate_timestamp(1688671200) == 1688671200
        assert validate_timestamp("OQCLML-BW3P3-BUCMWZ") == "OQCLML-BW3P3-BUCMWZ"
        assert validate_timestamp(datetime(2023, 1, 1, tzinfo=timezone.utc)) == 1672531200

    def test_negative(self):
        with pytest.raises(ValidationException):
            validate_timestamp(-1)

    @pytest.mark.parametrize("value", [True, 1.5, [1]])
    def test_invalid_type(self, value):
        with pytest.raises(TypeError):
            validate_timestamp(value)


class TestContext:

    def test_without_deadline(self):
        ctx = Context()

        assert ctx.remaining() is None
        assert not ctx.expired
        ctx.raise_if_expired("nothing")

    def test_cancel(self):
        ctx = Context(timeout=60)
        ctx.cancel()

        assert ctx.cancelled
        assert ctx.expired

        with pytest.raises(ContextExpired, match="cancelled"):
            ctx.raise_if_expired("failed to send request")

    def test_deadline(self):
        ctx = Context(timeout=0)

        assert ctx.remaining() == 0

        with pytest.raises(ContextExpired, match="deadline exceeded"):
            ctx.raise_if_expired("failed to send request")
