from __future__ import annotations

from ridestate._redact import redact_for_log


def test_redact_for_log_redacts_sensitive_keys() -> None:
    payload = {
        "id": "d1",
        "lat": 37.0,
        "access_token": "TOKEN",
        "driver": {"email": "d@example.com", "fullName": "Jane Doe"},
    }

    redacted = redact_for_log(payload)
    assert redacted["id"] == "d1"
    assert redacted["lat"] == 37.0
    assert redacted["access_token"] == "<redacted>"
    assert redacted["driver"]["email"] == "<redacted>"
    assert redacted["driver"]["fullName"] == "<redacted>"


def test_redact_for_log_truncates_long_strings() -> None:
    long_value = "x" * 600
    redacted = redact_for_log({"value": long_value}, max_string=10)
    assert redacted["value"].startswith("x" * 10)
    assert "<truncated>" in redacted["value"]


def test_redact_for_log_passes_scalars_through() -> None:
    payload = {"id": "d1", "location": [{"lat": 1.0, "Phone_Number": "+1555"}], "online": True, "speed": None}
    redacted = redact_for_log(payload)
    assert redacted == {"id": "d1", "location": [{"lat": 1.0, "Phone_Number": "<redacted>"}], "online": True, "speed": None}
