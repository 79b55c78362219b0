from datetime import timedelta

import pytest
from fashion_inventory.core.security import create_access_token, verify_access_token

def test_create_token():
    token = create_access_token(data={"sub": "maker@example.com"})
    assert token
    assert isinstance(token, str)

def test_verify_token():
    token = create_access_token(data={"sub": "maker@example.com"})
    payload = verify_access_token(token)
    assert payload["sub"] == "maker@example.com"
    assert "exp" in payload

def test_verify_invalid_token():
    with pytest.raises(ValueError):
        verify_access_token("invalid.token.here")

def test_verify_expired_token():
    token = create_access_token(data={"sub": "maker@example.com"}, expires_delta=timedelta(minutes=-1))
    with pytest.raises(ValueError):
        verify_access_token(token)
