"""Tests for the HTTP service using the in-process ASGI TestClient."""

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from shamirkit.config import DEFAULT_NUM_SHARES, DEFAULT_THRESHOLD, MAX_SHARES
from shamirkit.service.app import create_app


@pytest.fixture()
def client():
    return TestClient(create_app())


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_split_and_reconstruct_integer(client):
    resp = client.post("/split", json={"secret": 1234, "threshold": 3, "num_shares": 6})
    assert resp.status_code == 200
    body = resp.json()
    assert body["threshold"] == 3
    assert len(body["shares"]) == 6

    resp = client.post("/reconstruct", json={"shares": body["shares"][2:5]})
    assert resp.status_code == 200
    assert resp.json() == {"secret": 1234}


def test_split_defaults(client):
    resp = client.post("/split", json={"secret": 5})
    assert resp.status_code == 200
    body = resp.json()
    assert body["threshold"] == DEFAULT_THRESHOLD
    assert len(body["shares"]) == DEFAULT_NUM_SHARES


def test_text_secret(client):
    resp = client.post("/split", json={"secret": "open sesame", "threshold": 2, "num_shares": 3})
    shares = resp.json()["shares"]
    resp = client.post("/reconstruct", json={"shares": shares[1:], "encoding": "text"})
    assert resp.json() == {"secret": "open sesame"}


def test_hex_secret(client):
    secret = "00c0ffee"
    resp = client.post(
        "/split", json={"secret": secret, "threshold": 2, "num_shares": 2, "encoding": "hex"}
    )
    shares = resp.json()["shares"]
    resp = client.post("/reconstruct", json={"shares": shares, "encoding": "hex"})
    assert resp.json() == {"secret": secret}


def test_integer_given_as_digits(client):
    resp = client.post("/split", json={"secret": "9001", "encoding": "int"})
    shares = resp.json()["shares"]
    resp = client.post("/reconstruct", json={"shares": shares[:DEFAULT_THRESHOLD]})
    assert resp.json() == {"secret": 9001}


def test_threshold_exceeds_shares(client):
    resp = client.post("/split", json={"secret": 1, "threshold": 4, "num_shares": 3})
    assert resp.status_code == 422
    assert "Threshold" in resp.json()["detail"]


def test_too_many_shares(client):
    resp = client.post("/split", json={"secret": 1, "num_shares": MAX_SHARES + 1})
    assert resp.status_code == 422


def test_hex_encoding_rejects_bad_symbol(client):
    resp = client.post("/split", json={"secret": "xyz", "encoding": "hex"})
    assert resp.status_code == 422


def test_malformed_share(client):
    resp = client.post("/reconstruct", json={"shares": ["1-abc", "garbage"]})
    assert resp.status_code == 422


def test_duplicate_shares(client):
    resp = client.post("/split", json={"secret": 8, "threshold": 2, "num_shares": 3})
    share = resp.json()["shares"][0]
    resp = client.post("/reconstruct", json={"shares": [share, share]})
    assert resp.status_code == 422


def test_non_ascii_digit_share(client):
    resp = client.post("/reconstruct", json={"shares": ["1-ff", "²-ff"]})
    assert resp.status_code == 422


def test_non_ascii_digit_integer_secret(client):
    resp = client.post("/split", json={"secret": "²", "encoding": "int"})
    assert resp.status_code == 422
    assert "decimal digits" in resp.json()["detail"]


def test_creating_app_leaves_root_logger_alone():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    create_app()
    assert root.handlers == handlers
    assert root.level == level
