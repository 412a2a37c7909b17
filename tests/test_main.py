import logging

import pytest

pytest.importorskip("PyQt5.QtWidgets")

from flowerpass.main import build_parser, resolve_site_key


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.url == ""
    assert args.key is None
    assert args.settings is None


def test_parser_reads_url_key_and_settings():
    args = build_parser().parse_args(["https://mail.google.com", "--key", "gmail", "--settings", "/tmp/s.json"])
    assert args.url == "https://mail.google.com"
    assert args.key == "gmail"
    assert args.settings == "/tmp/s.json"


def test_site_key_taken_from_url():
    assert resolve_site_key("https://www.maps.google.com/") == "google"
    assert resolve_site_key("") == ""


def test_key_override_wins_over_url():
    assert resolve_site_key("https://www.maps.google.com/", " gmail ") == "gmail"
    assert resolve_site_key("about:blank", "") == ""


def test_url_without_host_is_reported(caplog):
    with caplog.at_level(logging.WARNING, logger="flowerpass.main"):
        assert resolve_site_key("about:blank") == ""
    assert "about:blank" in caplog.text


def test_no_warning_without_url(caplog):
    with caplog.at_level(logging.WARNING, logger="flowerpass.main"):
        resolve_site_key("")
    assert caplog.text == ""
