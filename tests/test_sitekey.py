import pytest

from flowerpass.sitekey import site_key_from_hostname, site_key_from_url


@pytest.mark.parametrize("hostname, expected", [
    ("www.maps.google.com", "google"),
    ("maps.google.com", "google"),
    ("google.com", "google"),
    ("www.google.com", "google"),
    ("example.com", "example"),
    ("localhost", "localhost"),
    ("news.bbc.co.uk", "co"),
    ("Mail.Example.COM.", "example"),
    ("", ""),
    ("www.", ""),
])
def test_site_key_from_hostname(hostname, expected):
    assert site_key_from_hostname(hostname) == expected


@pytest.mark.parametrize("url, expected", [
    ("https://www.maps.google.com/maps?q=x", "google"),
    ("https://user:pw@github.com:443/login", "github"),
    ("http://localhost:8000/", "localhost"),
    ("example.com/signin", "example"),
    ("https://192.168.1.10/admin", "1"),
    ("", ""),
    ("   ", ""),
    ("file:///etc/passwd", ""),
    ("http://[::1", ""),
    ("localhost:8000/login", "localhost"),
    ("www.example.com:8080", "example"),
    ("about:blank", ""),
    ("data:text/html,hi", ""),
    ("mailto:bob@example.com", ""),
    ("javascript:void(0)", ""),
])
def test_site_key_from_url(url, expected):
    assert site_key_from_url(url) == expected
