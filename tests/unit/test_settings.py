"""Unit tests for Settings."""

from slogi.settings import Settings


def test_local_url_plain_http_without_certificates(tmp_path):
    """Test that the local URL uses http when no certificates exist."""
    settings = Settings(cert_dir=str(tmp_path))
    assert not settings.ssl_enabled
    assert settings.local_url == "http://localhost:8000"


def test_local_url_https_with_certificates(tmp_path):
    """Test that the local URL uses https when certificate and key exist."""
    (tmp_path / "cert.pem").write_text("cert")
    (tmp_path / "key.pem").write_text("key")
    settings = Settings(cert_dir=str(tmp_path), port=8443)
    assert settings.ssl_enabled
    assert settings.local_url == "https://localhost:8443"


def test_local_url_requires_both_files(tmp_path):
    """Test that a certificate without its key does not enable https."""
    (tmp_path / "cert.pem").write_text("cert")
    settings = Settings(cert_dir=str(tmp_path))
    assert settings.local_url.startswith("http://")
