"""Tests for request signing."""

import hashlib

from imgix_url.signing import SIGNATURE_PARAM, sign, signature_base, verify


class TestSign:
    """Test signature computation."""

    def test_parameterless(self, sign_key):
        """Test signature without a query string."""
        assert sign(sign_key, "/gaiman.jpg") == "db6110637ad768e4b1d503cb96e6439a"

    def test_with_query(self, sign_key):
        """Test signature with a query string."""
        assert sign(sign_key, "/gaiman.jpg", "w=500&h=1000") == "fc4afbc39b6741560717142aeada876c"

    def test_nested_path(self, sign_key):
        """Test signature for a nested path."""
        assert sign(sign_key, "/test/gaiman.jpg") == "51033c27726f19c0f8229a1ed2dc8523"

    def test_signature_base(self):
        """Test ? is only inserted when there is a query."""
        assert signature_base("key", "/a.png") == "key/a.png"
        assert signature_base("key", "/a.png", "w=1") == "key/a.png?w=1"

    def test_lowercase_md5_hex(self):
        """Test signature is lowercase hex MD5."""
        expected = hashlib.md5(b"key/a.png?w=1").hexdigest()

        assert sign("key", "/a.png", "w=1") == expected
        assert expected == expected.lower()
        assert len(expected) == 32

    def test_param_name(self):
        """Test signature parameter name."""
        assert SIGNATURE_PARAM == "s"


class TestVerify:
    """Test signature verification."""

    def test_valid_signature(self, sign_key):
        """Test matching signature."""
        assert verify(sign_key, "/gaiman.jpg", "w=500&h=1000", "fc4afbc39b6741560717142aeada876c")

    def test_tampered_query(self, sign_key):
        """Test changed parameters fail."""
        assert not verify(sign_key, "/gaiman.jpg", "w=5000&h=1000", "fc4afbc39b6741560717142aeada876c")

    def test_wrong_key(self):
        """Test another key fails."""
        assert not verify("other", "/gaiman.jpg", "", "db6110637ad768e4b1d503cb96e6439a")

    def test_missing_signature(self, sign_key):
        """Test empty signature fails."""
        assert not verify(sign_key, "/gaiman.jpg", "", None)
