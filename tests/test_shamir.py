"""Tests for Shamir Secret Sharing over GF(2^8)."""

import logging
import os
from itertools import combinations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from gfshamir import ErrorKind, ShamirError, combine, split


class TestSplit:
    """Tests for splitting a secret into shares."""

    def test_generate_correct_number_of_shares(self):
        """Should generate exactly parts shares of len(secret) + 1 bytes."""
        shares = split(b"test", parts=5, threshold=3)

        assert len(shares) == 5
        assert all(len(share) == 5 for share in shares)

    def test_x_coordinates(self):
        """Last bytes are the distinct x-coordinates 1..parts."""
        shares = split(os.urandom(20), parts=7, threshold=4)

        assert [share[-1] for share in shares] == list(range(1, 8))

    def test_deterministic_with_injected_source(self, fixed_source):
        """f(x) = 0x2A + x for a degree-1 polynomial with coefficient 1."""
        shares = split(b"\x2a", parts=3, threshold=2, random_source=fixed_source(1))

        assert shares == [b"\x2b\x01", b"\x28\x02", b"\x29\x03"]

    def test_one_polynomial_per_secret_byte(self, counting_source):
        """Each byte draws threshold - 1 fresh coefficients."""
        split(b"abcd", parts=5, threshold=3, random_source=counting_source)

        assert counting_source.requests == [2, 2, 2, 2]

    def test_different_secrets_different_shares(self):
        """Different secrets should produce different shares."""
        shares1 = split(b"secret one", parts=3, threshold=2)
        shares2 = split(b"secret two", parts=3, threshold=2)

        assert shares1 != shares2

    def test_shares_are_bytes(self):
        shares = split(bytearray(b"abc"), parts=2, threshold=2)
        assert all(isinstance(share, bytes) for share in shares)

    @pytest.mark.parametrize(
        "parts,threshold,kind",
        [
            (2, 3, ErrorKind.PARTS_LESS_THAN_THRESHOLD),
            (1000, 3, ErrorKind.PARTS_EXCEED_LIMIT),
            (10, 1, ErrorKind.THRESHOLD_TOO_SMALL),
            (0, 0, ErrorKind.THRESHOLD_TOO_SMALL),
            (3, 256, ErrorKind.PARTS_LESS_THAN_THRESHOLD),
            (256, 256, ErrorKind.PARTS_EXCEED_LIMIT),
        ],
    )
    def test_invalid_parameters(self, parts, threshold, kind):
        with pytest.raises(ShamirError) as exc_info:
            split(b"test", parts, threshold)

        assert exc_info.value.kind is kind

    def test_empty_secret(self):
        with pytest.raises(ShamirError, match="cannot split an empty secret") as exc_info:
            split(None, 3, 2)
        assert exc_info.value.kind is ErrorKind.EMPTY_SECRET

        with pytest.raises(ShamirError):
            split(b"", 3, 2)

    def test_parameters_validated_before_secret(self):
        """The first violated precondition is the one reported."""
        with pytest.raises(ShamirError) as exc_info:
            split(b"", 2, 3)

        assert exc_info.value.kind is ErrorKind.PARTS_LESS_THAN_THRESHOLD

    def test_random_source_failure(self, failing_source):
        """No shares are returned when entropy is unavailable."""
        with pytest.raises(ShamirError) as exc_info:
            split(b"test", 5, 3, random_source=failing_source)

        assert exc_info.value.kind is ErrorKind.RANDOM_SOURCE_FAILURE

    def test_does_not_log_secret(self, caplog):
        caplog.set_level(logging.DEBUG, logger="gfshamir")

        split(b"hunter2", parts=3, threshold=2)

        assert "Split 7-byte secret into 3 shares (threshold 2)" in caplog.text
        assert "hunter2" not in caplog.text


class TestCombine:
    """Tests for reconstructing a secret from shares."""

    def test_reconstruct_with_threshold_shares(self):
        """Reconstruction with exactly t shares should succeed."""
        shares = split(b"test", parts=5, threshold=3)

        assert combine(shares[:3]) == b"test"

    def test_every_subset_of_threshold_or_more(self):
        """Any 3, 4 or 5 of the 5 shares reconstruct the secret."""
        shares = split(b"test", parts=5, threshold=3)

        for size in (3, 4, 5):
            for subset in combinations(shares, size):
                assert combine(list(subset)) == b"test"

    def test_share_order_does_not_matter(self):
        shares = split(b"order", parts=4, threshold=2)

        assert combine([shares[3], shares[0]]) == b"order"
        assert combine(list(reversed(shares))) == b"order"

    def test_insufficient_shares_still_produce_output(self):
        """
        Fewer than t shares give a result of the right length.

        Whether it equals the secret is chance, so only the shape is checked.
        """
        shares = split(b"test", parts=5, threshold=3)

        assert len(combine(shares[:2])) == 4

    def test_maximum_parameters(self):
        secret = os.urandom(3)
        shares = split(secret, parts=255, threshold=255)

        assert len(shares) == 255
        assert combine(shares) == secret

    def test_binary_secret(self):
        secret = bytes(range(256))
        shares = split(secret, parts=6, threshold=4)

        assert combine(shares[2:]) == secret

    def test_insufficient_shares(self):
        shares = split(b"test", parts=3, threshold=2)

        with pytest.raises(ShamirError) as exc_info:
            combine(shares[:1])
        assert exc_info.value.kind is ErrorKind.INSUFFICIENT_SHARES

        with pytest.raises(ShamirError, match="less than two shares"):
            combine([])

        with pytest.raises(ShamirError):
            combine(None)

    def test_shares_too_short(self):
        with pytest.raises(ShamirError) as exc_info:
            combine([b"f", b"b"])

        assert exc_info.value.kind is ErrorKind.SHARES_TOO_SHORT

    def test_inconsistent_share_length(self):
        with pytest.raises(ShamirError) as exc_info:
            combine([b"foo", b"ba"])

        assert exc_info.value.kind is ErrorKind.INCONSISTENT_SHARE_LENGTH

    def test_duplicate_x_values(self):
        """Identical x-coordinates make the Lagrange denominator zero."""
        with pytest.raises(ShamirError) as exc_info:
            combine([b"foo", b"foo"])

        assert exc_info.value.kind is ErrorKind.DIVISION_BY_ZERO


class TestRoundTrip:
    """Property: any t or more shares of a split reconstruct the secret."""

    @settings(max_examples=50, deadline=None)
    @given(data=st.data())
    def test_round_trip(self, data):
        secret = data.draw(st.binary(min_size=1, max_size=200), label="secret")
        threshold = data.draw(st.integers(min_value=2, max_value=12), label="t")
        parts = data.draw(st.integers(min_value=threshold, max_value=16), label="n")

        shares = split(secret, parts, threshold)
        subset = data.draw(
            st.lists(
                st.sampled_from(shares),
                min_size=threshold,
                max_size=parts,
                unique=True,
            ),
            label="subset",
        )

        assert combine(subset) == secret

    def test_long_secret(self):
        secret = os.urandom(1000)
        shares = split(secret, parts=5, threshold=3)

        assert combine([shares[1], shares[4], shares[2]]) == secret
