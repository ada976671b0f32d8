"""Unit tests for signing aliases."""

import pytest

from steem_uri.aliases import ALIASES, DEFAULT_VOTE_WEIGHT, get_alias, is_alias
from steem_uri.decoder import decode
from steem_uri.encoder import encode_alias
from steem_uri.errors import InvalidPayload, InvalidSigningAction
from steem_uri.types import Parameters


class TestAliasTable:
    """Tests for the alias table."""

    def test_known_aliases(self):
        """Test the registered aliases."""
        assert set(ALIASES) == {"transfer", "vote"}
        assert is_alias("transfer")
        assert not is_alias("tx")

    def test_unknown_alias(self):
        """Test looking up an unknown alias."""
        with pytest.raises(InvalidSigningAction):
            get_alias("follow")

    def test_expand_does_not_touch_template(self):
        """Test that expansion leaves the table unchanged."""
        get_alias("transfer").expand(["bob", "1.000 STEEM"])
        assert ALIASES["transfer"].template[1]["to"] == "__to"


class TestTransferAlias:
    """Tests for the transfer alias."""

    def test_decode_transfer(self):
        """Test decoding a transfer with a memo."""
        result = decode("steem://sign/transfer/bob/1.000%20STEEM/thanks%21")
        assert result.tx.operations == [
            [
                "transfer",
                {"from": "__signer", "to": "bob", "amount": "1.000 STEEM", "memo": "thanks!"},
            ]
        ]
        assert result.tx.ref_block_num == "__ref_block_num"
        assert result.tx.expiration == "__expiration"

    def test_memo_optional(self):
        """Test that the memo defaults to empty."""
        result = decode("steem://sign/transfer/bob/1.000%20STEEM")
        assert result.tx.operations[0][1]["memo"] == ""

    def test_trailing_slash(self):
        """Test that an empty trailing segment is ignored."""
        result = decode("steem://sign/transfer/bob/1.000%20STEEM/")
        assert result.tx.operations[0][1]["memo"] == ""

    def test_missing_amount(self):
        """Test too few parameters."""
        with pytest.raises(InvalidPayload):
            decode("steem://sign/transfer/bob")

    def test_too_many_parameters(self):
        """Test too many parameters."""
        with pytest.raises(InvalidPayload):
            decode("steem://sign/transfer/bob/1.000%20STEEM/memo/extra")

    def test_params(self):
        """Test that query parameters apply to aliases."""
        result = decode("steem://sign/transfer/bob/1.000%20STEEM?s=alice&nb")
        assert result.params == Parameters(signer="alice", no_broadcast=True)


class TestVoteAlias:
    """Tests for the vote alias."""

    def test_default_weight(self):
        """Test a full upvote by default."""
        result = decode("steem://sign/vote/bob/my-post")
        assert result.tx.operations == [
            [
                "vote",
                {
                    "voter": "__signer",
                    "author": "bob",
                    "permlink": "my-post",
                    "weight": DEFAULT_VOTE_WEIGHT,
                },
            ]
        ]

    def test_weight_is_int(self):
        """Test that the weight segment is converted to a number."""
        result = decode("steem://sign/vote/bob/my-post/-5000")
        assert result.tx.operations[0][1]["weight"] == -5000

    def test_bad_weight(self):
        """Test non-numeric and out of range weights."""
        with pytest.raises(InvalidPayload):
            decode("steem://sign/vote/bob/my-post/lots")
        with pytest.raises(InvalidPayload):
            decode("steem://sign/vote/bob/my-post/20000")


class TestEncodeAlias:
    """Tests for encode_alias."""

    def test_encode_transfer(self):
        """Test percent-encoding of segments."""
        assert encode_alias("transfer", ["bob", "1.000 STEEM"]) == (
            "steem://sign/transfer/bob/1.000%20STEEM"
        )

    def test_encode_slash_in_memo(self):
        """Test that slashes inside a parameter stay in one segment."""
        uri = encode_alias("transfer", ["bob", "1.000 STEEM", "a/b"])
        assert uri == "steem://sign/transfer/bob/1.000%20STEEM/a%2Fb"
        assert decode(uri).tx.operations[0][1]["memo"] == "a/b"

    def test_encode_with_params(self):
        """Test appending the query string."""
        uri = encode_alias("vote", ["bob", "my-post", 100], Parameters(signer="alice"))
        assert uri == "steem://sign/vote/bob/my-post/100?s=alice"
        result = decode(uri)
        assert result.tx.operations[0][1]["weight"] == 100
        assert result.params.signer == "alice"

    def test_encode_unknown_alias(self):
        """Test an unknown alias name."""
        with pytest.raises(InvalidSigningAction):
            encode_alias("follow", ["bob"])

    def test_encode_wrong_arity(self):
        """Test argument count validation."""
        with pytest.raises(InvalidPayload):
            encode_alias("transfer", ["bob"])

    def test_encode_bad_value(self):
        """Test that values decode would reject are refused up front."""
        with pytest.raises(InvalidPayload):
            encode_alias("vote", ["bob", "my-post", "abc"])
        with pytest.raises(InvalidPayload):
            encode_alias("vote", ["bob", "my-post", 20000])
