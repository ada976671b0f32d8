"""Unit tests for steem:// URI decoding."""

import pytest

from steem_uri.base64u import b64u_encode, b64u_encode_str
from steem_uri.decoder import decode, decode_parameters
from steem_uri.encoder import encode_op, encode_ops, encode_tx
from steem_uri.errors import (
    InvalidAction,
    InvalidPayload,
    InvalidProtocol,
    InvalidSigningAction,
    MalformedEncoding,
    MalformedUri,
)
from steem_uri.payload import encode_json
from steem_uri.types import Parameters, UnresolvedTransaction

WITNESS_VOTE = [
    "account_witness_vote",
    {"account": "__signer", "witness": "jesta", "approve": True},
]

WITNESS_VOTE_URI = (
    "steem://sign/op/WyJhY2NvdW50X3dpdG5lc3Nfdm90ZSIseyJhY2NvdW50IjoiX19zaWduZXIiLC"
    "J3aXRuZXNzIjoiamVzdGEiLCJhcHByb3ZlIjp0cnVlfV0."
)

SAMPLE_TX = {
    "ref_block_num": 1234,
    "ref_block_prefix": 1122334455,
    "expiration": "2018-04-12T12:00:00",
    "extensions": [],
    "operations": [
        ["vote", {"voter": "foo", "author": "bar", "permlink": "baz", "weight": 10000}],
    ],
}


class TestDecodeKinds:
    """Tests for decoding tx, op and ops payloads."""

    def test_decode_op(self):
        """Test the witness vote example."""
        result = decode(WITNESS_VOTE_URI)
        assert result.tx == UnresolvedTransaction(
            ref_block_num="__ref_block_num",
            ref_block_prefix="__ref_block_prefix",
            expiration="__expiration",
            extensions=[],
            operations=[WITNESS_VOTE],
        )
        assert result.params == Parameters()

    def test_decode_ops(self):
        """Test that ops are wrapped in order."""
        ops = [WITNESS_VOTE, ["vote", {"voter": "__signer"}]]
        result = decode(encode_ops(ops))
        assert result.tx.operations == ops
        assert result.tx.ref_block_num == "__ref_block_num"
        assert result.tx.ref_block_prefix == "__ref_block_prefix"
        assert result.tx.expiration == "__expiration"

    def test_decode_tx_trusts_fields(self):
        """Test that tx payloads are used as-is, without default placeholders."""
        result = decode(encode_tx(SAMPLE_TX))
        assert result.tx.to_dict() == SAMPLE_TX
        assert result.tx.ref_block_num == 1234

    def test_decode_tx_preserves_extra_keys(self):
        """Test that unknown transaction keys survive decoding."""
        tx = dict(SAMPLE_TX, signatures=[])
        result = decode(encode_tx(tx))
        assert result.tx.extra == {"signatures": []}
        assert result.tx.to_dict() == tx

    def test_decode_tx_without_extensions(self):
        """Test that a tx without extensions is not given any."""
        tx = {k: v for k, v in SAMPLE_TX.items() if k != "extensions"}
        result = decode(encode_tx(tx))
        assert result.tx.extensions is None
        assert result.tx.to_dict() == tx
        assert "extensions" not in result.tx.to_dict()

    def test_decode_tx_keeps_key_order(self):
        """Test that top-level keys keep the payload order."""
        tx = {
            "expiration": SAMPLE_TX["expiration"],
            "operations": SAMPLE_TX["operations"],
            "ref_block_prefix": SAMPLE_TX["ref_block_prefix"],
            "ref_block_num": SAMPLE_TX["ref_block_num"],
            "extensions": [],
        }
        result = decode(encode_tx(tx))
        assert list(result.tx.to_dict()) == list(tx)
        assert encode_tx(result.tx) == encode_tx(tx)


class TestRoundTrip:
    """Tests for encode/decode round trips."""

    @pytest.mark.parametrize(
        "params",
        [
            Parameters(),
            Parameters(signer="foo"),
            Parameters(no_broadcast=True),
            Parameters(
                signer="foo",
                callback="https://example.com/cb?sig={{sig}}&id={{id}}",
                no_broadcast=True,
            ),
        ],
    )
    def test_tx_round_trip(self, params):
        """Test decode(encode_tx(t, p)) == (t, p)."""
        result = decode(encode_tx(SAMPLE_TX, params))
        assert result.tx.to_dict() == SAMPLE_TX
        assert result.params == params

    def test_tx_without_extensions_round_trip(self):
        """Test that a tx lacking extensions decodes to the same value."""
        tx = {k: v for k, v in SAMPLE_TX.items() if k != "extensions"}
        result = decode(encode_tx(tx, Parameters(signer="foo")))
        assert result.tx.to_dict() == tx
        assert result.params == Parameters(signer="foo")


class TestDecodeErrors:
    """Tests for decode validation."""

    def test_invalid_action(self):
        """Test an unknown authority."""
        with pytest.raises(InvalidAction) as exc_info:
            decode("steem://signx/tx/AA..")
        assert exc_info.value.action == "signx"

    def test_invalid_protocol(self):
        """Test a non-steem scheme."""
        with pytest.raises(InvalidProtocol) as exc_info:
            decode("http://sign/tx/AA..")
        assert exc_info.value.protocol == "http"

    def test_malformed_uri(self):
        """Test input that can not be parsed as a URI."""
        with pytest.raises(MalformedUri):
            decode("steem://[sign/tx/AA..")
        with pytest.raises(MalformedUri):
            decode("not a uri")

    def test_unknown_signing_action(self):
        """Test an unknown kind."""
        with pytest.raises(InvalidSigningAction) as exc_info:
            decode("steem://sign/foo/AA..")
        assert exc_info.value.action == "foo"

    def test_missing_kind(self):
        """Test a URI without a path."""
        with pytest.raises(InvalidSigningAction):
            decode("steem://sign")
        with pytest.raises(InvalidSigningAction):
            decode("steem://sign/")

    def test_missing_payload(self):
        """Test a kind without a payload."""
        with pytest.raises(InvalidSigningAction):
            decode("steem://sign/tx")
        with pytest.raises(InvalidSigningAction):
            decode("steem://sign/tx/")

    def test_extra_segments(self):
        """Test a payload followed by more path segments."""
        with pytest.raises(InvalidSigningAction):
            decode(WITNESS_VOTE_URI.replace("/op/", "/op/extra/"))

    def test_payload_not_json(self):
        """Test a payload that decodes to invalid JSON."""
        with pytest.raises(InvalidPayload):
            decode("steem://sign/tx/AA..")

    def test_payload_not_base64u(self):
        """Test a payload with invalid characters."""
        with pytest.raises(InvalidPayload):
            decode("steem://sign/op/!!!")

    def test_tx_missing_fields(self):
        """Test a transaction without block reference fields."""
        with pytest.raises(InvalidPayload):
            decode(f"steem://sign/tx/{encode_json({'operations': []})}")

    def test_tx_not_an_object(self):
        """Test a transaction payload that is a list."""
        with pytest.raises(InvalidPayload):
            decode(f"steem://sign/tx/{encode_json([1, 2])}")

    def test_ops_not_a_list(self):
        """Test an ops payload that is not a list."""
        with pytest.raises(InvalidPayload):
            decode(f"steem://sign/ops/{encode_json({'a': 1})}")

    def test_op_wrong_shape(self):
        """Test an operation that is not a [name, fields] pair."""
        with pytest.raises(InvalidPayload):
            decode(f"steem://sign/op/{encode_json(['vote'])}")
        with pytest.raises(InvalidPayload):
            decode(f"steem://sign/ops/{encode_json([['vote', 'x']])}")


class TestDecodeParameters:
    """Tests for query parameter decoding."""

    def test_presence_only_no_broadcast(self):
        """Test nb with and without a value."""
        assert decode_parameters("nb").no_broadcast is True
        assert decode_parameters("nb=").no_broadcast is True
        assert decode_parameters("nb=0").no_broadcast is True
        assert decode_parameters("").no_broadcast is False

    def test_signer(self):
        """Test the signer literal."""
        assert decode_parameters("s=foo").signer == "foo"

    def test_callback(self):
        """Test Base64u callback decoding."""
        callback = "https://example.com/?id={{id}}"
        params = decode_parameters(f"cb={b64u_encode_str(callback)}")
        assert params.callback == callback

    def test_bad_callback(self):
        """Test a callback that is not Base64u."""
        with pytest.raises(MalformedEncoding):
            decode_parameters("cb=a*b")

    def test_unknown_keys_ignored(self):
        """Test that other query keys are ignored."""
        assert decode_parameters("foo=bar") == Parameters()

    def test_decode_with_params(self):
        """Test parameters on a full URI."""
        callback = b64u_encode(b"https://x/{{sig}}")
        result = decode(f"{WITNESS_VOTE_URI}?nb&s=foo&cb={callback}")
        assert result.params == Parameters(
            signer="foo", callback="https://x/{{sig}}", no_broadcast=True
        )
        assert result.tx.operations == [WITNESS_VOTE]

    def test_encode_op_params(self):
        """Test parameters written by encode_op."""
        params = Parameters(signer="foo", no_broadcast=True)
        assert decode(encode_op(WITNESS_VOTE, params)).params == params
