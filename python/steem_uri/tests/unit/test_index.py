"""Unit tests for steem_uri module exports."""


class TestModuleExports:
    """Tests for module public API exports."""

    def test_constants_exported(self):
        """Test that constants are exported."""
        from steem_uri import (
            ACTION_SIGN,
            KIND_OP,
            KIND_OPS,
            KIND_TX,
            PLACEHOLDERS,
            PROTOCOL,
        )

        assert PROTOCOL == "steem"
        assert ACTION_SIGN == "sign"
        assert (KIND_TX, KIND_OP, KIND_OPS) == ("tx", "op", "ops")
        assert set(PLACEHOLDERS) == {
            "__ref_block_num",
            "__ref_block_prefix",
            "__expiration",
            "__signer",
        }

    def test_errors_share_base(self):
        """Test the error hierarchy."""
        from steem_uri import (
            InvalidAction,
            InvalidPayload,
            InvalidProtocol,
            InvalidSigningAction,
            MalformedEncoding,
            MalformedUri,
            SignerUnavailable,
            SteemUriError,
        )

        for error in (
            InvalidAction,
            InvalidPayload,
            InvalidProtocol,
            InvalidSigningAction,
            MalformedEncoding,
            MalformedUri,
            SignerUnavailable,
        ):
            assert issubclass(error, SteemUriError)
        assert issubclass(SteemUriError, ValueError)

    def test_functions_exported(self):
        """Test that codec and resolver functions are exported."""
        from steem_uri import (
            b64u_decode,
            b64u_encode,
            decode,
            decode_json,
            encode_alias,
            encode_json,
            encode_op,
            encode_ops,
            encode_parameters,
            encode_tx,
            resolve_callback,
            resolve_transaction,
        )

        assert callable(decode)
        assert callable(encode_tx)
        assert callable(resolve_transaction)
        assert callable(resolve_callback)

    def test_all_names_resolve(self):
        """Test that every name in __all__ exists."""
        import steem_uri

        for name in steem_uri.__all__:
            assert hasattr(steem_uri, name), name
