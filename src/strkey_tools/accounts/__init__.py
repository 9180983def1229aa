from .api import (
    MAX_ID,
    SIGNER_VERSIONS,
    decode_muxed_account,
    decode_signer_key,
    demux,
    dump,
    dump_payload,
    encode_muxed_account,
    encode_signer_key,
    format_dump,
    mux,
    muxed_account_record,
    parse_uint64,
    signer_key_record,
    split_muxed_payload,
)

__all__ = [
    "MAX_ID",
    "SIGNER_VERSIONS",
    "decode_muxed_account",
    "decode_signer_key",
    "demux",
    "dump",
    "dump_payload",
    "encode_muxed_account",
    "encode_signer_key",
    "format_dump",
    "mux",
    "muxed_account_record",
    "parse_uint64",
    "signer_key_record",
    "split_muxed_payload",
]
