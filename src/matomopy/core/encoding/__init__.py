"""Wire encoders for single and bulk tracking requests."""

from matomopy.core.encoding.bulk import build_bulk_payload, encode_bulk
from matomopy.core.encoding.query import QueryCreator, encode_query

__all__ = [
    "QueryCreator",
    "build_bulk_payload",
    "encode_bulk",
    "encode_query",
]
