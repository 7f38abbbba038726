"""Tag vocabularies for Lexicon documents.

``DefType`` is the closed set of ``type`` tags legal for a top-level
definition. ``StringFormat`` is the closed set of ``format`` values a
string node may declare.
"""

from __future__ import annotations

from enum import StrEnum


class DefType(StrEnum):
    """Tags accepted at the definition level of a document."""

    QUERY = "query"
    PROCEDURE = "procedure"
    SUBSCRIPTION = "subscription"
    RECORD = "record"
    STRING = "string"
    TOKEN = "token"
    OBJECT = "object"
    ARRAY = "array"


class StringFormat(StrEnum):
    """Format restrictions for string fields."""

    AT_IDENTIFIER = "at-identifier"
    AT_URI = "at-uri"
    CID = "cid"
    DATETIME = "datetime"
    DID = "did"
    HANDLE = "handle"
    NSID = "nsid"
    URI = "uri"
    LANGUAGE = "language"
