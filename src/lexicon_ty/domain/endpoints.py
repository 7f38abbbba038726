"""Endpoint and record definitions.

Queries map to HTTP GET, procedures to HTTP POST, subscriptions to an
event stream. Records describe objects stored in a repository.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field

from lexicon_ty.domain.base import LexiconNode
from lexicon_ty.domain.fields import Object, Params
from lexicon_ty.domain.primitives import Ref, Union

# Body schemas exclude ``union``; messages are ``union`` only; records are
# ``object`` only. The single-member unions stay unions so new members
# can be added without changing the wire contract.
OutputSchema = Annotated[Object | Ref, Field(discriminator="type")]
InputSchema = Annotated[Object | Ref, Field(discriminator="type")]
MessageSchema = Annotated[Union, Field(discriminator="type")]
RecordSchema = Annotated[Object, Field(discriminator="type")]


class ErrorCode(LexiconNode):
    """Named error an endpoint may return."""

    # Short name for the error type, no whitespace.
    name: str
    description: str | None = None


class Output(LexiconNode):
    """HTTP response body."""

    encoding: str
    schema_: OutputSchema | None = Field(default=None, alias="schema")


class Input(LexiconNode):
    """HTTP request body."""

    encoding: str
    schema_: InputSchema | None = Field(default=None, alias="schema")


class Message(LexiconNode):
    """Messages a subscription may send."""

    schema_: MessageSchema = Field(alias="schema")


class Query(LexiconNode):
    type: Literal["query"] = "query"
    description: str | None = None
    parameters: Params | None = None
    output: Output | None = None
    errors: tuple[ErrorCode, ...] | None = Field(default=None, strict=False)


class Procedure(LexiconNode):
    type: Literal["procedure"] = "procedure"
    description: str | None = None
    parameters: Params | None = None
    output: Output | None = None
    input: Input | None = None
    errors: tuple[ErrorCode, ...] | None = Field(default=None, strict=False)


class Subscription(LexiconNode):
    type: Literal["subscription"] = "subscription"
    description: str | None = None
    parameters: Params | None = None
    message: Message | None = None
    errors: tuple[ErrorCode, ...] | None = Field(default=None, strict=False)


class Record(LexiconNode):
    """Object that can be stored in a repository record.

    ``key`` names the record-key kind (``tid``, ``nsid``, ``literal:self``, ...).
    """

    type: Literal["record"] = "record"
    description: str | None = None
    key: str
    record: RecordSchema
