"""Bruno collection data models.

These mirror the Bruno collection schema. Field names are snake_case in
Python and camelCase on the wire (``formUrlEncoded``, ``multipartForm``);
dump with ``by_alias=True`` to get the Bruno shape.
"""

import secrets
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

UID_ALPHABET = "useandom26T198340PX75pxJACKVERYMINDBUSHWOLFGQZbfghjklqvwyzrict"
UID_PATTERN = r"^[a-zA-Z0-9]{21}$"


def make_uid() -> str:
    """Generate a 21-character uid in the format Bruno expects."""
    return "".join(secrets.choice(UID_ALPHABET) for _ in range(21))


class BrunoModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class Param(BrunoModel):
    """A path or query parameter of a request."""

    uid: str = Field(default_factory=make_uid, pattern=UID_PATTERN)
    name: str
    value: str = ""
    description: str = ""
    enabled: bool = True
    type: Literal["path", "query"]
    required: bool = False


class Header(BrunoModel):
    uid: str = Field(default_factory=make_uid, pattern=UID_PATTERN)
    name: str
    value: str = ""
    description: str = ""
    enabled: bool = True


class FormField(BrunoModel):
    uid: str = Field(default_factory=make_uid, pattern=UID_PATTERN)
    name: str
    value: Any = ""
    description: str = ""
    enabled: bool = True
    type: Literal["text", "file"] | None = None


class Body(BrunoModel):
    """Request body; ``mode`` selects which of the payload fields is used."""

    mode: Literal["none", "json", "text", "xml", "formUrlEncoded", "multipartForm"] = "none"
    json_: str | None = Field(default=None, alias="json")
    text: str | None = None
    xml: str | None = None
    form_url_encoded: list[FormField] = []
    multipart_form: list[FormField] = []

    @model_validator(mode="after")
    def _check_mode_payload(self) -> "Body":
        if self.mode == "json" and not self.json_:
            raise ValueError("body mode 'json' requires a json payload")
        if self.mode == "none" and self.json_:
            raise ValueError("body mode 'none' cannot carry a json payload")
        return self


class Auth(BrunoModel):
    mode: Literal["inherit", "none", "basic", "bearer"] = "inherit"
    basic: dict | None = None
    bearer: dict | None = None


class RequestVars(BrunoModel):
    req: list[dict] = []
    res: list[dict] = []


class Request(BrunoModel):
    url: str
    method: str = Field(pattern=r"^[A-Z]+$")
    auth: Auth = Field(default_factory=Auth)
    headers: list[Header] = []
    params: list[Param] = []
    body: Body = Field(default_factory=Body)
    script: dict = {}
    vars: RequestVars = Field(default_factory=RequestVars)
    assertions: list[dict] = []
    tests: str = ""

    @field_validator("params")
    @classmethod
    def _unique_params(cls, v: list[Param]) -> list[Param]:
        seen = set()
        for param in v:
            key = (param.name, param.type)
            if key in seen:
                raise ValueError(f"duplicate {param.type} parameter '{param.name}'")
            seen.add(key)
        return v

    def find_param(self, name: str, type: str | None = None) -> Param | None:
        for param in self.params:
            if param.name == name and (type is None or param.type == type):
                return param
        return None


class RequestItem(BrunoModel):
    """One fully specified API call, the unit written to a ``.bru`` file."""

    uid: str = Field(default_factory=make_uid, pattern=UID_PATTERN)
    name: str
    type: Literal["http-request", "graphql-request"] = "http-request"
    seq: int | None = None
    request: Request


class Folder(BrunoModel):
    uid: str = Field(default_factory=make_uid, pattern=UID_PATTERN)
    name: str
    type: Literal["folder"] = "folder"
    items: list[Union["Folder", RequestItem]] = []


class Variable(BrunoModel):
    uid: str = Field(default_factory=make_uid, pattern=UID_PATTERN)
    name: str
    value: str = ""
    type: Literal["text"] = "text"
    enabled: bool = True
    secret: bool = False


class Environment(BrunoModel):
    uid: str = Field(default_factory=make_uid, pattern=UID_PATTERN)
    name: str
    variables: list[Variable] = []


class Collection(BrunoModel):
    version: Literal["1"] = "1"
    uid: str = Field(default_factory=make_uid, pattern=UID_PATTERN)
    name: str
    items: list[Folder | RequestItem] = []
    environments: list[Environment] = []

    def iter_requests(self):
        """Yield every request item, depth first."""
        stack = list(reversed(self.items))
        while stack:
            item = stack.pop()
            if isinstance(item, Folder):
                stack.extend(reversed(item.items))
            else:
                yield item
