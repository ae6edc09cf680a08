"""The M3UA common header and the base of messages made of named parameters."""

from __future__ import annotations

import struct
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from ..params.param import Param, marshal_multi_params, parse_multi_params
from .constants import InvalidParameterError, TooShortToParseError

_HEADER = struct.Struct(">BBBBI")
HEADER_LEN = _HEADER.size


@dataclass
class Header:
    """The common header that starts every M3UA message."""

    version: int = 1
    reserved: int = 0
    message_class: int = 0
    message_type: int = 0
    length: int = 0
    payload: bytes = b""

    def __post_init__(self) -> None:
        self.payload = bytes(self.payload)

    def marshal(self) -> bytes:
        """Return the wire form of the header followed by its payload."""
        fixed = _HEADER.pack(
            int(self.version) & 0xFF,
            int(self.reserved) & 0xFF,
            int(self.message_class) & 0xFF,
            int(self.message_type) & 0xFF,
            int(self.length) & 0xFFFFFFFF,
        )
        return fixed + self.payload

    def marshal_len(self) -> int:
        """Return the length of the wire form."""
        return HEADER_LEN + len(self.payload)

    def set_length(self) -> None:
        """Set the Length field from the payload."""
        self.length = HEADER_LEN + len(self.payload)

    def __str__(self) -> str:
        return (
            f"{{Version: {int(self.version)}, Reserved: {hex(int(self.reserved))}, "
            f"Class: {int(self.message_class)}, Type: {int(self.message_type)}, "
            f"Length: {int(self.length)}, Payload: {self.payload.hex()}}}"
        )


def new_header(version: int, message_class: int, message_type: int, payload: bytes) -> Header:
    """Create a header around a payload, its length filled in."""
    header = Header(
        version=version,
        reserved=0,
        message_class=message_class,
        message_type=message_type,
        payload=payload,
    )
    header.set_length()
    return header


def parse_header(data: bytes) -> Header:
    """Decode the common header; everything after it becomes the payload."""
    data = bytes(data)
    if len(data) < HEADER_LEN:
        raise TooShortToParseError()
    version, reserved, message_class, message_type, length = _HEADER.unpack_from(data)
    return Header(version, reserved, message_class, message_type, length, data[HEADER_LEN:])


def _display_name(field_name: str) -> str:
    return "".join(word.capitalize() for word in field_name.split("_"))


class ParamMessage:
    """A message whose body is a fixed set of optional, named parameters.

    Subclasses declare their class, type, names and the parameters they hold
    in FIELDS, as (attribute name, tag) pairs in wire order. The header kept
    by a message carries no payload: the payload is built from the parameters.
    """

    MESSAGE_CLASS: ClassVar[int] = 0
    MESSAGE_TYPE: ClassVar[int] = 0
    CLASS_NAME: ClassVar[str] = ""
    TYPE_NAME: ClassVar[str] = ""
    FIELDS: ClassVar[Tuple[Tuple[str, int], ...]] = ()

    def __init__(self, header: Optional[Header] = None, **params: Optional[Param]) -> None:
        if header is None:
            header = Header(
                version=1,
                reserved=0,
                message_class=self.MESSAGE_CLASS,
                message_type=self.MESSAGE_TYPE,
            )
        self.header = header
        known = {name for name, _ in self.FIELDS}
        unknown = sorted(set(params) - known)
        if unknown:
            raise TypeError(f"{type(self).__name__} has no parameter {', '.join(unknown)}")
        for name, _ in self.FIELDS:
            setattr(self, name, params.get(name))

    def _present(self) -> List[Param]:
        return [p for p in (getattr(self, name) for name, _ in self.FIELDS) if p is not None]

    def marshal_len(self) -> int:
        """Return the length of the wire form."""
        return HEADER_LEN + sum(p.marshal_len() for p in self._present())

    def set_length(self) -> None:
        """Set the Length fields of the parameters and of the header."""
        for param in self._present():
            param.set_length()
        self.header.length = self.marshal_len()

    def marshal(self) -> bytes:
        """Return the wire form of the message."""
        payload = marshal_multi_params(self._present())
        return replace(self.header, payload=payload).marshal()

    @classmethod
    def parse(cls, data: bytes) -> "ParamMessage":
        """Decode a message of this kind; unexpected parameters are an error."""
        header = parse_header(data)
        by_tag: Dict[int, str] = {int(tag): name for name, tag in cls.FIELDS}
        found: Dict[str, Param] = {}
        for param in parse_multi_params(header.payload):
            name = by_tag.get(int(param.tag))
            if name is None:
                raise InvalidParameterError()
            found[name] = param
        return cls(replace(header, payload=b""), **found)

    def version(self) -> int:
        return self.header.version

    def message_class(self) -> int:
        return self.MESSAGE_CLASS

    def message_type(self) -> int:
        return self.MESSAGE_TYPE

    def message_class_name(self) -> str:
        return self.CLASS_NAME

    def message_type_name(self) -> str:
        return self.TYPE_NAME

    def __str__(self) -> str:
        parts = [f"Header: {self.header}"]
        for name, _ in self.FIELDS:
            param = getattr(self, name)
            parts.append(f"{_display_name(name)}: {'' if param is None else param}")
        return "{" + ", ".join(parts) + "}"

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name, _ in self.FIELDS)
        return f"{type(self).__name__}(header={self.header!r}, {fields})"

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.header == other.header and all(
            getattr(self, name) == getattr(other, name) for name, _ in self.FIELDS
        )

    __hash__ = None  # type: ignore[assignment]