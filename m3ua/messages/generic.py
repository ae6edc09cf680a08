"""A message of any class and type, holding an ordered list of parameters."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List

from ..params.param import Param, marshal_multi_params, parse_multi_params
from .header import HEADER_LEN, Header, parse_header


@dataclass
class Generic:
    """A message whose class and type are taken as they are.

    Used for messages of a class and type not otherwise known, and for
    building messages by hand. The header carries no payload; the payload
    is built from the parameters.
    """

    header: Header
    params: List[Param] = field(default_factory=list)

    def marshal_len(self) -> int:
        """Return the length of the wire form."""
        return HEADER_LEN + sum(p.marshal_len() for p in self.params)

    def set_length(self) -> None:
        """Set the Length fields of the parameters and of the header."""
        for param in self.params:
            param.set_length()
        self.header.length = self.marshal_len()

    def marshal(self) -> bytes:
        """Return the wire form of the message."""
        payload = marshal_multi_params(self.params)
        return replace(self.header, payload=payload).marshal()

    def version(self) -> int:
        return self.header.version

    def message_class(self) -> int:
        return self.header.message_class

    def message_type(self) -> int:
        return self.header.message_type

    def message_class_name(self) -> str:
        return "Unknown"

    def message_type_name(self) -> str:
        return "Unknown"

    def __str__(self) -> str:
        listed = " ".join(str(p) for p in self.params)
        return f"{{Header: {self.header}, Params: [{listed}]}}"


def new_generic(version: int, message_class: int, message_type: int, *args: Param) -> Generic:
    """Create a message of the given class and type holding the parameters."""
    header = Header(
        version=version, reserved=0, message_class=message_class, message_type=message_type
    )
    message = Generic(header, list(args))
    message.set_length()
    return message


def parse_generic(data: bytes) -> Generic:
    """Decode any message as a header and a list of parameters."""
    header = parse_header(data)
    params = parse_multi_params(header.payload)
    return Generic(replace(header, payload=b""), params)