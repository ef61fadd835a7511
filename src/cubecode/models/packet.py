from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Union

class FieldKind(str, Enum):
    BYTE = "b"
    INT = "i"
    STRING = "s"

class DecodedField(BaseModel):
    index: int = Field(..., ge=0)
    kind: FieldKind
    offset: int = Field(..., ge=0)
    size: int = Field(..., ge=1)
    value: Union[int, str]

class DecodedPacket(BaseModel):
    length: int = Field(..., ge=0)
    fields: List[DecodedField] = Field(default_factory=list)
    consumed: int = Field(0, ge=0)
    remaining: int = Field(0, ge=0)
