"""Multibase algorithm record and descriptor."""

from dataclasses import dataclass, field

from pydantic import BaseModel, Field

from .codecs import Codec, UnimplementedCodec


class AlgorithmInfo(BaseModel):
    """Serializable description of a registered algorithm."""

    name: str = Field(..., min_length=1, description="Unique, case-sensitive algorithm name")
    code: str = Field(..., min_length=1, max_length=1, description="Single-character multibase prefix")
    implemented: bool = Field(default=True, description="False for reserved placeholders")


@dataclass(frozen=True, eq=False)
class Algorithm:
    """A registered multibase algorithm.

    Instances are created by :meth:`Registry.register` and never change
    afterwards. Equality is identity: two registrations of the same name are
    different algorithms.
    """

    name: str
    code: str
    codec: Codec = field(repr=False)

    def encode(self, data: bytes) -> str:
        """Encode ``data`` without the multibase prefix."""
        return self.codec.encode(data)

    def decode(self, text: str) -> bytes:
        """Decode ``text`` that has already had its multibase prefix removed."""
        return self.codec.decode(text)

    @property
    def implemented(self) -> bool:
        return not isinstance(self.codec, UnimplementedCodec)

    def info(self) -> AlgorithmInfo:
        return AlgorithmInfo(name=self.name, code=self.code, implemented=self.implemented)

    def __str__(self) -> str:
        return self.name
