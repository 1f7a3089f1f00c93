"""
Caller identity.

A :class:`Principal` is the opaque token identifying whoever invoked an
operation.  The only thing the record store ever does with it is
compare two principals for equality, so it is modelled as a frozen
value type rather than a bare string: a principal can never be
accidentally compared with, or concatenated into, an ordinary field.
"""

from pydantic import ConfigDict, RootModel, field_validator


class Principal(RootModel[str]):
    """Opaque, comparable caller identity.

    Serialises as a plain JSON string.  Two principals are equal iff
    their underlying tokens are equal.
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def non_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Principal must not be empty")
        return v

    @property
    def text(self) -> str:
        return self.root

    def __str__(self) -> str:
        return self.root
