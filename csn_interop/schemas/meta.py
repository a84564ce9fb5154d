"""
Pydantic models for the interop CSN ``meta`` block.
"""

from pydantic import BaseModel, ConfigDict, Field

INTEROP_FLAVOR = "effective"
CSN_INTEROP_VERSION = "1.0"


class DocumentInfo(BaseModel):
    version: str = "1.0.0"


class InteropMeta(BaseModel):
    """Metadata derived from the single service of a document."""

    model_config = ConfigDict(populate_by_name=True)

    document: DocumentInfo
    name: str | None = Field(default=None, alias="__name")
    namespace: str | None = Field(default=None, alias="__namespace")

    @classmethod
    def from_version(
        cls, major: str, name: str | None, namespace: str | None = None
    ) -> "InteropMeta":
        return cls(
            document=DocumentInfo(version=f"{major}.0.0"),
            name=name,
            namespace=namespace,
        )

    def to_csn(self) -> dict:
        """Serialize with CSN key names, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
