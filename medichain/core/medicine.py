"""
Medicine records for the MediChain world state.

A Medicine is stored as a compact JSON object with six string members
(name, concentration, form, expiration, quantity, code). The member names and
their order are part of the storage format shared with records that already
live on the ledger, so they must not change.
"""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


MEDICINE_FIELDS = ("name", "concentration", "form", "expiration", "quantity", "code")


class Medicine(BaseModel):
    """Medicine record as kept in the world state"""
    model_config = ConfigDict(
        strict=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "name": "Amoxicilina",
                "concentration": "250mg/5ml",
                "form": "Jarabe",
                "expiration": "31/12/2023",
                "quantity": "100",
                "code": "1234567"
            }
        }
    )

    name: str = Field("", description="Human-readable drug name")
    concentration: str = Field("", description="Dosage strength, free-form")
    form: str = Field("", description="Pharmaceutical form (tablet, syrup, ...)")
    expiration: str = Field("", description="Expiration date as DD/MM/YYYY text")
    quantity: str = Field("", description="Quantity stored as text")
    code: str = Field("", description="Identifying code, free-form")

    @field_validator(*MEDICINE_FIELDS, mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        # JSON null leaves the member at its zero value
        return "" if value is None else value

    @classmethod
    def from_bytes(cls, data: bytes | str) -> "Medicine":
        """
        Decode a stored record.

        Raises:
            pydantic.ValidationError: If data is not a JSON object with string members
        """
        return cls.model_validate_json(data)

    def to_bytes(self) -> bytes:
        """Encode the record in its stored form"""
        return self.model_dump_json().encode("utf-8")

    def with_quantity(self, quantity: str) -> "Medicine":
        """Return a copy with only the quantity replaced"""
        return self.model_copy(update={"quantity": quantity})


class QueryResult(BaseModel):
    """Key and record pair produced by a world-state scan"""
    model_config = ConfigDict(populate_by_name=True)

    key: str = Field(..., alias="Key", description="World-state key")
    record: Medicine = Field(..., alias="Record", description="Decoded medicine record")

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form using the Key/Record member names"""
        return self.model_dump(by_alias=True)
