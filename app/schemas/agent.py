"""Schemas for the agents and agent_cust endpoints."""

from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StringConstraints, field_validator, model_validator

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Request field -> table column. Bodies use the column names; short names are aliases.
FIELD_COLUMNS: dict[str, str] = {
    "agent_code": "AGENT_CODE",
    "agent_name": "AGENT_NAME",
    "working_area": "WORKING_AREA",
    "commission": "COMMISSION",
    "phone_no": "PHONE_NO",
    "country": "COUNTRY",
}


def _alias(column: str, short: str) -> AliasChoices:
    return AliasChoices(column, short)


class _AgentFields(BaseModel):
    """Shared behaviour: map validated fields onto column names."""

    def to_columns(self, only_set: bool = False) -> dict[str, Any]:
        names = self.model_fields_set if only_set else type(self).model_fields.keys()
        return {FIELD_COLUMNS[name]: getattr(self, name) for name in names}

    @field_validator("commission", mode="before", check_fields=False)
    @classmethod
    def _reject_bool_commission(cls, value: Any) -> Any:
        # bool is an int subclass and would otherwise pass as 0.0 / 1.0
        if isinstance(value, bool):
            raise ValueError("COMMISSION must be a number")
        return value


class AgentReplace(_AgentFields):
    """Request body for PUT /agents/{code}: every mutable field is required."""

    agent_name: NonEmptyStr = Field(..., validation_alias=_alias("AGENT_NAME", "name"))
    working_area: NonEmptyStr = Field(..., validation_alias=_alias("WORKING_AREA", "working_area"))
    commission: float = Field(..., allow_inf_nan=False, validation_alias=_alias("COMMISSION", "commission"))
    phone_no: NonEmptyStr = Field(..., validation_alias=_alias("PHONE_NO", "phone"))
    country: NonEmptyStr = Field(..., validation_alias=_alias("COUNTRY", "country"))


class AgentCreate(AgentReplace):
    """Request body for POST /agents."""

    agent_code: NonEmptyStr = Field(..., validation_alias=_alias("AGENT_CODE", "code"))

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "AGENT_CODE": "A1",
                    "AGENT_NAME": "Ramasundar",
                    "WORKING_AREA": "Bangalore",
                    "COMMISSION": 0.15,
                    "PHONE_NO": "077-12346674",
                    "COUNTRY": "India",
                }
            ]
        }
    }


class AgentPatch(_AgentFields):
    """Request body for PATCH /agents/{code}. Unknown keys are rejected; at least one field is required."""

    model_config = ConfigDict(extra="forbid")

    agent_name: NonEmptyStr = Field(None, validation_alias=_alias("AGENT_NAME", "name"))
    working_area: NonEmptyStr = Field(None, validation_alias=_alias("WORKING_AREA", "working_area"))
    commission: float = Field(None, allow_inf_nan=False, validation_alias=_alias("COMMISSION", "commission"))
    phone_no: NonEmptyStr = Field(None, validation_alias=_alias("PHONE_NO", "phone"))
    country: NonEmptyStr = Field(None, validation_alias=_alias("COUNTRY", "country"))

    @model_validator(mode="after")
    def _require_some_field(self) -> "AgentPatch":
        if not self.model_fields_set:
            raise ValueError("No fields supplied")
        return self


class AgentRecord(BaseModel):
    """One row of the agents table, passed through as stored."""

    model_config = ConfigDict(extra="allow")

    AGENT_CODE: str | None = None
    AGENT_NAME: str | None = None
    WORKING_AREA: str | None = None
    COMMISSION: float | None = None
    PHONE_NO: str | None = None
    COUNTRY: str | None = None


class CustomerRecord(BaseModel):
    """One row of the customer table; columns beyond these are passed through."""

    model_config = ConfigDict(extra="allow")

    CUST_CODE: str | None = None
    CUST_NAME: str | None = None
    AGENT_CODE: str | None = None


class AgentCreatedResponse(BaseModel):
    """Response for POST /agents."""

    message: str = Field(..., description="Outcome message.")
    agent_id: int | None = Field(None, serialization_alias="agentId", description="Row id generated by the database.")


class MessageResponse(BaseModel):
    """Response for PUT, PATCH and DELETE on /agents/{code}."""

    message: str
