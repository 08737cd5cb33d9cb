# rental_inventory/schemas/common.py
from pydantic import BaseModel, Field

# Every integer column is a PostgreSQL INTEGER
PG_INT_MIN = -2_147_483_648
PG_INT_MAX = 2_147_483_647

# At least one non-whitespace character; values are stored as sent
NON_BLANK = r"\S"


class ErrorResponse(BaseModel):
    detail: str = Field(description="Error message")
    code: str | None = Field(default=None, description="Machine-readable error kind")

    model_config = {
        "json_schema_extra": {
            "examples": [{"detail": "rental point 7 not found", "code": "not_found"}]
        }
    }


class OkResponse(BaseModel):
    ok: bool = Field(description="Always true")

    model_config = {"json_schema_extra": {"examples": [{"ok": True}]}}


class CountResponse(BaseModel):
    count: int = Field(ge=0, description="Number of records")
