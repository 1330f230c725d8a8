from pydantic import BaseModel, ConfigDict, Field

CUSTOMER_EXAMPLE = {
    "id": 0,
    "name": "Yuki",
    "email": "yuki@gmail.com",
    "phone": "(61)99999-9999",
}

# Ids are stored in a 32-bit INTEGER column.
CUSTOMER_ID_MIN = -2**31
CUSTOMER_ID_MAX = 2**31 - 1


class CustomerBase(BaseModel):
    name: str = Field("", description="The name of the customer.")
    email: str = Field("", description="The customer's email address. Not validated.")
    phone: str = Field("", description="The customer's phone number. Not validated.")


class CustomerCreate(CustomerBase):
    id: int = Field(..., ge=CUSTOMER_ID_MIN, le=CUSTOMER_ID_MAX, description="Caller-chosen identifier, unique across customers.")

    model_config = ConfigDict(json_schema_extra={"examples": [CUSTOMER_EXAMPLE]})


class CustomerUpdate(CustomerBase):
    """Full replacement of name, email and phone for an existing id."""
    id: int = Field(..., ge=CUSTOMER_ID_MIN, le=CUSTOMER_ID_MAX, description="Identifier of the customer to update.")

    model_config = ConfigDict(json_schema_extra={"examples": [CUSTOMER_EXAMPLE]})


class CustomerRead(CustomerBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
