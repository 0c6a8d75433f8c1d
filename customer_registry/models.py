# models.py
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Wire key (lower-cased) -> alias used on the model
_WIRE_KEYS = {
    "id": "ID",
    "name": "Name",
    "role": "Role",
    "email": "Email",
    "phone": "Phone",
    "contacted": "Contacted",
}

REQUIRED_FIELDS = ("name", "role", "email", "phone")


class Customer(BaseModel):
    """A single customer record as stored in the registry.

    Built and serialised with the capitalised keys clients already send
    ("ID", "Name", ...). Incoming keys are matched case-insensitively, any
    other key is dropped, and a missing or null value falls back to the
    field's zero value.
    """

    model_config = ConfigDict(strict=True)

    customer_id: int = Field(0, alias="ID", ge=0, le=255, description="Unique identifier, 0-255")
    name: str = Field("", alias="Name")
    role: str = Field("", alias="Role", description="Free-form category, e.g. Subscriber")
    email: str = Field("", alias="Email")
    phone: str = Field("", alias="Phone")
    contacted: bool = Field(False, alias="Contacted")

    @model_validator(mode="before")
    @classmethod
    def normalise_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        normalised = {}
        for key, value in data.items():
            alias = _WIRE_KEYS.get(key.lower()) if isinstance(key, str) else None
            if alias is None or value is None:
                continue
            normalised[alias] = value
        return normalised

    def missing_fields(self) -> List[str]:
        return [field for field in REQUIRED_FIELDS if getattr(self, field) == ""]


# --- SEED RECORDS ---
def seed_customers() -> List[Customer]:
    return [
        Customer(
            ID=1,
            Name="John Doe",
            Role="Subscriber",
            Email="john.doe@gmail.com",
            Phone="123-456-7890",
            Contacted=True,
        ),
        Customer(
            ID=2,
            Name="Peter Pan",
            Role="Prospect",
            Email="peter.pan@gmail.com",
            Phone="321-654-0987",
            Contacted=True,
        ),
        Customer(
            ID=3,
            Name="Mary Jane",
            Role="Influencer",
            Email="mary.jane@gmail.com",
            Phone="111-222-3333",
            Contacted=False,
        ),
    ]
