"""
Connection schemas shared by every connector.

``ConnectionField`` declares one input the user fills in when setting up an
integration; ``Connection`` is the resulting credential bundle.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, SecretStr, field_validator


class ConnectionField(BaseModel):
    name: str
    label: str
    control_type: Literal["text", "password"] = "text"
    optional: bool = False

    @property
    def masked(self) -> bool:
        return self.control_type == "password"


class Connection(BaseModel):
    """
    Credentials for one integration instance.

    ``client_secret`` is a SecretStr so it never shows up in reprs, logs or
    ``model_dump_json()`` output.
    """

    client_id: str = Field(..., min_length=1)
    client_secret: SecretStr

    @field_validator("client_secret")
    @classmethod
    def _secret_not_empty(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("client_secret must not be empty")
        return value

    def __getitem__(self, name: str) -> str:
        """Field lookup by name; secrets are returned in clear."""
        if name not in type(self).model_fields:
            raise KeyError(name)
        value = getattr(self, name)
        if isinstance(value, SecretStr):
            return value.get_secret_value()
        return value
