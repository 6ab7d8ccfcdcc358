"""User record model."""

from pydantic import BaseModel, ConfigDict, Field


class ApplicationUser(BaseModel):
    """A stored user record.

    id is None until the record has been created in a store.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = Field(default=None, description="Store-assigned identifier")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Unique email address")
    active_flag: bool = Field(default=True, description="Whether the account is active")
