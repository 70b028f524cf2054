from pydantic import BaseModel, Field, EmailStr
from typing import Any, Dict

class CustomerBase(BaseModel):
    name: str = Field(..., min_length=1, description="The customer's full name.")
    email: EmailStr = Field(..., description="The customer's email address. Must be unique.")
    address: str = Field(..., min_length=1, description="The customer's country code, e.g. 'US'.")

class CustomerCreate(CustomerBase):
    pass

class CustomerPatch(BaseModel):
    """
    A partial update. A field that is not set means "leave unchanged";
    a field that is set means "change to this value".
    """
    name: str | None = Field(None, min_length=1)
    email: EmailStr | None = None
    address: str | None = Field(None, min_length=1)

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)

class CustomerRead(BaseModel):
    id: int
    name: str
    email: str
    address: str

    class Config:
        from_attributes = True
