from pydantic import BaseModel, EmailStr
from uuid import UUID


class CustomerSummary(BaseModel):
    id: UUID
    name: str
    email: EmailStr

    model_config = {"from_attributes": True}
