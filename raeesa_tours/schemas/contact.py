from pydantic import BaseModel
from typing import Literal, Optional

ContactStatus = Literal["new", "read", "replied"]


class ContactCreate(BaseModel):
    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""


class ContactUpdate(BaseModel):
    status: Optional[ContactStatus] = None
    adminNotes: Optional[str] = None
