from pydantic import BaseModel

from dashboard.db.models._mixins import CamelModel

class LoginIn(BaseModel):
    email: str = ""
    password: str = ""

class SessionUser(BaseModel):
    id: str
    name: str
    email: str
    role: str
    department: str

class MeOut(BaseModel):
    user: SessionUser

class PermissionsOut(CamelModel):
    role: str
    permissions: dict[str, bool]

class MessageOut(BaseModel):
    message: str
