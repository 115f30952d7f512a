# taskhub/schemas/tokens.py
from pydantic import BaseModel
from taskhub.schemas.user import UserOut


class AuthResponse(BaseModel):
    user: UserOut
    token: str

    model_config = {
        "from_attributes": True
    }
