"""
Signed-in identity.
"""

from typing import Optional

from pydantic import BaseModel


class Identity(BaseModel):
    email: str
    phone: Optional[str] = None
