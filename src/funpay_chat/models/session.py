"""
Session models — the `data-app-data` blob embedded in the landing page.
"""

from typing import Optional
from pydantic import BaseModel, Field


class AppData(BaseModel):
    """Decoded `data-app-data` attribute. Other keys in the blob are ignored."""
    csrf_token: Optional[str] = Field(default=None, alias="csrf-token")

    model_config = {"populate_by_name": True}
