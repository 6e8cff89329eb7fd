from typing import Literal

from pydantic import BaseModel

Theme = Literal["light", "dark"]

THEMES = ("light", "dark")
DEFAULT_THEME: Theme = "light"


class ThemeResponse(BaseModel):
    theme: Theme
