from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class FavoriteCreate(BaseModel):
    country_code: Optional[str] = Field(None, alias="countryCode")

    model_config = ConfigDict(populate_by_name=True)
