from pydantic import BaseModel

from gdax_client.schemas.fields import StrFloat


class Currency(BaseModel):
    model_config = {"frozen": True}

    id: str
    name: str
    min_size: StrFloat
