from datetime import datetime

from pydantic import BaseModel


class Time(BaseModel):
    model_config = {"frozen": True}

    iso: datetime
    epoch: float
