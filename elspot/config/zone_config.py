#!filepath: elspot/config/zone_config.py
from pydantic import BaseModel, model_validator


class ZoneConfig(BaseModel):
    # IANA key ("Europe/Paris") or fixed EU rule ("EU:+02:00/+03:00")
    key: str = "Europe/Paris"
    min_year: int = 2000
    max_year: int = 2037

    @model_validator(mode="after")
    def _check_years(self):
        if self.min_year > self.max_year:
            raise ValueError(f"min_year {self.min_year} > max_year {self.max_year}")
        return self
