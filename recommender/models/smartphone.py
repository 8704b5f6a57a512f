"""
Smartphone model — one catalog record, the training example for the classifier.

Built by the catalog loader from a raw comma-separated line; charging time is
already normalized to whole minutes.
"""

from pydantic import BaseModel, ConfigDict, Field


class Smartphone(BaseModel):
    """
    A catalog entry.

    device_name: label the classifier predicts. Duplicates are legal and count
        as repeated training examples.
    charging_time_minutes: full-charge time in minutes.
    operating_system: free-form OS name as written in the catalog.
    """

    model_config = ConfigDict(frozen=True)

    device_name: str = Field(min_length=1)
    charging_time_minutes: int = Field(ge=0)
    operating_system: str
