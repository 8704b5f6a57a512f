from typing import List

import pytest

from recommender.models.preferences import PreferenceQuery
from recommender.models.smartphone import Smartphone


@pytest.fixture
def catalog_text() -> str:
    return (
        "Device Name,Charging Time,Operating System\n"
        "iPhone 15,1h 30min,IOS\n"
        "Galaxy S24,1h 5min,ANDROID\n"
        "OnePlus 12,0h 30min,ANDROID\n"
        "Pixel 8,1h 45min,ANDROID\n"
    )


@pytest.fixture
def separable_catalog() -> List[Smartphone]:
    """Four distinct phones, each repeated so the trees can fit them exactly."""
    rows = [
        ("iPhone 15", 90, "IOS"),
        ("iPhone SE", 120, "IOS"),
        ("OnePlus 12", 30, "ANDROID"),
        ("Pixel 8", 105, "ANDROID"),
    ]
    return [
        Smartphone(device_name=name, charging_time_minutes=minutes, operating_system=os_name)
        for name, minutes, os_name in rows
        for _ in range(3)
    ]


@pytest.fixture
def android_query() -> PreferenceQuery:
    return PreferenceQuery(operating_system="ANDROID", max_charging_time_minutes=60)
