"""Shared fixtures for the country cache tests."""

import pytest

from fakes import make_country


@pytest.fixture
def usa():
    """United States sample country."""
    return make_country(
        "United States",
        population=331002651,
        capital="Washington, D.C.",
        region="Americas",
        area=9833517.0,
        official="United States of America",
    )


@pytest.fixture
def france():
    """France sample country."""
    return make_country(
        "France",
        population=67391582,
        capital="Paris",
        region="Europe",
        area=551695.0,
        official="French Republic",
    )


@pytest.fixture
def japan():
    """Japan sample country."""
    return make_country(
        "Japan",
        population=125836021,
        capital="Tokyo",
        region="Asia",
        area=377930.0,
    )


@pytest.fixture
def countries(usa, france, japan):
    """The three sample countries, in a fixed order."""
    return [usa, france, japan]
