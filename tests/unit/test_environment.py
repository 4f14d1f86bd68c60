"""
Environment switching tests
"""

import pytest

from zillow.api.environment import Environment, EnvironmentManager, EnvironmentType


@pytest.fixture
def environments():
    EnvironmentManager.register(
        Environment(
            name=EnvironmentType.PRODUCTION,
            url_prefix="http://www.zillow.com/webservice/",
            zws_id="X1-prod",
        )
    )
    EnvironmentManager.register(
        Environment(name=EnvironmentType.TEST, url_prefix="http://localhost:8080/webservice/")
    )


class TestEnvironmentManagement:
    """EnvironmentManager tests"""

    def test_nothing_registered(self):
        assert EnvironmentManager.get_current() is None
        assert EnvironmentManager.get_url_prefix() == ""
        assert EnvironmentManager.get_zws_id() == ""

    def test_production_is_default(self, environments):
        assert EnvironmentManager.get_url_prefix() == "http://www.zillow.com/webservice/"
        assert EnvironmentManager.get_zws_id() == "X1-prod"

    def test_switch(self, environments):
        EnvironmentManager.switch(EnvironmentType.TEST)

        assert EnvironmentManager.get_url_prefix() == "http://localhost:8080/webservice/"
        assert EnvironmentManager.get_zws_id() == ""

    def test_switch_to_unregistered(self, environments):
        with pytest.raises(ValueError, match="not registered"):
            EnvironmentManager.switch(EnvironmentType.STAGING)

    def test_reset(self, environments):
        EnvironmentManager.switch(EnvironmentType.TEST)
        EnvironmentManager.reset()

        assert EnvironmentManager.get_current() is None
