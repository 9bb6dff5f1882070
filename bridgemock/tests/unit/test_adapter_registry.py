"""Unit tests for the adapter registry and configurable properties."""

import pytest

import bridgemock.adapters
from bridgemock.adapters import (
    BridgeAdapter,
    MockBridgeAdapter,
    available_adapters,
    get_adapter,
    register_adapter,
)
from bridgemock.config import get_settings
from bridgemock.core.errors import ConfigurationError
from bridgemock.core.models import (
    BridgeRequest,
    ConfigurableProperty,
    ConfigurablePropertyMap,
    Count,
    Record,
    RecordList,
)


class SecuredAdapter(BridgeAdapter):
    """Adapter with a required and a sensitive property."""

    NAME = "Secured Bridge"
    VERSION = "2.0.0"

    def build_properties(self) -> ConfigurablePropertyMap:
        return ConfigurablePropertyMap(
            ConfigurableProperty(name="Server Url", is_required=True),
            ConfigurableProperty(name="Password", is_sensitive=True),
        )

    def count(self, request: BridgeRequest) -> Count:
        return Count(value=0)

    def retrieve(self, request: BridgeRequest) -> Record:
        return Record()

    def search(self, request: BridgeRequest) -> RecordList:
        return RecordList(fields=request.fields)


class TestRegistry:
    """Test adapter composition by key."""

    def test_mock_registered_by_default(self):
        """Test the mock adapter is available without registration."""
        assert "mock" in available_adapters()
        assert isinstance(get_adapter("mock"), MockBridgeAdapter)

    def test_lookup_is_case_insensitive(self):
        """Test adapter keys are matched case-insensitively."""
        assert isinstance(get_adapter("MOCK"), MockBridgeAdapter)

    def test_default_from_settings(self, monkeypatch):
        """Test the adapter key defaults to the BRIDGE_ADAPTER setting."""
        monkeypatch.setenv("BRIDGE_ADAPTER", "mock")
        get_settings.cache_clear()
        try:
            assert isinstance(get_adapter(), MockBridgeAdapter)
        finally:
            get_settings.cache_clear()

    def test_unknown_adapter_key(self):
        """Test an unknown key raises ConfigurationError listing the known ones."""
        with pytest.raises(ConfigurationError) as exc_info:
            get_adapter("nope")

        assert "nope" in str(exc_info.value)
        assert "mock" in str(exc_info.value)

    def test_register_custom_adapter(self, monkeypatch):
        """Test a custom adapter can be registered and constructed."""
        monkeypatch.setattr(bridgemock.adapters, "_ADAPTERS", dict(bridgemock.adapters._ADAPTERS))
        register_adapter("secured", SecuredAdapter)
        adapter = get_adapter("secured")
        assert adapter.name == "Secured Bridge"
        assert adapter.version == "2.0.0"
        assert "secured" in available_adapters()

    def test_register_rejects_non_adapter(self):
        """Test only BridgeAdapter subclasses can be registered."""
        with pytest.raises(TypeError):
            register_adapter("bad", dict)

    def test_kwargs_forwarded(self):
        """Test constructor arguments are passed to the adapter."""
        import logging
        logger = logging.getLogger("tests.registry")
        assert get_adapter("mock", logger=logger).logger is logger


class TestConfigurableProperties:
    """Test the property map used during the adapter lifecycle."""

    def test_required_property_missing(self):
        """Test initialize fails when a required property has no value."""
        adapter = SecuredAdapter()
        with pytest.raises(ConfigurationError) as exc_info:
            adapter.initialize()

        assert "Server Url" in str(exc_info.value)
        assert not adapter.initialized

    def test_configure_with_values(self):
        """Test configure sets values and initializes."""
        adapter = SecuredAdapter().configure({"Server Url": "https://example.com", "Password": "secret"})
        assert adapter.initialized
        assert adapter.properties.get_value("Server Url") == "https://example.com"

    def test_sensitive_values_masked(self):
        """Test sensitive property values are masked in to_dict."""
        adapter = SecuredAdapter()
        adapter.set_properties({"Server Url": "https://example.com", "Password": "secret"})
        assert adapter.properties.to_dict() == {"Server Url": "https://example.com", "Password": "********"}

    def test_unknown_properties_ignored(self):
        """Test values for undeclared properties are ignored."""
        props = ConfigurablePropertyMap(ConfigurableProperty(name="A"))
        props.set_values({"A": "1", "B": "2"})
        assert "B" not in props
        assert props.get_value("A") == "1"
        assert props.get_value("B") is None

    def test_iteration_order(self):
        """Test properties iterate in declaration order."""
        props = ConfigurablePropertyMap(
            ConfigurableProperty(name="b"),
            ConfigurableProperty(name="a"),
        )
        assert [p.name for p in props] == ["b", "a"]


def test_custom_adapter_not_left_registered():
    """Test registrations made inside a test do not outlive it."""
    assert "secured" not in available_adapters()
