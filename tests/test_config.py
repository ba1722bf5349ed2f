"""The test overlay of domain.toml is the one in effect under pytest."""

from guideresto.domain import guideresto


class TestDomainConfig:
    def test_env_is_test(self):
        assert guideresto.env == "test"
        assert guideresto.config["testing"] is True

    def test_sqlite_provider(self):
        database = guideresto.config["databases"]["default"]
        assert database["provider"] == "sqlite"
        assert database["database_uri"].startswith("sqlite:///")

    def test_reference_data_not_seeded_in_tests(self):
        assert guideresto.SEED_REFERENCE_DATA is False

    def test_identities_are_uuid_strings(self):
        assert guideresto.config["identity_strategy"] == "uuid"
        assert guideresto.config["identity_type"] == "string"

    def test_quiet_logging(self):
        assert guideresto.config["logging"]["level"] == "WARNING"
