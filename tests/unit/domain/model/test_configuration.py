"""Tests for domain/model/configuration.py."""

import pytest

from behaviorgen.domain.exceptions.configuration import ConfigurationError
from behaviorgen.domain.model.configuration import GeneratorConfig
from behaviorgen.domain.model.enums import IdOrdering


class TestGeneratorConfigDefaults:
    """Tests for default configuration."""

    def test_godot_conventions(self) -> None:
        config = GeneratorConfig()
        assert config.container_name == "Behavior"
        assert config.marker_attribute == "SignalAttribute"
        assert config.handler_suffix == "EventHandler"
        assert config.root_artifact == "Behavior.cs"
        assert config.dispatch_method == "OnSignal"

    def test_sorted_ordering_by_default(self) -> None:
        assert GeneratorConfig().id_ordering is IdOrdering.SORTED

    def test_sequential_by_default(self) -> None:
        assert GeneratorConfig().parallel is False

    def test_parallel_with_workers(self) -> None:
        assert GeneratorConfig(max_workers=4).parallel is True
        assert GeneratorConfig(max_workers=1).parallel is False

    def test_is_root(self) -> None:
        config = GeneratorConfig()
        assert config.is_root("Behavior.cs") is True
        assert config.is_root("Foo.cs") is False


class TestGeneratorConfigFailFirst:
    """Tests for FAIL-FIRST validation in GeneratorConfig."""

    def test_non_identifier_container_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="container_name"):
            GeneratorConfig(container_name="Not Valid")

    def test_marker_without_attribute_suffix_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="marker_attribute"):
            GeneratorConfig(marker_attribute="Signal")

    def test_root_artifact_with_directory_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="root_artifact"):
            GeneratorConfig(root_artifact="Scripts/Behavior.cs")

    def test_string_ordering_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="id_ordering"):
            GeneratorConfig(id_ordering="sorted")  # type: ignore[arg-type]

    def test_bad_generated_suffix_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="generated_suffix"):
            GeneratorConfig(generated_suffix="g")

    def test_zero_workers_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="max_workers"):
            GeneratorConfig(max_workers=0)


class TestGeneratorConfigFromMapping:
    """Tests for GeneratorConfig.from_mapping."""

    def test_empty_mapping_gives_defaults(self) -> None:
        assert GeneratorConfig.from_mapping({}) == GeneratorConfig()

    def test_kebab_case_keys(self) -> None:
        config = GeneratorConfig.from_mapping({"root-artifact": "Actor.cs", "max-workers": 2})
        assert config.root_artifact == "Actor.cs"
        assert config.max_workers == 2

    def test_ordering_string_converted(self) -> None:
        config = GeneratorConfig.from_mapping({"id_ordering": "Discovery"})
        assert config.id_ordering is IdOrdering.DISCOVERY

    def test_unknown_ordering_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="expected one of sorted, discovery"):
            GeneratorConfig.from_mapping({"id-ordering": "random"})

    def test_unknown_key_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown key"):
            GeneratorConfig.from_mapping({"colour": "red"})

    def test_bool_workers_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="must be an integer"):
            GeneratorConfig.from_mapping({"max-workers": True})
