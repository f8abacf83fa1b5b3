"""Generator configuration.

Defaults match the Godot Behavior convention: a partial class named
Behavior, delegates marked [Signal] and named *EventHandler, the root
fragment emitted for Behavior.cs.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields

from behaviorgen.domain.exceptions.configuration import ConfigurationError
from behaviorgen.domain.model.enums import IdOrdering


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Generator configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        container_name: Class name the syntactic filter accepts
        marker_attribute: Attribute class marking handler delegates
        handler_suffix: Required delegate name suffix, stripped to get the event name
        root_artifact: File name whose fragment gets connect/disconnect and tables
        dispatch_method: Single dispatch entry point every closure calls
        id_ordering: How discovered events are ordered before id assignment
        generated_suffix: Marker inserted before the extension of output files
        max_workers: Extraction threads. None or 1 = sequential.
    """

    container_name: str = "Behavior"
    marker_attribute: str = "SignalAttribute"
    handler_suffix: str = "EventHandler"
    root_artifact: str = "Behavior.cs"
    dispatch_method: str = "OnSignal"
    id_ordering: IdOrdering = IdOrdering.SORTED
    generated_suffix: str = ".g"
    max_workers: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for key in ("container_name", "marker_attribute", "handler_suffix", "dispatch_method"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.isidentifier():
                raise ConfigurationError(key, f"must be a C# identifier, got {value!r}")

        if not self.marker_attribute.endswith("Attribute"):
            raise ConfigurationError(
                "marker_attribute", f"must end with 'Attribute', got {self.marker_attribute!r}"
            )

        if not self.root_artifact or "/" in self.root_artifact or "\\" in self.root_artifact:
            raise ConfigurationError(
                "root_artifact", f"must be a bare file name, got {self.root_artifact!r}"
            )

        if not isinstance(self.id_ordering, IdOrdering):
            raise ConfigurationError(
                "id_ordering", f"must be IdOrdering, got {type(self.id_ordering).__name__}"
            )

        if not self.generated_suffix.startswith(".") or len(self.generated_suffix) < 2:
            raise ConfigurationError(
                "generated_suffix", f"must look like '.g', got {self.generated_suffix!r}"
            )

        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError("max_workers", f"must be >= 1, got {self.max_workers}")

    @property
    def parallel(self) -> bool:
        """Whether extraction runs on a thread pool."""
        return self.max_workers is not None and self.max_workers > 1

    def is_root(self, artifact_id: str) -> bool:
        """Check if artifact_id names the root artifact."""
        return artifact_id == self.root_artifact

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> GeneratorConfig:
        """Build config from a plain mapping (e.g. a TOML table).

        Keys may use kebab-case or snake_case.

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, object] = {}

        for raw_key, value in data.items():
            key = raw_key.replace("-", "_")
            if key not in known:
                raise ConfigurationError(raw_key, "unknown key")
            kwargs[key] = value

        ordering = kwargs.get("id_ordering")
        if isinstance(ordering, str):
            try:
                kwargs["id_ordering"] = IdOrdering(ordering.lower())
            except ValueError as e:
                choices = ", ".join(o.value for o in IdOrdering)
                raise ConfigurationError(
                    "id_ordering", f"expected one of {choices}, got {ordering!r}"
                ) from e

        workers = kwargs.get("max_workers")
        if workers is not None and (isinstance(workers, bool) or not isinstance(workers, int)):
            raise ConfigurationError("max_workers", f"must be an integer, got {workers!r}")

        return cls(**kwargs)  # type: ignore[arg-type]
