"""Tests for application/identifiers/assigner.py."""

import pytest

from behaviorgen.application.identifiers.assigner import assign_identifiers, collect_event_origins
from behaviorgen.domain.exceptions.generation import DuplicateEventNameError
from behaviorgen.domain.model.builtin_events import BUILTIN_EVENTS
from behaviorgen.domain.model.enums import IdOrdering
from tests.factories import make_context


class TestBuiltinBlock:
    """Ids 1-9 are fixed."""

    def test_empty_snapshot_has_only_builtins(self) -> None:
        table = assign_identifiers(())
        assert len(table) == 9
        assert [event_id for event_id, _ in table.builtin_items] == list(range(1, 10))
        assert table.discovered_items == ()

    def test_builtin_names(self) -> None:
        table = assign_identifiers(())
        for event in BUILTIN_EVENTS:
            assert table.id_of(event.key) == event.event_id


class TestDiscoveredIds:
    """Discovered events take ids from 10."""

    def test_sorted_ordering(self) -> None:
        snapshot = (make_context("B.cs", "Zapped", "Jumped"), make_context("A.cs", "Landed"))
        table = assign_identifiers(snapshot)
        assert table.discovered_items == ((10, "Jumped"), (11, "Landed"), (12, "Zapped"))

    def test_discovery_ordering(self) -> None:
        snapshot = (make_context("B.cs", "Zapped", "Jumped"), make_context("A.cs", "Landed"))
        table = assign_identifiers(snapshot, IdOrdering.DISCOVERY)
        assert table.discovered_items == ((10, "Zapped"), (11, "Jumped"), (12, "Landed"))

    def test_sorted_independent_of_scan_order(self) -> None:
        a = make_context("A.cs", "Jumped")
        b = make_context("B.cs", "Died")
        assert assign_identifiers((a, b)).name_to_id == assign_identifiers((b, a)).name_to_id

    def test_discovery_order_only_moves_discovered_block(self) -> None:
        a = make_context("A.cs", "Jumped")
        b = make_context("B.cs", "Died")
        ab = assign_identifiers((a, b), IdOrdering.DISCOVERY)
        ba = assign_identifiers((b, a), IdOrdering.DISCOVERY)

        assert ab.builtin_items == ba.builtin_items
        assert ab.id_of("Jumped") == 10
        assert ba.id_of("Jumped") == 11
        assert set(ab.discovered_names) == set(ba.discovered_names)

    def test_bijection(self) -> None:
        snapshot = tuple(make_context(f"A{i}.cs", f"Event{i}") for i in range(25))
        table = assign_identifiers(snapshot)
        ids = list(table.id_to_name)
        assert ids == list(range(1, 10 + 25))
        for event_id, name in table.id_to_name.items():
            assert table.id_of(name) == event_id

    def test_origins(self) -> None:
        table = assign_identifiers((make_context("A.cs", "Jumped"), make_context("B.cs", "Died")))
        assert dict(table.origins) == {"Died": "B.cs", "Jumped": "A.cs"}


class TestDuplicates:
    """Duplicate event names halt generation."""

    def test_across_artifacts(self) -> None:
        snapshot = (make_context("A.cs", "Jumped"), make_context("B.cs", "Jumped"))
        with pytest.raises(DuplicateEventNameError) as exc_info:
            assign_identifiers(snapshot)
        assert exc_info.value.first_artifact == "A.cs"
        assert exc_info.value.second_artifact == "B.cs"

    def test_within_artifact(self) -> None:
        with pytest.raises(DuplicateEventNameError, match="twice in 'A.cs'"):
            collect_event_origins((make_context("A.cs", "Jumped", "Jumped"),))

    def test_shadowing_builtin(self) -> None:
        with pytest.raises(DuplicateEventNameError) as exc_info:
            assign_identifiers((make_context("A.cs", "ready"),))
        assert exc_info.value.first_artifact == "<builtin>"

    @pytest.mark.parametrize("ordering", list(IdOrdering))
    def test_every_ordering_rejects(self, ordering: IdOrdering) -> None:
        snapshot = (make_context("A.cs", "Jumped"), make_context("B.cs", "Jumped"))
        with pytest.raises(DuplicateEventNameError):
            assign_identifiers(snapshot, ordering)

    def test_none_snapshot_raises(self) -> None:
        with pytest.raises(TypeError, match="snapshot must not be None"):
            assign_identifiers(None)  # type: ignore[arg-type]
