"""Generation exceptions.

Raised when the aggregate state cannot produce a consistent emission.
These halt the whole run, unlike artifact-local diagnostics.
"""

from behaviorgen.domain.exceptions.base import BehaviorGenError


class DuplicateEventNameError(BehaviorGenError):
    """Two discovered handlers derive the same event name.

    The identifier table must stay a bijection, so this is never resolved
    by "last one wins".

    Attributes:
        event_name: Colliding event name
        first_artifact: Artifact that declared it first
        second_artifact: Artifact that declared it again (may equal first)
    """

    def __init__(self, event_name: str, first_artifact: str, second_artifact: str) -> None:
        # FAIL-FIRST validation
        if not event_name:
            raise ValueError("event_name must not be empty")
        if not first_artifact:
            raise ValueError("first_artifact must not be empty")
        if not second_artifact:
            raise ValueError("second_artifact must not be empty")

        self.event_name = event_name
        self.first_artifact = first_artifact
        self.second_artifact = second_artifact

        if first_artifact == second_artifact:
            where = f"twice in '{first_artifact}'"
        else:
            where = f"in '{first_artifact}' and '{second_artifact}'"
        super().__init__(f"Duplicate event name '{event_name}' declared {where}")


class RegistryError(BehaviorGenError):
    """Invalid aggregation registry operation.

    Attributes:
        artifact_id: Artifact the operation targeted
        reason: Why it was rejected
    """

    def __init__(self, artifact_id: str, reason: str) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.artifact_id = artifact_id
        self.reason = reason
        super().__init__(f"Registry rejected '{artifact_id}': {reason}")


class DuplicateArtifactError(BehaviorGenError):
    """Two input artifacts share an artifact_id (file name).

    Attributes:
        artifact_id: Shared artifact id
    """

    def __init__(self, artifact_id: str) -> None:
        if not artifact_id:
            raise ValueError("artifact_id must not be empty")

        self.artifact_id = artifact_id
        super().__init__(f"Duplicate artifact_id '{artifact_id}': source file names must be unique")
