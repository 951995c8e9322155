"""
Value Objects - References and credentials.

A reference is a closed two-variant value: either a typed record returned by
an earlier call, or a plain identifier string (key or id). `from_value` is
the only way in and rejects every other shape before any request is built.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Generic, Optional, TypeVar, Union

from ..exceptions import InputValidationError
from .entities import Issue, Project, Record, Version


R = TypeVar("R", bound=Record)


@dataclass(frozen=True)
class Credential:
    """Basic-auth credential (username or email plus password or API token)."""

    username: str
    secret: str

    def as_auth(self) -> tuple[str, str]:
        return (self.username, self.secret)

    def __repr__(self) -> str:
        return f"Credential(username={self.username!r}, secret='***')"


@dataclass(frozen=True)
class EntityRef(ABC, Generic[R]):
    """Base reference: a typed record or an identifier string."""

    RECORD_TYPE: ClassVar[type] = Record
    KIND: ClassVar[str] = "entity"

    value: Union[str, R]

    @classmethod
    def from_value(cls, value: object, parameter: Optional[str] = None) -> "EntityRef[R]":
        """
        Validate a primary input.

        Args:
            value: A record of the expected type, an identifier string, or
                an existing reference of this kind
            parameter: Parameter name used in the error message

        Raises:
            InputValidationError: For any other shape, including blank strings
                and records without an identifier
        """
        parameter = parameter or cls.KIND
        if isinstance(value, cls):
            return value
        if isinstance(value, cls.RECORD_TYPE):
            ref = cls(value)
            if not ref.identifier.strip():
                raise InputValidationError(
                    f"{cls.RECORD_TYPE.TAG} given for '{parameter}' has no identifier",
                    parameter=parameter,
                    expected=f"{cls.RECORD_TYPE.TAG} with key or id",
                    actual=f"{cls.RECORD_TYPE.TAG} without identifier",
                )
            return ref
        if isinstance(value, str):
            if not value.strip():
                raise InputValidationError(
                    f"Parameter '{parameter}' must not be empty",
                    parameter=parameter,
                    expected=f"{cls.RECORD_TYPE.TAG} or str",
                    actual="empty str",
                )
            return cls(value.strip())
        raise InputValidationError(
            f"Wrong object type provided for {parameter}. "
            f"Expected [{cls.RECORD_TYPE.TAG}] or [str], "
            f"but was {type(value).__name__}",
            parameter=parameter,
            expected=f"{cls.RECORD_TYPE.TAG} or str",
            actual=type(value).__name__,
        )

    @property
    def is_typed(self) -> bool:
        return not isinstance(self.value, str)

    @property
    def record(self) -> Optional[R]:
        return None if isinstance(self.value, str) else self.value

    @property
    def identifier(self) -> str:
        if isinstance(self.value, str):
            return self.value
        return self._record_identifier(self.value)

    @abstractmethod
    def _record_identifier(self, record: R) -> str:
        """Identifier used in request paths for a typed record."""

    def __str__(self) -> str:
        return self.identifier


class IssueRef(EntityRef[Issue]):
    RECORD_TYPE: ClassVar[type] = Issue
    KIND: ClassVar[str] = "issue"

    def _record_identifier(self, record: Issue) -> str:
        return record.key or record.id


class ProjectRef(EntityRef[Project]):
    RECORD_TYPE: ClassVar[type] = Project
    KIND: ClassVar[str] = "project"

    def _record_identifier(self, record: Project) -> str:
        return record.key or record.id


class VersionRef(EntityRef[Version]):
    """Versions are addressed by numeric id only."""

    RECORD_TYPE: ClassVar[type] = Version
    KIND: ClassVar[str] = "version"

    def _record_identifier(self, record: Version) -> str:
        return record.id or ""
