"""
Generic create/read/query pipeline shared by every tracker entity.

Architecture:
    HealthTrackerService → RecordService (one per entity) → RecordStore → Database

A RecordService is configured with:
- the fields a payload must carry
- a validation function for entity-specific format and uniqueness rules
- the foreign keys that must resolve in other stores
- a shaping function that fills in defaults before the record is built

Creation always validates everything before the single insert, so a
rejected payload never leaves anything behind.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel

from core.datetime_utils import MonotonicClock, ns_to_iso
from core.exceptions import MissingFieldsError, NotFoundError, ReferenceNotFoundError
from repositories import RecordStore

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)
RecordT = TypeVar("RecordT", bound=BaseModel)


@dataclass(frozen=True)
class ForeignKey:
    """A payload field whose value must be the id of a record in `store`."""
    field: str
    store: RecordStore
    referent: str


def is_blank(value: Any) -> bool:
    """True for values that count as "not provided"."""
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


class RecordService(Generic[PayloadT, RecordT]):
    """
    Validate-and-persist service for one entity kind.

    Read operations treat an empty result as an error: callers get
    NotFoundError rather than an empty list.
    """

    def __init__(
        self,
        store: RecordStore,
        record_model: Type[RecordT],
        *,
        entity: str,
        plural: str,
        clock: MonotonicClock,
        id_factory: Callable[[], str],
        required: Sequence[str] = (),
        nonzero: Sequence[str] = (),
        references: Sequence[ForeignKey] = (),
        validate: Optional[Callable[[PayloadT], None]] = None,
        shape: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None,
        timestamp_field: str = "created_at",
    ):
        """
        Args:
            store: Backing store for this entity.
            record_model: Pydantic model of a stored record.
            entity: Human-readable entity name ("Medication reminder").
            plural: Human-readable plural used in empty-result messages.
            clock: Time source for creation timestamps.
            id_factory: Generator of fresh record ids.
            required: Payload fields that must be present and non-blank.
            nonzero: Required numeric fields for which 0 also counts as missing.
            references: Foreign keys checked in order.
            validate: Entity-specific checks; raises InvalidPayloadError.
            shape: Fills defaults into the payload data before construction.
            timestamp_field: Record field that receives the creation time.
        """
        self._store = store
        self._model = record_model
        self._entity = entity
        self._plural = plural
        self._clock = clock
        self._id_factory = id_factory
        self._required = tuple(required)
        self._nonzero = frozenset(nonzero)
        self._references = tuple(references)
        self._validate = validate
        self._shape = shape
        self._timestamp_field = timestamp_field

    @property
    def store(self) -> RecordStore:
        return self._store

    def create(self, payload: PayloadT, **extra: Any) -> RecordT:
        """
        Validate a payload and persist it as a new record.

        Args:
            payload: Caller-supplied domain fields.
            **extra: Fields supplied by the service rather than the caller
                (for example the owning principal).

        Returns:
            The stored record, including its id and timestamp.

        Raises:
            InvalidPayloadError: If any check fails. Nothing is stored.
        """
        data = payload.model_dump()

        missing = [name for name in self._required if self._is_missing(name, data.get(name))]
        if missing:
            logger.warning(
                f"Rejected {self._entity.lower()} payload: required fields missing",
                extra={"missing_fields": missing}
            )
            raise MissingFieldsError(missing_fields=missing)

        if self._validate is not None:
            self._validate(payload)

        for fk in self._references:
            value = data.get(fk.field)
            if fk.store.get(value) is None:
                logger.warning(
                    f"Rejected {self._entity.lower()} payload: {fk.referent} not found",
                    extra={"field": fk.field, "value": value}
                )
                raise ReferenceNotFoundError(referent=fk.referent, field=fk.field, value=value)

        # Optional fields left out by the caller fall back to record defaults
        data = {name: value for name, value in data.items() if value is not None}
        if self._shape is not None:
            data = self._shape(data)
        data.update(extra)

        record_id = self._id_factory()
        timestamp = self._clock.now()
        record = self._model(id=record_id, **data, **{self._timestamp_field: timestamp})

        self._store.insert(record_id, record)
        logger.info(
            f"{self._entity} created",
            extra={"record_id": record_id, self._timestamp_field: ns_to_iso(timestamp)}
        )
        return record

    def _is_missing(self, name: str, value: Any) -> bool:
        if is_blank(value):
            return True
        return name in self._nonzero and value == 0

    def get_by_id(self, record_id: str) -> RecordT:
        """
        Raises:
            NotFoundError: If no record has this id.
        """
        record = self._store.get(record_id)
        if record is None:
            raise NotFoundError(f"{self._entity} not found", id=record_id)
        return record

    def get_all(self) -> List[RecordT]:
        """
        Raises:
            NotFoundError: If the store is empty.
        """
        records = list(self._store.values())
        if not records:
            raise NotFoundError(f"No {self._plural} found.")
        return records

    def filter_by(self, field: str, value: Any) -> List[RecordT]:
        """
        All records whose `field` equals `value`, in insertion order.

        Raises:
            NotFoundError: If nothing matches.
        """
        matches = [record for record in self._store.values() if getattr(record, field) == value]
        if not matches:
            raise NotFoundError(f"No {self._plural} found.", **{field: value})
        return matches

    def first_by(self, field: str, value: Any) -> Optional[RecordT]:
        """First record whose `field` equals `value`, or None."""
        return next(
            (record for record in self._store.values() if getattr(record, field) == value),
            None
        )
