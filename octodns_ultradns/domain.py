#
#
#

"""Value types for UltraDNS traffic controller pools.

All types are immutable snapshots of state owned by the remote service. The
``from_wire`` constructors accept the attribute dicts found on the SOAP
response elements.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, Optional

# UltraDNS assigns this weight when a record is added without one
DEFAULT_WEIGHT = 2

_TRUTHY = ('enabled', 'true', 'yes', 'y', '1')


def _bool(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


def _int(value: Optional[str], default: int = 0) -> int:
    if value is None or value.strip() == '':
        return default
    return int(value)


def _non_negative(name: str, value: Optional[int]) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f'{name} must be an integer, got {value!r}')
    if value < 0:
        raise ValueError(f'{name} must be non-negative, got {value}')


class RecordType(Enum):
    A = 'A'
    CNAME = 'CNAME'

    @classmethod
    def from_wire(cls, value: Optional[str]) -> 'RecordType':
        # pools report the rrtype code, records report the mnemonic
        value = (value or '').strip().upper()
        if value in ('5', 'CNAME'):
            return cls.CNAME
        return cls.A


class Status(Enum):
    OK = 'OK'
    WARNING = 'WARNING'
    CRITICAL = 'CRITICAL'
    UNRECOGNIZED = 'UNRECOGNIZED'

    @classmethod
    def from_wire(cls, value: Optional[str]) -> 'Status':
        try:
            return cls((value or '').strip().upper())
        except ValueError:
            return cls.UNRECOGNIZED


class Mode(Enum):
    NORMAL = 'Normal'
    FORCE_ACTIVE = 'Force-Active'
    FORCE_FAIL = 'Force-Fail'

    @classmethod
    def from_wire(cls, value: Optional[str]) -> 'Mode':
        key = (value or '').strip().lower().replace(' ', '-').replace('_', '-')
        for mode in cls:
            if mode.value.lower() == key:
                return mode
        return cls.NORMAL


@dataclass(frozen=True)
class TrafficControllerPool:
    zone_id: str
    id: str
    name: str
    dname: str
    status_code: int = 0
    record_type: RecordType = RecordType.A

    @classmethod
    def from_wire(cls, zone_id: str, attrs: Dict[str, str]):
        return cls(
            zone_id=zone_id,
            id=attrs['PoolId'],
            name=attrs.get('description', ''),
            dname=attrs['PoolDName'],
            status_code=_int(attrs.get('PoolStatus')),
            record_type=RecordType.from_wire(attrs.get('PoolRecordType')),
        )


@dataclass(frozen=True)
class TrafficControllerPoolRecord:
    id: str
    pool_id: str
    points_to: str
    weight: int = DEFAULT_WEIGHT
    priority: int = 0
    type: RecordType = RecordType.A
    force_answer: str = 'Normal'
    probing_enabled: bool = False
    status: Status = Status.UNRECOGNIZED
    serving: bool = False
    description: str = ''

    @classmethod
    def from_wire(cls, attrs: Dict[str, str]):
        return cls(
            id=attrs['poolRecordID'],
            pool_id=attrs['poolId'],
            points_to=attrs['pointsTo'],
            weight=_int(attrs.get('weight'), DEFAULT_WEIGHT),
            priority=_int(attrs.get('priority')),
            type=RecordType.from_wire(attrs.get('recordType')),
            force_answer=attrs.get('forceAnswer', 'Normal'),
            probing_enabled=_bool(attrs.get('probing')),
            status=Status.from_wire(attrs.get('status')),
            serving=_bool(attrs.get('serving')),
            description=attrs.get('description', ''),
        )


@dataclass(frozen=True)
class PoolRecordSpec:
    """Current configuration of a pool record, as reported by the service.

    Use it to prime an :class:`UpdatePoolRecord`; the service replaces the
    whole record spec on update, so every field must be carried over.
    """

    description: str
    state: str
    points_to: str
    probing_enabled: bool
    all_fail_enabled: bool
    weight: int
    fail_over_delay: int
    threshold: int
    ttl: int

    @classmethod
    def from_wire(cls, attrs: Dict[str, str]):
        return cls(
            description=attrs.get('description', ''),
            state=attrs.get('recordState', Mode.NORMAL.value),
            points_to=attrs.get('pointsTo', ''),
            probing_enabled=_bool(attrs.get('probing')),
            all_fail_enabled=_bool(attrs.get('allFail')),
            weight=_int(attrs.get('weight'), DEFAULT_WEIGHT),
            fail_over_delay=_int(attrs.get('failOverDelay')),
            threshold=_int(attrs.get('threshold')),
            ttl=_int(attrs.get('TTL')),
        )


@dataclass(frozen=True)
class UpdatePoolRecord:
    """The replacement spec sent when updating a pool record.

    Normally derived from a fetched :class:`PoolRecordSpec`::

        spec = api.get_record_spec(record_id)
        api.update_record(record_id, UpdatePoolRecord.from_spec(spec, ttl=60))
    """

    points_to: str
    mode: Mode = Mode.NORMAL
    weight: int = DEFAULT_WEIGHT
    fail_over_delay: int = 0
    threshold: int = 1
    ttl: int = 0

    def __post_init__(self):
        if not self.points_to:
            raise ValueError('points_to is required')
        for name in ('weight', 'fail_over_delay', 'threshold', 'ttl'):
            _non_negative(name, getattr(self, name))

    @classmethod
    def from_spec(cls, spec: PoolRecordSpec, **overrides):
        unknown = set(overrides) - {f.name for f in fields(cls)}
        if unknown:
            raise TypeError(
                f'unknown UpdatePoolRecord fields: {", ".join(sorted(unknown))}'
            )
        values = {
            'points_to': spec.points_to,
            'mode': Mode.from_wire(spec.state),
            'weight': spec.weight,
            'fail_over_delay': spec.fail_over_delay,
            'threshold': spec.threshold,
            'ttl': spec.ttl,
        }
        values.update(overrides)
        return cls(**values)

    @classmethod
    def pointing_to(cls, spec: PoolRecordSpec, points_to: str):
        return cls.from_spec(spec, points_to=points_to)
