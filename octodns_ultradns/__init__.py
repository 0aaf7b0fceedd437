#
#
#

__version__ = '0.0.1'

from .domain import (  # noqa: E402
    DEFAULT_WEIGHT,
    Mode,
    PoolRecordSpec,
    RecordType,
    Status,
    TrafficControllerPool,
    TrafficControllerPoolRecord,
    UpdatePoolRecord,
)
from .exceptions import (  # noqa: E402
    UltraDnsClientAlreadyExists,
    UltraDnsClientException,
    UltraDnsClientFault,
    UltraDnsClientNotFound,
    UltraDnsClientUnauthorized,
)
from .tcpool import TrafficControllerPoolApi  # noqa: E402
from .wsclient import UltraDnsWsClient  # noqa: E402

__all__ = [
    'DEFAULT_WEIGHT',
    'Mode',
    'PoolRecordSpec',
    'RecordType',
    'Status',
    'TrafficControllerPool',
    'TrafficControllerPoolApi',
    'TrafficControllerPoolRecord',
    'UltraDnsClientAlreadyExists',
    'UltraDnsClientException',
    'UltraDnsClientFault',
    'UltraDnsClientNotFound',
    'UltraDnsClientUnauthorized',
    'UltraDnsWsClient',
    'UpdatePoolRecord',
]
