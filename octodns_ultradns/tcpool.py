#
#
#

import logging

from . import soap
from .domain import (
    PoolRecordSpec,
    TrafficControllerPool,
    TrafficControllerPoolRecord,
)
from .exceptions import UltraDnsClientException, UltraDnsClientNotFound

TC_POOL_TYPE = 'TC'
# rrtype code for A, the only record type a fresh TC pool is created with
_POOL_RECORD_TYPE_A = 1


class TrafficControllerPoolApi(object):
    """Traffic controller pools of a single zone.

    Implements TrafficControllerPoolClient on top of an UltraDnsWsClient,
    one SOAP call per operation. Holds no entity state, instances can be
    shared between threads as long as the underlying client is.

    With ``strict_deletes`` unset, deleting a pool or record that no longer
    exists is a no-op; set it to get UltraDnsClientNotFound instead.
    """

    def __init__(self, client, zone_name, strict_deletes=False):
        if not zone_name:
            raise ValueError('zone_name is required')
        self.zone_name = self._append_dot(zone_name)
        self.log = logging.getLogger(
            f'TrafficControllerPoolApi[{self.zone_name}]'
        )
        self.log.debug(
            '__init__: zone_name=%s, strict_deletes=%s',
            self.zone_name,
            strict_deletes,
        )
        self._client = client
        self.strict_deletes = strict_deletes

    def _append_dot(self, value):
        if value[-1] == '.':
            return value
        return f'{value}.'

    def _check_fqdn(self, label, value):
        if not value or value[-1] != '.':
            raise ValueError(
                f'{label} must be fully qualified with a trailing dot, '
                f'got {value!r}'
            )

    def _check_non_negative(self, label, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f'{label} must be an integer, got {value!r}')
        if value < 0:
            raise ValueError(f'{label} must be non-negative, got {value}')

    def _required_text(self, response, name):
        value = soap.find_text(response, name)
        if not value:
            raise UltraDnsClientException(f'{name} missing from response')
        return value

    def _delete(self, what, method, **params):
        try:
            self._client.call(method, **params)
        except UltraDnsClientNotFound:
            if self.strict_deletes:
                raise
            self.log.debug('%s: already gone, nothing to delete', what)

    # --- Pools -------------------------------------------------------------

    def list(self):
        self.log.debug('list:')
        response = self._client.call(
            'getLoadBalancingPoolsByZone',
            zoneName=self.zone_name,
            lbPoolType=TC_POOL_TYPE,
        )
        pools = []
        for lb_pool in soap.find_all(response, 'LBPoolData'):
            zone_id = lb_pool.get('zoneid', '')
            for pool in soap.find_all(lb_pool, 'PoolData'):
                if pool.get('PoolType', TC_POOL_TYPE) != TC_POOL_TYPE:
                    continue
                pools.append(
                    TrafficControllerPool.from_wire(zone_id, pool.attrib)
                )
        self.log.debug('list:   found %d pools', len(pools))
        return pools

    def create_pool_for_hostname(self, name, hostname):
        self.log.debug(
            'create_pool_for_hostname: name=%s, hostname=%s', name, hostname
        )
        if not name:
            raise ValueError('name is required')
        self._check_fqdn('hostname', hostname)
        response = self._client.call(
            'addTCLBPool',
            transactionID=None,
            zoneName=self.zone_name,
            hostName=hostname,
            description=name,
            poolRecordType=_POOL_RECORD_TYPE_A,
            failOver='Enabled',
            probing='Enabled',
            maxActive=0,
            rrGUID=0,
        )
        return self._required_text(response, 'TCPoolID')

    def get_name_by_dname(self, dname):
        self.log.debug('get_name_by_dname: dname=%s', dname)
        self._check_fqdn('dname', dname)
        try:
            response = self._client.call(
                'getPoolForPoolHostName', hostName=dname
            )
        except UltraDnsClientNotFound:
            self.log.debug('get_name_by_dname:   no pool for %s', dname)
            return None
        for elem in response.iter():
            name = elem.get('PoolName')
            if name:
                return name
        return None

    def delete(self, id):
        self.log.debug('delete: id=%s', id)
        self._delete(
            'delete',
            'deleteLBPool',
            transactionID=None,
            lbPoolID=id,
            DeleteAll='Yes',
            retainRecordId=None,
        )

    # --- Pool records ------------------------------------------------------

    def list_records(self, pool_id):
        self.log.debug('list_records: pool_id=%s', pool_id)
        response = self._client.call('getPoolRecords', poolId=pool_id)
        return [
            TrafficControllerPoolRecord.from_wire(elem.attrib)
            for elem in soap.find_all(response, 'PoolRecordData')
        ]

    def _add_record(self, points_to, pool_id, ttl, **weight):
        if not points_to:
            raise ValueError('points_to is required')
        self._check_non_negative('ttl', ttl)
        params = {
            'transactionID': None,
            'poolID': pool_id,
            'pointsTo': points_to,
            'priority': None,
            'failOverDelay': None,
            'ttl': ttl,
        }
        # leaving weight out entirely lets the service apply its default
        params.update(weight)
        params.update({'mode': None, 'threshold': None})
        response = self._client.call('addPoolRecord', **params)
        return self._required_text(response, 'poolRecordID')

    def add_record_to_pool_with_ttl(self, points_to, pool_id, ttl):
        self.log.debug(
            'add_record_to_pool_with_ttl: points_to=%s, pool_id=%s, ttl=%s',
            points_to,
            pool_id,
            ttl,
        )
        return self._add_record(points_to, pool_id, ttl)

    def add_record_to_pool_with_ttl_and_weight(
        self, points_to, pool_id, ttl, weight
    ):
        self.log.debug(
            'add_record_to_pool_with_ttl_and_weight: points_to=%s, '
            'pool_id=%s, ttl=%s, weight=%s',
            points_to,
            pool_id,
            ttl,
            weight,
        )
        self._check_non_negative('weight', weight)
        return self._add_record(points_to, pool_id, ttl, weight=weight)

    def get_record_spec(self, pool_record_id):
        self.log.debug('get_record_spec: pool_record_id=%s', pool_record_id)
        try:
            response = self._client.call(
                'getPoolRecordSpec', poolRecordId=pool_record_id
            )
        except UltraDnsClientNotFound:
            self.log.debug('get_record_spec:   %s not found', pool_record_id)
            return None
        elem = soap.find(response, 'PoolRecordSpec')
        if elem is None:
            return None
        return PoolRecordSpec.from_wire(elem.attrib)

    def update_record(self, pool_record_id, update):
        self.log.debug(
            'update_record: pool_record_id=%s, update=%s',
            pool_record_id,
            update,
        )
        self._client.call(
            'updatePoolRecord',
            transactionID=None,
            poolRecordID=pool_record_id,
            parentPoolId=None,
            childPoolId=None,
            pointsTo=update.points_to,
            priority=None,
            failOverDelay=update.fail_over_delay,
            ttl=update.ttl,
            weight=update.weight,
            mode=update.mode.value,
            threshold=update.threshold,
        )

    def delete_record(self, pool_record_id):
        self.log.debug('delete_record: pool_record_id=%s', pool_record_id)
        self._delete(
            'delete_record',
            'deletePoolRecord',
            transactionID=None,
            poolRecordID=pool_record_id,
            parentPoolId=None,
            childPoolId=None,
            retainRecordID=None,
        )
