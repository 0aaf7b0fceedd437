#
# Tests for pool value types and their wire parsing
#

from dataclasses import FrozenInstanceError
from unittest import TestCase

from octodns_ultradns.domain import (
    DEFAULT_WEIGHT,
    Mode,
    PoolRecordSpec,
    RecordType,
    Status,
    TrafficControllerPool,
    TrafficControllerPoolRecord,
    UpdatePoolRecord,
)


def _spec(**kwargs):
    attrs = {
        'description': 'uswest',
        'recordState': 'Normal',
        'pointsTo': '203.0.113.5',
        'probing': 'Enabled',
        'allFail': 'Disabled',
        'weight': '2',
        'failOverDelay': '0',
        'threshold': '1',
        'TTL': '300',
    }
    attrs.update(kwargs)
    return PoolRecordSpec.from_wire(attrs)


class TestEnums(TestCase):
    def test_record_type(self):
        self.assertEqual(RecordType.A, RecordType.from_wire('1'))
        self.assertEqual(RecordType.A, RecordType.from_wire('A'))
        self.assertEqual(RecordType.CNAME, RecordType.from_wire('5'))
        self.assertEqual(RecordType.CNAME, RecordType.from_wire('cname'))
        self.assertEqual(RecordType.A, RecordType.from_wire(None))

    def test_status(self):
        self.assertEqual(Status.OK, Status.from_wire('OK'))
        self.assertEqual(Status.CRITICAL, Status.from_wire('critical'))
        self.assertEqual(Status.UNRECOGNIZED, Status.from_wire('Flapping'))
        self.assertEqual(Status.UNRECOGNIZED, Status.from_wire(None))

    def test_mode(self):
        self.assertEqual(Mode.NORMAL, Mode.from_wire('Normal'))
        self.assertEqual(Mode.FORCE_ACTIVE, Mode.from_wire('Force Active'))
        self.assertEqual(Mode.FORCE_FAIL, Mode.from_wire('FORCE_FAIL'))
        self.assertEqual(Mode.NORMAL, Mode.from_wire('Active'))


class TestFromWire(TestCase):
    def test_pool(self):
        pool = TrafficControllerPool.from_wire(
            'Z1',
            {
                'description': 'uswest',
                'PoolId': 'P1',
                'PoolType': 'TC',
                'PoolRecordType': '1',
                'PoolDName': 'app-uswest1.unit.tests.',
                'PoolStatus': '1',
            },
        )
        self.assertEqual(
            TrafficControllerPool(
                zone_id='Z1',
                id='P1',
                name='uswest',
                dname='app-uswest1.unit.tests.',
                status_code=1,
                record_type=RecordType.A,
            ),
            pool,
        )

    def test_pool_record(self):
        record = TrafficControllerPoolRecord.from_wire(
            {
                'poolRecordID': 'R1',
                'poolId': 'P1',
                'pointsTo': 'www.unit.tests.',
                'weight': '10',
                'priority': '1',
                'recordType': 'CNAME',
                'forceAnswer': 'Normal',
                'probing': 'Enabled',
                'status': 'OK',
                'serving': 'Yes',
                'description': 'edge',
            }
        )
        self.assertEqual('R1', record.id)
        self.assertEqual('P1', record.pool_id)
        self.assertEqual('www.unit.tests.', record.points_to)
        self.assertEqual(10, record.weight)
        self.assertEqual(1, record.priority)
        self.assertEqual(RecordType.CNAME, record.type)
        self.assertTrue(record.probing_enabled)
        self.assertEqual(Status.OK, record.status)
        self.assertTrue(record.serving)
        self.assertEqual('edge', record.description)

    def test_pool_record_minimal(self):
        record = TrafficControllerPoolRecord.from_wire(
            {'poolRecordID': 'R1', 'poolId': 'P1', 'pointsTo': '1.2.3.4'}
        )
        self.assertEqual(DEFAULT_WEIGHT, record.weight)
        self.assertEqual(Status.UNRECOGNIZED, record.status)
        self.assertFalse(record.serving)

    def test_record_spec(self):
        spec = _spec()
        self.assertEqual(300, spec.ttl)
        self.assertEqual('203.0.113.5', spec.points_to)
        self.assertEqual(2, spec.weight)
        self.assertTrue(spec.probing_enabled)
        self.assertFalse(spec.all_fail_enabled)
        self.assertEqual(1, spec.threshold)

        spec = _spec(weight='', TTL=None)
        self.assertEqual(DEFAULT_WEIGHT, spec.weight)
        self.assertEqual(0, spec.ttl)

    def test_frozen(self):
        with self.assertRaises(FrozenInstanceError):
            _spec().ttl = 60


class TestUpdatePoolRecord(TestCase):
    def test_from_spec_copies_everything(self):
        spec = _spec(recordState='Force-Active', weight='6', failOverDelay='3')
        update = UpdatePoolRecord.from_spec(spec)
        self.assertEqual(
            UpdatePoolRecord(
                points_to='203.0.113.5',
                mode=Mode.FORCE_ACTIVE,
                weight=6,
                fail_over_delay=3,
                threshold=1,
                ttl=300,
            ),
            update,
        )

    def test_from_spec_overrides(self):
        spec = _spec()
        update = UpdatePoolRecord.from_spec(spec, ttl=60, weight=4)
        self.assertEqual(60, update.ttl)
        self.assertEqual(4, update.weight)
        self.assertEqual(spec.points_to, update.points_to)
        # the snapshot is untouched
        self.assertEqual(300, spec.ttl)

    def test_from_spec_unknown_field(self):
        with self.assertRaises(TypeError) as ctx:
            UpdatePoolRecord.from_spec(_spec(), colour='blue')
        self.assertIn('colour', str(ctx.exception))

    def test_pointing_to(self):
        update = UpdatePoolRecord.pointing_to(_spec(), '203.0.113.9')
        self.assertEqual('203.0.113.9', update.points_to)
        self.assertEqual(300, update.ttl)

    def test_pointing_to_fills_missing_pointer(self):
        update = UpdatePoolRecord.pointing_to(_spec(pointsTo=''), '1.2.3.4')
        self.assertEqual('1.2.3.4', update.points_to)

    def test_validation(self):
        with self.assertRaises(ValueError):
            UpdatePoolRecord(points_to='')
        with self.assertRaises(ValueError):
            UpdatePoolRecord(points_to='1.2.3.4', ttl=-1)
        with self.assertRaises(ValueError):
            UpdatePoolRecord(points_to='1.2.3.4', weight='2')
        with self.assertRaises(ValueError):
            UpdatePoolRecord.from_spec(_spec(), threshold=True)
