# -*- coding: utf-8 -*-
"""Transaction scope and batch results."""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fakes import FakeTransaction
from revit_mcp.transactions import transaction_scope, run_batch, SUCCESS, ERROR


@pytest.fixture(autouse=True)
def clear_log():
    FakeTransaction.log[:] = []


def test_commit_on_success():
    with transaction_scope(None, 'Write', FakeTransaction):
        pass
    assert FakeTransaction.log == [('start', 'Write'), ('commit', 'Write')]


def test_rollback_and_reraise():
    with pytest.raises(RuntimeError):
        with transaction_scope(None, 'Write', FakeTransaction):
            raise RuntimeError('host refused')
    assert FakeTransaction.log == [('start', 'Write'), ('rollback', 'Write')]


def test_batch_isolates_failures():
    def handler(item):
        if item['element_id'] == 2:
            raise ValueError('bad value')
        return {'value': item['element_id'] * 10}

    results, summary = run_batch([{'element_id': 1}, {'element_id': 2}, {'element_id': 3}], handler)
    assert summary == {'total': 3, 'success': 2, 'errors': 1}
    assert results[0] == {'value': 10, 'status': SUCCESS, 'element_id': 1}
    assert results[1] == {'status': ERROR, 'message': 'bad value', 'element_id': 2}


def test_batch_over_plain_ids():
    results, summary = run_batch([5, 6], lambda element_id: None)
    assert [r['element_id'] for r in results] == [5, 6]
    assert summary['errors'] == 0
