# -*- coding: utf-8 -*-
"""Transaction scope and per-item batch results for write routes."""
import logging
from contextlib import contextmanager

logger = logging.getLogger(__name__)

SUCCESS = 'success'
ERROR = 'error'


@contextmanager
def transaction_scope(doc, name, transaction_factory=None):
    """Start a transaction, commit on success, roll back and re-raise on error."""
    if transaction_factory is None:
        from pyrevit import DB
        transaction_factory = DB.Transaction
    transaction = transaction_factory(doc, name)
    transaction.Start()
    try:
        yield transaction
    except Exception:
        logger.error("Transaction '%s' failed, rolling back", name)
        transaction.RollBack()
        raise
    transaction.Commit()


def run_batch(items, handler, key='element_id'):
    """Apply ``handler`` to every item, collecting one result dict per item.

    ``handler`` returns a dict (``status`` defaults to success). An exception
    marks only that item as failed. Returns (results, summary).
    """
    results = []
    for item in items:
        ident = item.get(key) if isinstance(item, dict) else item
        try:
            result = dict(handler(item) or {})
            result.setdefault('status', SUCCESS)
        except Exception as e:
            logger.warning("Error processing %s %s: %s", key, ident, e)
            result = {'status': ERROR, 'message': str(e)}
        result.setdefault(key, ident)
        results.append(result)

    success_count = len([r for r in results if r['status'] == SUCCESS])
    summary = {
        'total': len(results),
        'success': success_count,
        'errors': len(results) - success_count,
    }
    return results, summary
