import logging
from contextlib import contextmanager

from pagecraft.extensions import db

log = logging.getLogger(__name__)


@contextmanager
def transactional():
    """
    Commits the session when the block finishes, rolls it back otherwise.

    Stores only flush, so a section write and its audit entry become visible
    together or not at all.
    """
    try:
        yield db.session
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        log.debug("[db] rolled back after %s", type(exc).__name__)
        raise
