"""Tests for the store client and the sweep entry point."""

import pytest
from unittest.mock import patch

from pennywise import sweep
from pennywise.database import Database
from pennywise.exceptions import DataUnavailable


class TestDatabase:
    """Tests for store availability."""

    def test_without_url_is_unavailable(self):
        db = Database()
        assert not db.is_available
        with pytest.raises(DataUnavailable):
            db.session()

    def test_bad_url_is_unavailable(self):
        db = Database("notadialect://nowhere")
        assert not db.is_available

    def test_sqlite_session(self):
        db = Database("sqlite:///:memory:")
        db.create_all()
        session = db.session()
        try:
            assert session.bind is db.engine
        finally:
            session.close()
            db.dispose()


class TestSweepCommand:
    """Tests for the command-line sweep."""

    def test_aborts_when_store_unavailable(self):
        with patch.object(sweep, "database", Database()):
            assert sweep.main() == 1
