"""Shared fixtures: a fresh on-disk database per test."""

from unittest.mock import patch

import pytest

import services.db as db_mod


@pytest.fixture()
def con(tmp_path):
    """Initialised database in tmp_path, installed as the process-wide connection."""
    connection = db_mod.connect(str(tmp_path / "data" / "notebook.db"))
    with patch.object(db_mod, "_CONN", connection):
        yield connection
    connection.close()
