from __future__ import annotations

import importlib

import pytest

from config import get_settings_module
from src.payroll_core.payroll_core.container import build_container
from src.payroll_core.payroll_core.database.connection import DatabaseConnection
from src.payroll_core.payroll_core.leave.mysql_leave_repository import MySQLLeaveRequestRepository
from src.payroll_core.payroll_core.main import bootstrap
from src.payroll_core.payroll_core.payroll.service import UnpaidLeaveDeductionService


@pytest.fixture(autouse=True)
def fresh_connection(monkeypatch):
    monkeypatch.setattr(DatabaseConnection, "_instance", None)


@pytest.mark.parametrize(
    "env, module",
    [
        ("production", "config.production"),
        ("prod", "config.production"),
        ("testing", "config.testing"),
        ("development", "config.development"),
        ("staging", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module


def test_build_container_wires_deduction_service():
    container = build_container(
        db_config={"host": "db", "port": "3307", "user": "payroll", "password": "x", "database": "payroll_db"}
    )

    assert isinstance(container.leave_requests_repo, MySQLLeaveRequestRepository)
    assert isinstance(container.deduction_service, UnpaidLeaveDeductionService)
    assert container.conn.config.port == 3307
    assert container.conn.config.host == "db"


def test_bootstrap_uses_testing_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    container = bootstrap()

    testing = importlib.import_module("config.testing")
    assert container.conn.config.database == testing.DB_CONFIG["database"]
    assert isinstance(container.deduction_service, UnpaidLeaveDeductionService)


@pytest.mark.parametrize("module", ["config.development", "config.testing", "config.production"])
def test_settings_modules_only_define_settings_that_are_read(module):
    settings = importlib.import_module(module)
    names = {name for name in vars(settings) if name.isupper()}

    assert names == {"DB_CONFIG", "LOG_LEVEL", "LOG_FORMAT", "DEPRECIATION_MAX_PERIODS"}
    assert set(settings.DB_CONFIG) == {"host", "port", "user", "password", "database"}
