"""
Tests for settings, dependency wiring and the command-line caller.
"""

import io
import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from motominder.application.motorcycles.dtos import (
    InsertMotorcycleRequest,
    ListMotorcyclesRequest,
)
from motominder.cli import EXIT_FAILED, EXIT_OK, main
from motominder.core.config import Settings
from motominder.domain.motorcycles.entities import AuthorizationRole
from motominder.infrastructure.motorcycles.auth_service import StaticAuthServiceAdapter
from motominder.interfaces.motorcycles.dependencies import (
    get_delete_motorcycle_interactor,
    get_get_motorcycle_interactor,
    get_insert_motorcycle_interactor,
    get_list_motorcycles_interactor,
    get_motorcycle_repository,
    get_update_motorcycle_interactor,
)
from motominder.shared.logging import configure_logging
from tests.factories import HARLEY_VIN, HONDA_VIN


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        for name in ("LOG_LEVEL", "DEBUG", "WRITE_ROLE", "READ_ROLE"):
            monkeypatch.delenv(name, raising=False)
        config = Settings(_env_file=None)
        assert config.project_name == "MotoMinder"
        assert config.log_level == "INFO"
        assert config.write_role is AuthorizationRole.ADMIN
        assert config.read_role is AuthorizationRole.USER

    def test_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("WRITE_ROLE", "user")
        monkeypatch.setenv("LOG_LEVEL", "warning")
        config = Settings(_env_file=None)
        assert config.write_role is AuthorizationRole.USER
        assert config.log_level == "WARNING"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_debug_forces_debug_logging(self) -> None:
        config = Settings(_env_file=None, debug=True, log_level="ERROR")
        assert config.effective_log_level == "DEBUG"

    def test_role_names_are_case_insensitive(self, monkeypatch) -> None:
        monkeypatch.setenv("WRITE_ROLE", "ADMIN")
        monkeypatch.setenv("READ_ROLE", " Guest ")
        config = Settings(_env_file=None)
        assert config.write_role is AuthorizationRole.ADMIN
        assert config.read_role is AuthorizationRole.GUEST

    def test_unknown_role_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, write_role="superuser")


class TestLogging:
    def test_records_go_to_the_given_stream(self) -> None:
        stream = io.StringIO()
        logger = configure_logging("WARNING", stream=stream)

        logging.getLogger("motominder.tests").warning("engine %s", "stalled")
        logging.getLogger("motominder.tests").info("hidden")

        output = stream.getvalue()
        assert logger.level == logging.WARNING
        assert "WARNING" in output
        assert "motominder.tests | engine stalled" in output
        assert "hidden" not in output

    def test_reconfiguring_replaces_the_handler(self) -> None:
        first, second = io.StringIO(), io.StringIO()
        configure_logging("INFO", stream=first)
        logger = configure_logging("INFO", stream=second)
        foreign = logging.NullHandler()
        logger.addHandler(foreign)
        try:
            configure_logging("INFO", stream=second)
            logging.getLogger("motominder.tests").info("once")
            assert first.getvalue() == ""
            assert second.getvalue().count("once") == 1
            assert foreign in logger.handlers
        finally:
            logger.removeHandler(foreign)


class TestDependencies:
    def test_write_role_comes_from_settings(self) -> None:
        config = Settings(_env_file=None, write_role=AuthorizationRole.USER)
        repository = get_motorcycle_repository()
        user = StaticAuthServiceAdapter.with_roles(AuthorizationRole.USER)

        interactor = get_insert_motorcycle_interactor(repository, user, config)
        response = interactor.handle(
            InsertMotorcycleRequest(make="Honda", model="Shadow", year=2006, vin=HONDA_VIN)
        )

        assert response.succeeded

    def test_read_role_comes_from_settings(self) -> None:
        config = Settings(_env_file=None, read_role=AuthorizationRole.ADMIN)
        user = StaticAuthServiceAdapter.with_roles(AuthorizationRole.USER)

        interactor = get_list_motorcycles_interactor(
            get_motorcycle_repository(), user, config
        )

        assert not interactor.handle(ListMotorcyclesRequest()).succeeded

    def test_every_interactor_can_be_built(self) -> None:
        repository = get_motorcycle_repository()
        admin = StaticAuthServiceAdapter.with_roles(AuthorizationRole.ADMIN)
        for factory in (
            get_insert_motorcycle_interactor,
            get_update_motorcycle_interactor,
            get_delete_motorcycle_interactor,
            get_list_motorcycles_interactor,
            get_get_motorcycle_interactor,
        ):
            assert factory(repository, admin) is not None


class TestCli:
    def test_insert_prints_view_model(self, capsys) -> None:
        code = main(
            ["insert", "--make", "Honda", "--model", "Shadow", "--year", "2006", "--vin", HONDA_VIN]
        )
        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert out["id"] == 1
        assert out["error"] is None
        assert out["message"] == "Successfully inserted a new motorcycle."

    def test_insert_as_user_is_rejected(self, capsys) -> None:
        code = main(
            [
                "--role", "user",
                "insert", "--make", "Honda", "--model", "Shadow",
                "--year", "2006", "--vin", HONDA_VIN,
            ]
        )
        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_FAILED
        assert out["id"] == 0
        assert "authorization role" in out["error"]

    def test_insert_invalid_record_is_reported(self, capsys) -> None:
        code = main(
            ["insert", "--make", "Honda", "--model", "Shadow", "--year", "2006", "--vin", "SHORT"]
        )
        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_FAILED
        assert out["id"] == 0
        assert "vin" in out["error"]

    def test_load_inserts_and_lists(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "motorcycles.json"
        path.write_text(
            json.dumps(
                [
                    {"make": "Honda", "model": "Shadow", "year": 2006, "vin": HONDA_VIN},
                    {"make": "Harley Davidson", "model": "Softail", "year": 2014, "vin": HARLEY_VIN},
                    {"make": "Honda", "model": "Rebel", "year": 2020, "vin": HONDA_VIN},
                ]
            ),
            encoding="utf-8",
        )

        code = main(["load", str(path)])

        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_FAILED
        assert [v["id"] for v in out["inserted"]] == [1, 2, 0]
        assert "same VIN" in out["inserted"][2]["error"]
        assert out["repository"]["count"] == 2

    def test_load_missing_file(self, tmp_path: Path) -> None:
        assert main(["load", str(tmp_path / "nope.json")]) == EXIT_FAILED

    def test_load_rejects_non_list(self, tmp_path: Path) -> None:
        path = tmp_path / "motorcycle.json"
        path.write_text(json.dumps({"make": "Honda"}), encoding="utf-8")
        assert main(["load", str(path)]) == EXIT_FAILED

    def test_load_reports_non_object_entries(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "motorcycles.json"
        path.write_text(
            json.dumps(
                [
                    1,
                    "x",
                    None,
                    {"make": "Honda", "model": "Shadow", "year": 2006, "vin": HONDA_VIN},
                ]
            ),
            encoding="utf-8",
        )

        code = main(["load", str(path)])

        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_FAILED
        assert [v["id"] for v in out["inserted"]] == [0, 0, 0, 1]
        assert "must be a JSON object, got int" in out["inserted"][0]["error"]
        assert "got NoneType" in out["inserted"][2]["error"]
        assert out["repository"]["count"] == 1

    def test_anonymous_load(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "motorcycles.json"
        path.write_text(
            json.dumps([{"make": "Honda", "model": "Shadow", "year": 2006, "vin": HONDA_VIN}]),
            encoding="utf-8",
        )

        code = main(["--anonymous", "load", str(path)])

        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_FAILED
        assert "not being authenticated" in out["inserted"][0]["error"]
        assert out["repository"]["error"] is not None
