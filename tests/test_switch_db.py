# Tests for the database provider switch script.

from __future__ import annotations

from pathlib import Path

import pytest

from ops import switch_db

CONFIG = """# Backend configuration
PORT=5000
DB_PROVIDER=aws
DB_HOST=old-host
DB_PORT=5432
DB_USER=old-user
DB_PASSWORD=old-password
DB_NAME=old-db
JWT_SECRET=keep-me
"""


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.env"
    path.write_text(CONFIG, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clear_profile_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    for provider in ("AWS", "AZURE"):
        for field in ("HOST", "USER", "PASSWORD", "NAME"):
            monkeypatch.delenv(f"{provider}_DB_{field}", raising=False)


def test_switch_to_azure_rewrites_managed_keys_only(config_file: Path) -> None:
    assert switch_db.main(["azure", "--config", str(config_file)]) == 0

    lines = config_file.read_text(encoding="utf-8").splitlines()
    profile = switch_db.PROVIDER_PROFILES["azure"]
    assert lines == [
        "# Backend configuration",
        "PORT=5000",
        "DB_PROVIDER=azure",
        f"DB_HOST={profile.host}",
        "DB_PORT=5432",
        f"DB_USER={profile.user}",
        f"DB_PASSWORD={profile.password}",
        f"DB_NAME={profile.database}",
        "JWT_SECRET=keep-me",
    ]


def test_switch_twice_is_idempotent(config_file: Path) -> None:
    assert switch_db.main(["azure", "--config", str(config_file)]) == 0
    first = config_file.read_bytes()

    assert switch_db.main(["azure", "--config", str(config_file)]) == 0
    assert config_file.read_bytes() == first


def test_switch_back_to_aws(config_file: Path) -> None:
    switch_db.main(["azure", "--config", str(config_file)])
    switch_db.main(["aws", "--config", str(config_file)])

    text = config_file.read_text(encoding="utf-8")
    assert "DB_PROVIDER=aws\n" in text
    assert f"DB_HOST={switch_db.PROVIDER_PROFILES['aws'].host}\n" in text


def test_invalid_provider_leaves_file_untouched(config_file: Path) -> None:
    before = config_file.read_bytes()

    assert switch_db.main(["gcp", "--config", str(config_file)]) == 1
    assert config_file.read_bytes() == before


def test_missing_provider_prints_usage(config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    before = config_file.read_bytes()

    assert switch_db.main(["--config", str(config_file)]) == 1
    assert "usage" in capsys.readouterr().out.lower()
    assert config_file.read_bytes() == before


def test_missing_config_file_fails(tmp_path: Path) -> None:
    missing = tmp_path / "nope.env"

    assert switch_db.main(["aws", "--config", str(missing)]) == 1
    assert not missing.exists()


def test_environment_overrides_profile(config_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AZURE_DB_PASSWORD", "from-env")

    values = switch_db.switch_provider("azure", config_file)

    assert values["DB_PASSWORD"] == "from-env"
    assert "DB_PASSWORD=from-env\n" in config_file.read_text(encoding="utf-8")


def test_missing_keys_are_appended(tmp_path: Path) -> None:
    path = tmp_path / "config.env"
    path.write_text("PORT=5000\n", encoding="utf-8")

    switch_db.switch_provider("aws", path)

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "PORT=5000"
    assert [line.split("=", 1)[0] for line in lines[1:]] == [
        "DB_PROVIDER",
        "DB_HOST",
        "DB_USER",
        "DB_PASSWORD",
        "DB_NAME",
    ]
