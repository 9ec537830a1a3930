"""
Switch the active database provider in `config.env`.

Usage:
    python -m ops.switch_db aws      # primary
    python -m ops.switch_db azure    # backup

The managed keys (DB_PROVIDER, DB_HOST, DB_USER, DB_PASSWORD, DB_NAME) are
rewritten through python-dotenv, so every other line of the file keeps its
content and position. Keys missing from the file are appended. Restart the
API afterwards to pick up the new connection.

Provider credential sets come from `PROVIDER_PROFILES`; each field can be
overridden from the environment as `<PROVIDER>_DB_HOST`, `<PROVIDER>_DB_USER`,
`<PROVIDER>_DB_PASSWORD`, `<PROVIDER>_DB_NAME`.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import set_key

from core import settings
from core.logging import configure_logging

logger = logging.getLogger(__name__)


class SwitchError(RuntimeError):
    pass


@dataclass(frozen=True)
class ProviderProfile:
    host: str
    user: str
    password: str
    database: str

    def with_env_overrides(self, provider: str) -> ProviderProfile:
        prefix = f"{provider.upper()}_DB_"
        return ProviderProfile(
            host=os.environ.get(prefix + "HOST", self.host),
            user=os.environ.get(prefix + "USER", self.user),
            password=os.environ.get(prefix + "PASSWORD", self.password),
            database=os.environ.get(prefix + "NAME", self.database),
        )

    def as_env(self, provider: str) -> dict[str, str]:
        return {
            "DB_PROVIDER": provider,
            "DB_HOST": self.host,
            "DB_USER": self.user,
            "DB_PASSWORD": self.password,
            "DB_NAME": self.database,
        }


# Placeholders only; real credentials are supplied via <PROVIDER>_DB_* variables.
PROVIDER_PROFILES: dict[str, ProviderProfile] = {
    "aws": ProviderProfile(
        host="primary.aws.db.example.com",
        user="website_owner",
        password="change-me",
        database="website",
    ),
    "azure": ProviderProfile(
        host="backup.azure.db.example.com",
        user="website_owner",
        password="change-me",
        database="website",
    ),
}


def resolve_profile(provider: str) -> ProviderProfile:
    profile = PROVIDER_PROFILES.get(provider)
    if profile is None:
        choices = " or ".join(f'"{name}"' for name in PROVIDER_PROFILES)
        raise SwitchError(f"Invalid provider. Use {choices}")
    return profile.with_env_overrides(provider)


def switch_provider(provider: str, config_path: Path) -> dict[str, str]:
    """
    Point `config_path` at `provider`. Validation happens before the file is touched.
    """
    values = resolve_profile(provider).as_env(provider)
    if not config_path.is_file():
        raise SwitchError(f"Config file not found: {config_path}")

    for key, value in values.items():
        set_key(config_path, key, value, quote_mode="never")
    return values


def parse_args(argv: list[str] | None = None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(
        prog="switch-db",
        description="Switch between the AWS (primary) and Azure (backup) databases",
    )
    parser.add_argument("provider", nargs="?", help="aws | azure")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to the key=value config file (default: $CONFIG_ENV_PATH or config.env)",
    )
    return parser, parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    parser, args = parse_args(argv)
    if not args.provider:
        parser.print_usage()
        return 1

    config_path = args.config or settings.config_env_path()
    try:
        switch_provider(args.provider, config_path)
    except (SwitchError, OSError) as exc:
        logger.error("Error switching database: %s", exc)
        return 1

    logger.info("Switched to %s database", args.provider.upper())
    logger.info("Restart your application to use the new database")
    return 0


if __name__ == "__main__":
    sys.exit(main())
