"""Interactive helper that writes the ``.env`` file read by ``creativahub.config``."""

from __future__ import annotations

import secrets
from datetime import UTC, datetime
from pathlib import Path
from typing import Dict, Optional

import typer
from dotenv import dotenv_values
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError

APP = typer.Typer(add_completion=False, help="Create or update the CreativaHub .env file.")

BACKEND_DIR = Path(__file__).resolve().parents[1]
ROOT_DIR = BACKEND_DIR.parent
ENV_PATH = ROOT_DIR / ".env"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_existing_env(env_path: Path) -> Dict[str, str]:
    if not env_path.exists():
        return {}
    raw = dotenv_values(env_path)
    return {k: v for k, v in raw.items() if isinstance(k, str) and v is not None}


def _format_env_value(value: str) -> str:
    if value is None:
        return ""
    needs_quotes = any(ch in value for ch in ' #"\n')
    if needs_quotes:
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return value


def _bool_from_env(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


def _validate_database_connection(url: str) -> tuple[bool, str]:
    """Open a connection and run ``SELECT 1`` to check the URL."""
    engine = None
    try:
        engine = create_engine(url, pool_pre_ping=True)
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True, ""
    except SQLAlchemyError as exc:
        return False, str(exc)
    finally:
        if engine is not None:
            engine.dispose()


def _prompt_database_url(existing_value: Optional[str]) -> str:
    default_value = existing_value or "sqlite:///./creativahub.db"
    while True:
        candidate = typer.prompt("DATABASE_URL", default=default_value).strip()
        if not candidate:
            typer.secho("The connection URL cannot be empty.", fg=typer.colors.RED)
            continue
        if not typer.confirm("Check the connection now?", default=True):
            typer.echo("Saving the URL without testing it.")
            return candidate

        typer.echo("Connecting...")
        success, error_msg = _validate_database_connection(candidate)
        if success:
            typer.secho("Connection OK.", fg=typer.colors.GREEN)
            return candidate
        typer.secho("Could not connect:", fg=typer.colors.RED)
        typer.echo(error_msg)
        if not typer.confirm("Try another value?", default=True):
            typer.echo("Saving the URL even though the check failed.")
            return candidate
        default_value = candidate


def _prompt_log_level(existing_value: Optional[str]) -> str:
    default_value = (existing_value or "INFO").upper()
    while True:
        level = typer.prompt("LOG_LEVEL", default=default_value).strip().upper()
        if level in LOG_LEVELS:
            return level
        typer.secho(f"Pick one of: {', '.join(LOG_LEVELS)}", fg=typer.colors.RED)


def _prompt_hash_rounds(existing_value: Optional[str]) -> str:
    default_value = existing_value or "12"
    while True:
        rounds = typer.prompt("PASSWORD_HASH_ROUNDS", default=default_value).strip()
        if rounds.isdigit() and 4 <= int(rounds) <= 31:
            return rounds
        typer.secho("bcrypt accepts between 4 and 31 rounds.", fg=typer.colors.RED)


def _prompt_admin_password(existing_value: Optional[str]) -> str:
    default_password = existing_value or secrets.token_urlsafe(12)
    if existing_value:
        typer.echo("Press Enter to keep the current admin password.")
    else:
        typer.echo("A random admin password was generated; replace it if you like.")
    value = typer.prompt(
        "DEFAULT_ADMIN_PASSWORD",
        default=default_password,
        hide_input=True,
        show_default=False,
    ).strip()
    return value or default_password


def _collect_values(existing: Dict[str, str]) -> Dict[str, str]:
    values: Dict[str, str] = {}

    typer.echo("")
    name_default = existing.get("APP_NAME") or "CreativaHub"
    values["APP_NAME"] = typer.prompt("APP_NAME", default=name_default).strip() or name_default

    env_default = existing.get("APP_ENV") or existing.get("ENVIRONMENT") or "dev"
    app_env = typer.prompt("APP_ENV", default=env_default).strip() or env_default
    values["APP_ENV"] = app_env
    is_production = app_env.lower() in {"prod", "production"}

    debug_default = _bool_from_env(existing.get("DEBUG"), not is_production)
    values["DEBUG"] = "true" if typer.confirm("Enable DEBUG (echo SQL)?", default=debug_default) else "false"

    values["LOG_LEVEL"] = _prompt_log_level(existing.get("LOG_LEVEL"))
    values["DATABASE_URL"] = _prompt_database_url(existing.get("DATABASE_URL"))
    values["PASSWORD_HASH_ROUNDS"] = _prompt_hash_rounds(existing.get("PASSWORD_HASH_ROUNDS"))

    seed_default = _bool_from_env(existing.get("SEED_DEMO_DATA"), not is_production)
    seed = typer.confirm("Load demo data on startup?", default=seed_default)
    values["SEED_DEMO_DATA"] = "true" if seed else "false"

    email_default = existing.get("DEFAULT_ADMIN_EMAIL") or "admin@creativahub.dev"
    values["DEFAULT_ADMIN_EMAIL"] = typer.prompt("DEFAULT_ADMIN_EMAIL", default=email_default).strip() or email_default
    values["DEFAULT_ADMIN_PASSWORD"] = _prompt_admin_password(existing.get("DEFAULT_ADMIN_PASSWORD"))

    cors_default = existing.get("CORS_ORIGINS") or "http://localhost:5173,http://127.0.0.1:5173"
    values["CORS_ORIGINS"] = typer.prompt("CORS_ORIGINS (comma separated)", default=cors_default).strip()

    return values


def _write_env_file(env_path: Path, managed_values: Dict[str, str], previous_values: Dict[str, str]) -> None:
    extras = {k: v for k, v in previous_values.items() if k not in managed_values}

    lines = [
        "# Generated by creativahub-configure",
        f"# {datetime.now(UTC).replace(tzinfo=None).isoformat()}Z",
        "",
    ]
    for key, value in managed_values.items():
        if value is None:
            continue
        lines.append(f"{key}={_format_env_value(value)}")

    if extras:
        lines.extend(["", "# Preserved variables"])
        for key in sorted(extras):
            lines.append(f"{key}={_format_env_value(extras[key])}")

    lines.append("")
    env_path.write_text("\n".join(lines), encoding="utf-8")


@APP.command()
def configure(
    env_file: Path = typer.Option(ENV_PATH, "--env-file", help="Path of the .env file to write."),
) -> None:
    typer.secho("CreativaHub .env setup", fg=typer.colors.CYAN, bold=True)
    typer.echo(f"Target: {env_file}")
    existing = _load_existing_env(env_file)
    if existing:
        typer.echo("Found an existing .env; only managed keys will change.")

    values = _collect_values(existing)

    typer.echo("")
    typer.echo("Proposed values:")
    for key, value in values.items():
        masked = "********" if "PASSWORD" in key and value else value
        typer.echo(f"  - {key}: {masked}")

    if not typer.confirm("Write these values?", default=True):
        typer.echo("Nothing was changed.")
        raise typer.Exit(code=0)

    _write_env_file(env_file, values, existing)
    typer.secho(".env updated.", fg=typer.colors.GREEN)


if __name__ == "__main__":
    APP()
