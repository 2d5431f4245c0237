"""
管理者認証まわりの運用CLI

    python -m app.utils.secrets_cli hash-password
    python -m app.utils.secrets_cli generate-secrets
    python -m app.utils.secrets_cli cleanup-login-attempts
    python -m app.utils.secrets_cli unlock 203.0.113.7
"""

import secrets
from typing import Optional

import click

from app.core.config import get_settings
from app.core.logging import configure_cli_logging, get_logger

logger = get_logger(__name__)

SESSION_SECRET_BYTES = 64
MIN_PASSWORD_LENGTH = 8


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="DEBUGログを出力する")
def cli(verbose: bool) -> None:
    """管理者認証の運用CLI"""
    configure_cli_logging(verbose)


@cli.command("hash-password")
@click.argument("password", required=False)
@click.option(
    "--rounds",
    type=click.IntRange(4, 31),
    default=None,
    help="bcryptのコストファクター（省略時はBCRYPT_ROUNDS）",
)
def hash_password_command(password: Optional[str], rounds: Optional[int]) -> None:
    """
    ADMIN_PASSWORD_HASH に設定するbcryptハッシュを生成する。

    PASSWORD を省略した場合は対話入力する。
    """
    password = _read_password(password)
    click.echo(f"ADMIN_PASSWORD_HASH={_hash(password, rounds)}")


@cli.command("generate-secrets")
@click.argument("password", required=False)
@click.option(
    "--rounds",
    type=click.IntRange(4, 31),
    default=None,
    help="bcryptのコストファクター（省略時はBCRYPT_ROUNDS）",
)
def generate_secrets(password: Optional[str], rounds: Optional[int]) -> None:
    """
    本番環境用の ADMIN_PASSWORD_HASH と SESSION_SECRET をまとめて生成する。

    PASSWORD を省略した場合は対話入力する。
    """
    password = _read_password(password)
    click.echo(f"ADMIN_PASSWORD_HASH={_hash(password, rounds)}")
    click.echo(f"SESSION_SECRET={secrets.token_hex(SESSION_SECRET_BYTES)}")


def _read_password(password: Optional[str]) -> str:
    if password is None:
        password = click.prompt(
            "Password", hide_input=True, confirmation_prompt=True, type=str
        )
    if not password or not password.strip():
        click.echo("✗ Password must not be empty", err=True)
        raise click.Abort()
    if len(password) < MIN_PASSWORD_LENGTH:
        click.echo(
            f"⚠ Password should be at least {MIN_PASSWORD_LENGTH} characters long",
            err=True,
        )
    return password


def _hash(password: str, rounds: Optional[int]) -> str:
    from app.infrastructure.security.password import hash_password

    return hash_password(password, rounds=rounds)


@cli.command("cleanup-login-attempts")
def cleanup_login_attempts() -> None:
    """期限切れのログイン試行記録を削除する"""
    from app.infrastructure.batch.tasks.login_attempt_cleanup import (
        LoginAttemptCleanupTask,
    )

    try:
        deleted = LoginAttemptCleanupTask().run()
    except Exception as e:
        click.echo(f"✗ Cleanup failed: {e}", err=True)
        raise click.Abort()
    click.echo(f"✓ Removed {deleted} records")


@cli.command("unlock")
@click.argument("ip_address")
def unlock(ip_address: str) -> None:
    """指定したIPアドレスのログイン試行記録を削除し、ロックアウトを解除する"""
    from app.infrastructure.database.connection import SessionLocal
    from app.infrastructure.repositories import LoginAttemptService

    if SessionLocal is None:
        click.echo("✗ Database not configured", err=True)
        raise click.Abort()

    settings = get_settings()
    db = SessionLocal()
    try:
        LoginAttemptService(
            db,
            max_attempts=settings.LOGIN_MAX_ATTEMPTS,
            lockout_minutes=settings.LOGIN_LOCKOUT_MINUTES,
        ).clear(ip_address)
    finally:
        db.close()

    logger.info(f"Login attempts cleared by CLI: {ip_address}")
    click.echo(f"✓ Unlocked {ip_address}")


if __name__ == "__main__":
    cli()
