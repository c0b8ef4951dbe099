"""Command line access to the settings database."""

from __future__ import annotations

from typing import Optional

import click
from sqlalchemy.exc import StatementError

from .config import BaseConfig
from .context import SettingsContext, create_settings_context
from .logging_config import setup_logging
from .models.setting import SettingType
from .options import parse_options


@click.group()
@click.option("--database-url", envvar="SITESETTINGS_DATABASE_URL", default=None, help="SQLAlchemy database URL")
@click.option("--verbose", is_flag=True, default=False, help="Log to the console and log file")
@click.pass_context
def cli(ctx: click.Context, database_url: Optional[str], verbose: bool) -> None:
    """Inspect and edit site settings."""

    try:
        config = BaseConfig(database_url=database_url)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    if verbose:
        setup_logging(config)
    settings_ctx = create_settings_context(config)
    ctx.obj = settings_ctx
    ctx.call_on_close(settings_ctx.close)


@cli.command("init-db")
@click.pass_obj
def init_db(settings_ctx: SettingsContext) -> None:
    """Create the setting table."""

    click.echo(f"Settings table ready at {settings_ctx.config.DATABASE_URL}")


@cli.command("get")
@click.argument("key")
@click.pass_obj
def get_setting(settings_ctx: SettingsContext, key: str) -> None:
    """Print the resolved value of KEY."""

    value = settings_ctx.settings.get(key)
    if value is None:
        if settings_ctx.setting_repo.get(key) is None:
            raise click.ClickException(f"No setting or config item named {key!r}")
        value = ""
    click.echo(value)


@cli.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
def set_setting(settings_ctx: SettingsContext, key: str, value: str) -> None:
    """Store VALUE for the existing setting KEY."""

    if settings_ctx.setting_repo.get(key) is None:
        raise click.ClickException(f"No stored setting named {key!r}; use 'add' first")
    settings_ctx.settings.set(key, value)
    click.echo(f"{key} = {value}")


@cli.command("list")
@click.pass_obj
def list_settings(settings_ctx: SettingsContext) -> None:
    """Print every stored setting with its resolved value."""

    for slug, value in sorted(settings_ctx.settings.get_all().items()):
        click.echo(f"{slug} = {'' if value is None else value}")


@cli.command("add")
@click.option("--slug", required=True)
@click.option("--title", default="")
@click.option("--description", default=None)
@click.option(
    "--type",
    "setting_type",
    type=click.Choice([t.value for t in SettingType]),
    default=SettingType.TEXT.value,
    show_default=True,
)
@click.option("--default", "default_value", default=None)
@click.option("--value", default=None)
@click.option("--options", default=None, help="value=label pairs separated by '|'")
@click.option("--module", default=None)
@click.option("--order", default=0, type=int)
@click.option("--required/--optional", "is_required", default=False)
@click.option("--gui/--no-gui", "is_gui", default=True)
@click.pass_obj
def add_setting(
    settings_ctx: SettingsContext,
    slug: str,
    title: str,
    description: Optional[str],
    setting_type: str,
    default_value: Optional[str],
    value: Optional[str],
    options: Optional[str],
    module: Optional[str],
    order: int,
    is_required: bool,
    is_gui: bool,
) -> None:
    """Create a new stored setting."""

    fields = {
        "slug": slug,
        "title": title,
        "description": description,
        "type": setting_type,
        "default": default_value,
        "value": value,
        "options": options,
        "module": module,
        "order": order,
        "is_required": is_required,
        "is_gui": is_gui,
    }

    try:
        setting_id = settings_ctx.settings.add(fields)
    except StatementError as exc:
        # IntegrityError for a duplicate slug lands here too
        raise click.ClickException(f"Could not add setting {slug!r}: {exc.orig or exc}") from exc
    click.echo(f"Added setting {slug} (id {setting_id})")


@cli.command("delete")
@click.argument("slug")
@click.pass_obj
def delete_setting(settings_ctx: SettingsContext, slug: str) -> None:
    """Delete the stored setting SLUG."""

    if not settings_ctx.settings.delete(slug):
        raise click.ClickException(f"No stored setting named {slug!r}")
    click.echo(f"Deleted setting {slug}")


@cli.command("options")
@click.argument("slug")
@click.pass_obj
def show_options(settings_ctx: SettingsContext, slug: str) -> None:
    """Print the choices of the stored setting SLUG."""

    setting = settings_ctx.setting_repo.get(slug)
    if setting is None:
        raise click.ClickException(f"No stored setting named {slug!r}")
    for value, label in parse_options(setting.options, settings_ctx.options).items():
        click.echo(f"{value}\t{label}")


def main() -> None:  # pragma: no cover - console entry point
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
