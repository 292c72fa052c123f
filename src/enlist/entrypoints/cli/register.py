"""ENLIST ``register`` command.

Registers one user through the message bus and prints the uniform response.

Behavior
- The response message goes to **stdout** (plain text, or ``{"msg": ...}``
  with ``--json``); glyph-decorated notices go to **stderr**.
- Exit status is 0 for the success response and 1 for the failure response.
- ``--no-newsletter`` makes the newsletter service refuse subscriptions, which
  exercises the failure path end to end.

Failure modes
- Invalid ``ENLIST_*`` configuration → ``ClickException`` naming the variable.
"""

from __future__ import annotations

import asyncio
import json

import click

from enlist import config
from enlist.bootstrap.bootstrap import bootstrap
from enlist.domain.model import RegistrationResult
from enlist.interfaces.redactor import RedactorMode
from enlist.service_layer.commands import RegisterUser

from .helpers import error, success, warn

REDACTOR_MODE_META = "enlist.redactor_mode"


@click.command()
@click.argument("name")
@click.argument("email")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the response as a JSON object instead of plain text.",
)
@click.option(
    "--no-newsletter",
    "newsletter_disabled",
    is_flag=True,
    help="Simulate an unavailable newsletter service.",
)
@click.pass_context
def register(
    ctx: click.Context, name: str, email: str, as_json: bool, newsletter_disabled: bool
) -> None:
    """Register NAME <EMAIL> and subscribe them to the newsletter."""
    redactor_mode = ctx.find_root().meta.get(REDACTOR_MODE_META)
    try:
        app = bootstrap(
            redactor_mode=RedactorMode(redactor_mode) if redactor_mode else None,
            newsletter_available=False if newsletter_disabled else None,
        )
    except config.ConfigError as e:
        raise click.ClickException(str(e)) from e

    if newsletter_disabled:
        warn("Newsletter service disabled; registration will fail.")

    result = asyncio.run(app.message_bus.handle(RegisterUser(name=name, email=email)))
    assert isinstance(result, RegistrationResult)

    click.echo(json.dumps(result.as_dict()) if as_json else result.msg)
    if result.ok:
        success(f"Registered {name}.")
    else:
        error("Registration failed.")
        ctx.exit(1)
