r"""Basic example of loading and saving strongly-typed config data.

Usage:

    export ILO_CONFIG_HOME=$(pwd)  # Defaults to ~/.config/ilo/ if not specified
    python examples/quickstart.py

    # Optional: edit the URL in the file and run again to see it picked up
    sed -i 's#httpbin\.org/get#httpbin\.org/headers#g' example-config.json
    python examples/quickstart.py

    rm example-config.json
"""

from __future__ import annotations

from dataclasses import dataclass

import click

from ilo_config import Config, ConfigError

DEFAULT_URL = "https://httpbin.org/get"


@dataclass
class QuickstartConfig:
    # URL the app would fetch
    url: str | None = None
    # Free text saved alongside, e.g. how the file got created
    comment: str | None = None


@click.command()
@click.option("--name", default="example-config", show_default=True, help="Config name")
def main(name: str) -> None:
    try:
        config = Config.load(name, QuickstartConfig)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    data = config.data_mut()
    if data.comment is None:
        data.comment = "Created by the ilo-config quickstart example."
    if data.url is None:
        data.url = DEFAULT_URL

    click.echo(f"Configured URL: {data.url}")

    try:
        path = config.save()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Saved {path}")


if __name__ == "__main__":
    main()
