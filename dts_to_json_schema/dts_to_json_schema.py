import json
import logging
from pathlib import Path

import click

from .pipeline import DEFAULT_SOURCE_URL, AtomicWriter, GeneratorConfig, PipelineGenerator, SchemaGenerationError, load_source


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--root", "-r", default=None, type=str, help="Declaration merged at the top level of the schema")
@click.option("--seed", "-s", multiple=True, type=str, help="Name to resolve (repeatable, replaces the default seeds)")
@click.option("--timeout", default=30.0, type=float, help="Seconds to wait when fetching a remote source")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("source", default=DEFAULT_SOURCE_URL, type=str)
@click.argument("output", default="ast-spec.json", type=click.Path(resolve_path=True))
def dts_to_json_schema(config, root, seed, timeout, verbose, source, output):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if config is not None:
            with open(config) as f:
                config = GeneratorConfig.from_dict(json.load(f))
        else:
            config = GeneratorConfig()

        # CLI options override the config file
        if root is not None:
            config.root_name = root
        if seed:
            config.root_names = list(seed)

        text = load_source(source, timeout=timeout)
        out = PipelineGenerator(text, config).generate()
        AtomicWriter().write(Path(output), out)
    except SchemaGenerationError as e:
        raise click.ClickException(str(e)) from e

    click.echo("done")
