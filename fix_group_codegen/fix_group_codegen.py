import logging
import os

import click

from .pipeline import (
    CodeGenerationError,
    CodeGeneratorConfig,
    ConfigError,
    GroupManagerGenerator,
    JsonSchemaModel,
    SchemaModelError,
    load_config,
    resolve_source_dir,
)
from .pipeline.config import SRC_DIR_KEY


@click.command()
@click.option("--fix-version", "-f", "versions", multiple=True, type=str, help="FIX version to generate (repeatable, default: all)")
@click.option("--src-dir", "-s", default=None, type=click.Path(file_okay=False, resolve_path=True), help="Source root, used when SRC_DIR is not set in the environment")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("model", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
def fix_group_codegen(versions, src_dir, config, verbose, model):
    """Generate the repeating group managers of MODEL, a JSON schema model."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    try:
        if config is not None:
            config = load_config(config)
        else:
            config = CodeGeneratorConfig()

        # Environment wins over the option, the option over the config file
        properties = {SRC_DIR_KEY: src_dir or config.source_dir.value}
        config.source_dir = resolve_source_dir(os.environ, properties)

        schema_model = JsonSchemaModel.from_file(model)
        for version in versions or schema_model.versions():
            GroupManagerGenerator(version, schema_model, config).generate()
    except (ConfigError, SchemaModelError, CodeGenerationError) as e:
        raise click.ClickException(str(e)) from e
