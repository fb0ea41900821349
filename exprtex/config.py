"""
Service config.

Config JSON format:
- "host": The address to bind the server to. (string, default "0.0.0.0")
- "port": The port to run the server on. (int, default 8080)
- "maxLength": The maximum length of an expression accepted by the server. (int, default 1000)

The path to the config file is taken from the EXPRTEX_CONFIG_JSON environment variable.
If EXPRTEX_SERVER_PORT is set, it overrides the port in the config.
"""

import json
import logging
import marshmallow
import os
import typing
from . import schemas, util


logger = logging.getLogger("exprtex")


def parse_config(data: typing.Any) -> typing.Tuple[schemas.Config, typing.Optional[str]]:
    """
    Load the config from a dict.

    Returns the config and an error message if there are errors, or None if no errors.
    Invalid fields are set to their defaults.
    """
    if not isinstance(data, dict):
        return schemas.config.load({}), "Config must be a JSON object. Falling back to empty config."
    try:
        return schemas.config.load(data), None
    except marshmallow.ValidationError as e:
        msg = "Encountered errors while loading the config JSON:\n"
        msg += util.format_validation_error(e)
        msg += "\n\nConfig will be loaded with those values set to their defaults."
        # Ignore errors by loading only the valid fields
        valid = {k: v for k, v in data.items() if k not in e.messages}
        try:
            return schemas.config.load(valid), msg
        except marshmallow.ValidationError:
            msg += "\n\nEncountered more errors trying to load the valid fields. Falling back to empty config."
            return schemas.config.load({}), msg


def load_config(config_file: typing.Optional[str] = None) -> schemas.Config:
    """
    Load the config from a file and the environment.

    If config_file is None, the path is taken from EXPRTEX_CONFIG_JSON; if that is not
    set either, the default config is used. Errors are logged, never raised.
    """
    config_file = config_file or os.environ.get("EXPRTEX_CONFIG_JSON")
    if config_file:
        try:
            with open(config_file, "r") as f:
                conf, err = parse_config(json.load(f))
            if err:
                logger.error(err)
        except (json.JSONDecodeError, FileNotFoundError) as e:
            logger.error(f"Config does not exist or is not valid json: {e}. Falling back to empty config.")
            conf = schemas.config.load({})
    else:
        conf = schemas.config.load({})

    if os.environ.get("EXPRTEX_SERVER_PORT"):
        try:
            conf.port = schemas.config.load({"port": os.environ["EXPRTEX_SERVER_PORT"]}).port
        except marshmallow.ValidationError as e:
            logger.error(f"Invalid port specified: {util.format_validation_error(e)} Defaulting to {conf.port}.")
    logger.debug(f"Loaded config: {conf!r}")
    return conf
