"""
This module contains marshmallow schemas for the config and for service requests.
"""

import typing
from marshmallow import fields, decorators, validate, Schema, ValidationError, EXCLUDE


class Config:
    """
    Service configuration.
    """

    __slots__ = ("host", "port", "max_length")

    def __init__(self, host: str = "0.0.0.0", port: int = 8080, max_length: int = 1000):
        self.host = host
        self.port = port
        self.max_length = max_length

    def __repr__(self) -> str:
        return f"Config(host={self.host!r}, port={self.port!r}, max_length={self.max_length!r})"


class ConfigSchema(Schema):
    """
    Schema for the config.
    """

    host = fields.Str(load_default="0.0.0.0")
    port = fields.Int(load_default=8080, validate=validate.Range(min=1, max=65535))
    max_length = fields.Int(load_default=1000, data_key="maxLength", validate=validate.Range(min=1))

    @decorators.post_load
    def make_obj(self, data: typing.Dict[str, typing.Any], **kwargs): # pylint: disable=unused-argument, missing-function-docstring
        return Config(**data)


class RenderRequest:
    """
    A request to convert an expression.
    """

    __slots__ = ("expression",)

    def __init__(self, expression: str):
        self.expression = expression


class RenderRequestSchema(Schema):
    """
    Schema for a conversion request.

    Expressions longer than max_length are rejected.
    """

    class Meta: # pylint: disable=missing-class-docstring
        unknown = EXCLUDE

    expression = fields.Str(required=True)

    def __init__(self, max_length: int = 1000, **kwargs):
        super().__init__(**kwargs)
        self.max_length = max_length

    @decorators.validates("expression")
    def validate_expression(self, value: str, **kwargs): # pylint: disable=unused-argument, missing-function-docstring
        if not value.strip():
            raise ValidationError("Expression cannot be empty.")
        if len(value) > self.max_length:
            raise ValidationError(f"Expression cannot be longer than {self.max_length} characters.")

    @decorators.post_load
    def make_obj(self, data: typing.Dict[str, typing.Any], **kwargs): # pylint: disable=unused-argument, missing-function-docstring
        return RenderRequest(**data)


config = ConfigSchema()
