import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class CargoSchema(wetwire.contract.InputsSchema):
    command = marshmallow.fields.String()
    args = marshmallow.fields.String()
    use_cross = wetwire.utils.Boolean(data_key='use-cross')
    toolchain = marshmallow.fields.String()


@attr.s(frozen=True)
class Cargo(wetwire.contract.Action):
    action_reference = 'actions-rs/cargo@v1'
    inputs_schema = CargoSchema

    command = attr.ib(default='')
    args = attr.ib(default='')
    use_cross = attr.ib(default=False)
    toolchain = attr.ib(default='')

    @classmethod
    def build(cls, **kwargs):
        return cls(command='build', **kwargs)

    @classmethod
    def test(cls, **kwargs):
        return cls(command='test', **kwargs)

    @classmethod
    def check(cls, **kwargs):
        return cls(command='check', **kwargs)

    @classmethod
    def clippy(cls, **kwargs):
        return cls(command='clippy', **kwargs)

    @classmethod
    def fmt(cls, **kwargs):
        return cls(command='fmt', **kwargs)
