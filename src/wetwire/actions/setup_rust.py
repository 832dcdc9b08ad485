import attr
import marshmallow

import wetwire.contract


class SetupRustSchema(wetwire.contract.InputsSchema):
    toolchain = marshmallow.fields.String()
    targets = marshmallow.fields.String()
    components = marshmallow.fields.String()
    profile = marshmallow.fields.String()


@attr.s(frozen=True)
class SetupRust(wetwire.contract.Action):
    action_reference = 'dtolnay/rust-toolchain@stable'
    inputs_schema = SetupRustSchema

    toolchain = attr.ib(default='')
    targets = attr.ib(default='')
    components = attr.ib(default='')
    profile = attr.ib(default='')

    @classmethod
    def stable(cls, **kwargs):
        return cls(toolchain='stable', **kwargs)

    @classmethod
    def nightly(cls, **kwargs):
        return cls(toolchain='nightly', **kwargs)

    @classmethod
    def beta(cls, **kwargs):
        return cls(toolchain='beta', **kwargs)
